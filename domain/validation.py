# -*- coding: utf-8 -*-

from domain.models import SessionConfig


class ConfigError(ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


def _parse_positive_int(text: str, field: str, message: str) -> int:
    raw = (text or "").strip()
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(field, message) from None
    if value <= 0:
        raise ConfigError(field, message)
    return value


def parse_minutes(text: str, field: str = "minutes") -> int:
    return _parse_positive_int(text, field, "Enter a valid number of minutes.")


def parse_count(text: str, field: str = "count") -> int:
    return _parse_positive_int(text, field, "Enter a valid number.")


def build_config(work: str, short_break: str, long_break: str, count: str) -> SessionConfig:
    """
    Parse the settings form fields into a SessionConfig.
    Raises ConfigError on the first invalid field.
    """
    return SessionConfig.from_minutes(
        work=parse_minutes(work, "work"),
        short_break=parse_minutes(short_break, "short_break"),
        long_break=parse_minutes(long_break, "long_break"),
        short_breaks_before_long=parse_count(count, "short_breaks_before_long"),
    )
