# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum

DEFAULT_WORK_SEC = 20 * 60
DEFAULT_SHORT_BREAK_SEC = 5 * 60
DEFAULT_LONG_BREAK_SEC = 15 * 60
DEFAULT_SHORT_BREAKS_BEFORE_LONG = 4


class Phase(str, Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def is_break(self) -> bool:
        return self is not Phase.WORK


@dataclass(frozen=True)
class SessionConfig:
    work_sec: int = DEFAULT_WORK_SEC
    short_break_sec: int = DEFAULT_SHORT_BREAK_SEC
    long_break_sec: int = DEFAULT_LONG_BREAK_SEC
    short_breaks_before_long: int = DEFAULT_SHORT_BREAKS_BEFORE_LONG

    def __post_init__(self):
        for name in ("work_sec", "short_break_sec", "long_break_sec", "short_breaks_before_long"):
            if int(getattr(self, name)) <= 0:
                raise ValueError(f"{name} must be positive.")

    @classmethod
    def from_minutes(
        cls, work: int, short_break: int, long_break: int, short_breaks_before_long: int
    ) -> "SessionConfig":
        return cls(
            work_sec=int(work) * 60,
            short_break_sec=int(short_break) * 60,
            long_break_sec=int(long_break) * 60,
            short_breaks_before_long=int(short_breaks_before_long),
        )

    def break_duration(self, break_count: int) -> int:
        # long break once enough short breaks have been taken
        if break_count >= self.short_breaks_before_long:
            return self.long_break_sec
        return self.short_break_sec
