# -*- coding: utf-8 -*-


def format_time(seconds: int) -> str:
    # minutes are not wrapped into hours
    m = max(0, int(seconds)) // 60
    s = max(0, int(seconds)) % 60
    return f"{m:02d}:{s:02d}"
