"""Log identity helpers."""

import re

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def derive_key(date: str, clock_in: str) -> str:
    return _NON_ALNUM.sub("", f"{date}{clock_in}")


def canonical_time(time_text: str, meridiem: str) -> str:
    """Render ``H:MM`` + meridiem as the stored ``HH:MM AM`` form."""
    hour_text, minute_text = time_text.strip().split(":")
    return f"{int(hour_text):02d}:{minute_text} {meridiem.strip().upper()}"
