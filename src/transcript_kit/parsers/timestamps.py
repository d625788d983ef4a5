"""Timestamp normalization for subtitle formats.

Accepts ``HH:MM:SS.mmm``, ``HH:MM:SS,mmm`` and ``MM:SS.mmm``. A field that is
not a non-negative number counts as 0 instead of failing the whole cue.
"""

import re

CUE_RANGE_DELIMITER = "-->"

_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _field(value: str) -> float:
    value = value.strip()
    if not _NUMBER_RE.fullmatch(value):
        return 0.0
    return float(value)


def parse_timestamp(value: str) -> float | None:
    """Return seconds for a timestamp, or None if it has the wrong shape."""
    parts = value.strip().split(":")
    if len(parts) == 3:
        hours, minutes, seconds = parts
    elif len(parts) == 2:
        hours = "0"
        minutes, seconds = parts
    else:
        return None

    return _field(hours) * 3600 + _field(minutes) * 60 + _field(seconds.replace(",", "."))


def parse_cue_range(line: str) -> tuple[float | None, float | None]:
    """Split a ``start --> end`` line into normalized start and end seconds.

    Cue settings trailing the end timestamp (``align:start`` etc.) are ignored.
    """
    start_raw, _, end_raw = line.partition(CUE_RANGE_DELIMITER)
    start = parse_timestamp(start_raw)

    end_tokens = end_raw.split()
    end = parse_timestamp(end_tokens[0]) if end_tokens else None
    return start, end
