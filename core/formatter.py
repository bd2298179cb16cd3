import math
from typing import List, Optional, Tuple

UNKNOWN = "unknown"

_MS_PER_SECOND = 1000


def format_duration(millis: float) -> str:
    """
    Human readable breakdown of a millisecond count, e.g.
    "2 days 03 hours 00 minutes 05 seconds" or "45 seconds".

    Starts at the largest non-zero unit; every smaller unit after it is
    shown and zero-padded to two digits. Negative input reads as zero.
    """
    total_seconds = max(int(millis), 0) // _MS_PER_SECOND
    minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    parts: List[str] = []
    for value, unit in ((days, "days"), (hours, "hours"), (minutes, "minutes")):
        if parts or value != 0:
            parts.append(f"{value:02d} {unit}" if parts else f"{value} {unit}")
    parts.append(f"{seconds:02d} seconds" if parts else f"{seconds} seconds")
    return " ".join(parts)


def extrapolate(path_count: int, cumulative_progress: float,
                elapsed_ms: float) -> Optional[Tuple[int, int]]:
    """
    (expected total paths, expected total time in ms), or None when the
    progress is too small to divide by: zero, or so close to it that the
    quotients overflow to infinity.
    """
    if cumulative_progress <= 0:
        return None
    expected_paths = path_count / cumulative_progress
    expected_time = elapsed_ms / cumulative_progress
    if not (math.isfinite(expected_paths) and math.isfinite(expected_time)):
        return None
    return int(expected_paths), int(expected_time)


def render(path_count: int, cumulative_progress: float, elapsed_ms: float) -> str:
    """One progress line: paths so far, extrapolated total, percent and ETA."""
    elapsed_ms = max(int(elapsed_ms), 0)   # clock stepped backwards
    percent = f"{100.0 * cumulative_progress:g}%"

    totals = extrapolate(path_count, cumulative_progress, elapsed_ms)
    if totals is None:
        return f"  [PATH]:  {path_count:,} / {UNKNOWN} ({percent})    Time to finish:  {UNKNOWN}"

    expected_paths, expected_time = totals
    remaining = max(expected_time - elapsed_ms, 0)
    return (
        f"  [PATH]:  {path_count:,} / {expected_paths:,} ({percent})"
        f"    Time to finish:  {format_duration(remaining)}"
    )


def render_record(event: str, state_id, action_id: int) -> str:
    return f"[RECORD]: {event}, StateId={state_id}, ActionId={action_id}"
