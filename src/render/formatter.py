"""Display helpers for countdown values."""

from enum import Enum

CRITICAL_SECONDS = 5
WARNING_FRACTION = 0.2


class TimerPhase(str, Enum):
    """Urgency band of the current countdown, for display styling."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"
    EXPIRED = "expired"


def format_time(total_seconds: int) -> str:
    """Format seconds as MM:SS with both parts zero-padded.

    Minutes are not wrapped into hours, so 100 minutes is "100:00".
    """
    total_seconds = max(0, int(total_seconds))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def timer_phase(remaining: int, total: int) -> TimerPhase:
    """Classify the countdown for display.

    Critical wins over warning: the last five seconds are critical even
    when 20% of the turn is longer than that.
    """
    if total <= 0 or remaining <= 0:
        return TimerPhase.EXPIRED
    if remaining <= CRITICAL_SECONDS:
        return TimerPhase.CRITICAL
    if remaining <= total * WARNING_FRACTION:
        return TimerPhase.WARNING
    return TimerPhase.NORMAL


def progress_percent(remaining: int, total: int) -> float:
    """Share of the turn still left, 0-100."""
    if total <= 0:
        return 0.0
    return round(remaining / total * 100, 1)
