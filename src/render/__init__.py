"""Render surface for session snapshots.

Provides:
- format_time / timer_phase: countdown display helpers
- SessionView: snapshot consumed by every display
- BoardRenderer: Markdown and HTML session board
"""

from src.render.board import BoardRenderer
from src.render.formatter import TimerPhase, format_time, progress_percent, timer_phase
from src.render.view import ParticipantView, SessionView

__all__ = [
    "BoardRenderer",
    "ParticipantView",
    "SessionView",
    "TimerPhase",
    "format_time",
    "progress_percent",
    "timer_phase",
]
