"""Canonical data models for Turn Timer.

This module exports all domain models used throughout the application:
- BaseEntity: Base class with id, timestamp
- Participant: A speaker and their turn status
- Session: One meeting round with turn order and countdown
"""

from src.models.base import BaseEntity
from src.models.participant import Participant, ParticipantStatus
from src.models.session import AllocationMode, MeetingState, Session

__all__ = [
    # Base
    "BaseEntity",
    # Participant
    "Participant",
    "ParticipantStatus",
    # Session
    "Session",
    "MeetingState",
    "AllocationMode",
]
