"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import io
from typing import Callable

import pytest

from fitness_app.logging_config import configure_logging

configure_logging()

from fitness_app.services.session_store import UserSession, create_session
from fitness_app.shell import FitnessShell


@pytest.fixture
def session() -> UserSession:
    """Provide an empty session."""

    return create_session("Alex", 31, 72.5)


@pytest.fixture
def populated_session(session: UserSession) -> UserSession:
    """Session holding the Run/Lift scenario plus a few extra routines."""

    session.record_routine("Cardio", "Run", 30, 300, average_heart_rate=140)
    session.record_routine("Strength", "Lift", 45, 200, sets=3, reps_per_set=10)
    session.record_routine("Cardio", "Evening Run", 20, 200, average_heart_rate=150)
    session.record_routine("Strength", "Deadlift Day", 60, 450, sets=5, reps_per_set=5)
    return session


@pytest.fixture
def make_shell() -> Callable[[str], tuple[FitnessShell, io.StringIO]]:
    """Return a factory building a shell over scripted input."""

    def _make(script: str) -> tuple[FitnessShell, io.StringIO]:
        stdout = io.StringIO()
        return FitnessShell(io.StringIO(script), stdout), stdout

    return _make
