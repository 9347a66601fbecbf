"""In-memory routine store for one user's console session."""
from __future__ import annotations

import logging
from typing import Any

from fitness_app.models.routines import Routine, build_routine
from fitness_app.models.schemas import UserProfile


logger = logging.getLogger(__name__)


class UserSession:
    """Ordered, append-only collection of routines owned by one user."""

    def __init__(self, profile: UserProfile) -> None:
        self.profile = profile
        self._routines: list[Routine] = []

    def __len__(self) -> int:
        return len(self._routines)

    @property
    def routines(self) -> list[Routine]:
        """Copy of every stored routine in insertion order."""
        return list(self._routines)

    def add_routine(self, routine: Routine) -> None:
        """Append a routine; duplicates are kept."""

        self._routines.append(routine)
        logger.info(
            "Added %s routine %r for %s (%d stored)",
            routine.routine_type,
            routine.name,
            self.profile.name,
            len(self._routines),
        )

    def record_routine(
        self,
        routine_type: str,
        name: str,
        duration_minutes: int,
        calories_burned: int,
        **variant_fields: Any,
    ) -> Routine:
        """Build a routine of the given variant and append it."""

        routine = build_routine(
            routine_type,
            name,
            duration_minutes,
            calories_burned,
            **variant_fields,
        )
        self.add_routine(routine)
        return routine

    def search_by_name(self, query: str) -> list[Routine]:
        """
        Find routines whose name contains ``query``, ignoring case.

        An empty query matches every routine. Results keep insertion order.
        """
        needle = query.lower()
        matches = [r for r in self._routines if needle in r.name.lower()]
        logger.debug("Name search %r matched %d of %d routines", query, len(matches), len(self._routines))
        return matches

    def filter_by_type(self, routine_type: str) -> list[Routine]:
        """Return routines whose type equals ``routine_type``, ignoring case."""

        wanted = routine_type.lower()
        matches = [r for r in self._routines if r.routine_type_name().lower() == wanted]
        logger.debug("Type filter %r matched %d routines", routine_type, len(matches))
        return matches

    def sort_by_calories(self, ascending: bool) -> list[Routine]:
        """
        Return a new list of all routines ordered by calories burned.

        Ties keep insertion order in both directions; the stored sequence is
        left untouched.
        """
        # reverse=True on sorted() stays stable for equal keys
        return sorted(self._routines, key=lambda r: r.calories_burned, reverse=not ascending)


def create_session(name: str, age: int, weight: float) -> UserSession:
    """Start an empty session for the given user."""

    session = UserSession(UserProfile(name=name, age=age, weight=weight))
    logger.info("Started session for %s (age=%d, weight=%.1f)", name, age, weight)
    return session
