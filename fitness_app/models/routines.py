"""Workout routine records: a tagged union of cardio and strength entries."""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field


class RoutineBase(BaseModel):
    """Fields shared by every routine variant.

    Routines are immutable once recorded. Equality and hashing only look at
    the variant tag and the shared fields, so two strength routines with the
    same name, duration and calories are equal even if their sets differ.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    routine_type: str
    name: str
    duration_minutes: int
    calories_burned: int

    def routine_type_name(self) -> str:
        return self.routine_type

    def describe(self) -> str:
        """Return the one-line summary shown by the console shell."""

        summary = (
            f"Routine: {self.name:<20} | Duration: {self.duration_minutes:>3} min"
            f" | Calories: {self.calories_burned:>4} kcal | Type: {self.routine_type}"
        )
        return summary + self._variant_details()

    def _variant_details(self) -> str:
        return ""

    def _identity(self) -> tuple[str, str, int, int]:
        return (self.routine_type, self.name, self.duration_minutes, self.calories_burned)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoutineBase):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return self.describe()


class CardioRoutine(RoutineBase):
    """Cardio session tracked by average heart rate."""

    routine_type: Literal["Cardio"] = "Cardio"
    average_heart_rate: int

    def _variant_details(self) -> str:
        return f" | Avg Heart Rate: {self.average_heart_rate:>3} bpm"


class StrengthRoutine(RoutineBase):
    """Strength session tracked by sets and repetitions."""

    routine_type: Literal["Strength"] = "Strength"
    sets: int
    reps_per_set: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_reps(self) -> int:
        return self.sets * self.reps_per_set

    def _variant_details(self) -> str:
        return (
            f" | Sets: {self.sets:>2} | Reps per Set: {self.reps_per_set:>2}"
            f" | Total Reps: {self.total_reps:>3}"
        )


Routine = Annotated[Union[CardioRoutine, StrengthRoutine], Field(discriminator="routine_type")]

ROUTINE_TYPES: dict[str, str] = {
    "cardio": "Cardio",
    "strength": "Strength",
}

_routine_adapter: TypeAdapter[Routine] = TypeAdapter(Routine)


def build_routine(
    routine_type: str,
    name: str,
    duration_minutes: int,
    calories_burned: int,
    **variant_fields: Any,
) -> CardioRoutine | StrengthRoutine:
    """
    Build the routine variant named by ``routine_type``.

    Args:
        routine_type: Variant tag, matched case-insensitively ("cardio", "Strength", ...)
        name: Routine name, stored as given
        duration_minutes: Session length in minutes
        calories_burned: Calories burned during the session
        **variant_fields: ``average_heart_rate`` for cardio; ``sets`` and
            ``reps_per_set`` for strength

    Returns:
        The immutable routine record

    Raises:
        ValueError: If the tag names no known variant
    """
    canonical = ROUTINE_TYPES.get(routine_type.strip().lower())
    if canonical is None:
        raise ValueError(
            f"Unknown routine type {routine_type!r}; expected one of {', '.join(ROUTINE_TYPES.values())}"
        )

    return _routine_adapter.validate_python(
        {
            "routine_type": canonical,
            "name": name,
            "duration_minutes": duration_minutes,
            "calories_burned": calories_burned,
            **variant_fields,
        }
    )
