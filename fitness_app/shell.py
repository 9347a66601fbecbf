"""Interactive console shell driving a user session."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, TextIO

from fitness_app.models.routines import Routine
from fitness_app.services.input_parsing import ParseResult, parse_float, parse_int
from fitness_app.services.session_store import UserSession, create_session


logger = logging.getLogger(__name__)

MAIN_MENU = (
    "1. Manage Workout Routines",
    "2. Search Routines",
    "3. Filter Routines by Type",
    "4. Sort Routines by Calories Burned",
    "5. Exit",
)

EXIT_CHOICE = 5


class EndOfInput(Exception):
    """Raised when the input stream closes while a prompt is waiting."""


class FitnessShell:
    """Menu loop reading commands from ``stdin`` and writing to ``stdout``."""

    def __init__(self, stdin: TextIO, stdout: TextIO, app_name: str = "FitnessApp") -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._app_name = app_name

    # ------------------------------------------------------------------
    # Console primitives
    # ------------------------------------------------------------------

    def _write(self, text: str = "") -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _println(self, text: str = "") -> None:
        self._write(text + "\n")

    def _read_line(self, prompt: str) -> str:
        self._write(prompt)
        line = self._stdin.readline()
        if line == "":
            raise EndOfInput()
        return line.rstrip("\r\n")

    def _prompt_number(self, prompt: str, parse: Callable[[str], ParseResult]) -> int | float:
        while True:
            result = parse(self._read_line(prompt))
            if result.ok:
                return result.value
            logger.info("Rejected console input for prompt %r", prompt)
            self._println(result.error)

    def prompt_int(self, prompt: str) -> int:
        """Prompt until the user enters a valid integer."""
        return self._prompt_number(prompt, parse_int)

    def prompt_float(self, prompt: str) -> float:
        """Prompt until the user enters a valid number."""
        return self._prompt_number(prompt, parse_float)

    def _print_routines(self, routines: Iterable[Routine]) -> None:
        for routine in routines:
            self._println(routine.describe())

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def start_session(
        self,
        name: str | None = None,
        age: int | None = None,
        weight: float | None = None,
    ) -> UserSession:
        """Collect any missing identity fields and create the session."""

        if name is None:
            name = self._read_line("Enter your name: ")
        if age is None:
            age = self.prompt_int("Enter your age: ")
        if weight is None:
            weight = self.prompt_float("Enter your weight: ")
        return create_session(name, age, weight)

    def run(self, session: UserSession) -> None:
        """Show the main menu until the user exits or input runs out."""

        try:
            while True:
                self._println()
                self._println(f"Welcome to {self._app_name}!")
                for line in MAIN_MENU:
                    self._println(line)
                choice = self.prompt_int("Choose an option: ")
                if not self.dispatch(session, choice):
                    return
        except EndOfInput:
            logger.info("Input closed; ending session for %s", session.profile.name)
            self._println()

    def dispatch(self, session: UserSession, choice: int) -> bool:
        """Run one main-menu command. Returns ``False`` once the user exits."""

        handlers: dict[int, Callable[[UserSession], None]] = {
            1: self.manage_routines,
            2: self.search_routines,
            3: self.filter_routines,
            4: self.sort_routines,
        }
        if choice == EXIT_CHOICE:
            self._println("Goodbye!")
            return False

        handler = handlers.get(choice)
        if handler is None:
            logger.debug("Unknown menu choice %d", choice)
            self._println("Invalid choice. Please try again.")
            return True

        handler(session)
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def manage_routines(self, session: UserSession) -> None:
        self._println()
        self._println("Manage Workout Routines")
        self._println("1. Add Cardio Routine")
        self._println("2. Add Strength Routine")
        routine_choice = self.prompt_int("Choose an option: ")

        name = self._read_line("Enter routine name: ")
        duration = self.prompt_int("Enter duration (minutes): ")
        calories = self.prompt_int("Enter calories burned: ")

        if routine_choice == 1:
            heart_rate = self.prompt_int("Enter average heart rate: ")
            session.record_routine("Cardio", name, duration, calories, average_heart_rate=heart_rate)
            self._println("Cardio Routine added successfully.")
        elif routine_choice == 2:
            sets = self.prompt_int("Enter number of sets: ")
            reps = self.prompt_int("Enter repetitions per set: ")
            session.record_routine("Strength", name, duration, calories, sets=sets, reps_per_set=reps)
            self._println("Strength Routine added successfully.")
        else:
            self._println("Invalid choice. Routine not added.")

    def search_routines(self, session: UserSession) -> None:
        query = self._read_line("Enter routine name to search: ")
        found = session.search_by_name(query)
        if not found:
            self._println("No routines found matching the name.")
            return
        self._println("Found Routines:")
        self._print_routines(found)

    def filter_routines(self, session: UserSession) -> None:
        routine_type = self._read_line("Enter type to filter (Cardio/Strength): ")
        filtered = session.filter_by_type(routine_type)
        if not filtered:
            self._println(f"No routines found of type {routine_type}")
            return
        self._println("Filtered Routines:")
        self._print_routines(filtered)

    def sort_routines(self, session: UserSession) -> None:
        sort_choice = self.prompt_int("Sort by calories burned (1 for ascending, 2 for descending): ")
        self._println("Sorted Routines:")
        self._print_routines(session.sort_by_calories(ascending=sort_choice == 1))
