"""Interactive console session for the vehicle risk assessor.

Each iteration collects one vehicle field by field, assesses it, records
the tier in the registry and prints every recorded tier.  Every field is
re-prompted until it is valid; there is no retry limit, so a session fed
only invalid input keeps prompting until the input stream ends.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO, TypeVar

from vehicle_risk.config import Settings
from vehicle_risk.core.assessment import RiskAssessment, assess_vehicle
from vehicle_risk.core.registry import RiskRegistry
from vehicle_risk.core.vehicle import Vehicle, VehicleType

logger = logging.getLogger(__name__)

T = TypeVar("T")

TYPE_RETRY_NON_NUMERIC: str = "Invalid input. Please enter 1, 2, or 3: "
TYPE_RETRY_OUT_OF_RANGE: str = "Invalid choice. Please enter 1, 2, or 3: "
ACCIDENT_RETRY: str = "Invalid input. Please enter a non-negative number: "
YES_NO_RETRY: str = "Invalid input. Please enter y or n: "


class InvalidInput(ValueError):
    """Raised by a field parser; the message is the retry prompt."""


class SessionAborted(RuntimeError):
    """Raised when the session cannot continue reading input."""


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------


def parse_year(text: str, min_year: int, max_year: int) -> int:
    """Parse a model year within ``[min_year, max_year]``."""
    retry = f"Invalid year. Please enter a year between {min_year} and {max_year}: "
    try:
        year = int(text.strip())
    except ValueError:
        raise InvalidInput(retry) from None
    if not min_year <= year <= max_year:
        raise InvalidInput(retry)
    return year


def parse_vehicle_type(text: str) -> VehicleType:
    """Parse a type menu choice (``1``-``3``)."""
    try:
        choice = int(text.strip())
    except ValueError:
        raise InvalidInput(TYPE_RETRY_NON_NUMERIC) from None
    try:
        return VehicleType(choice)
    except ValueError:
        raise InvalidInput(TYPE_RETRY_OUT_OF_RANGE) from None


def parse_accident_count(text: str) -> int:
    """Parse a non-negative accident count."""
    try:
        count = int(text.strip())
    except ValueError:
        raise InvalidInput(ACCIDENT_RETRY) from None
    if count < 0:
        raise InvalidInput(ACCIDENT_RETRY)
    return count


def parse_yes_no(text: str) -> bool:
    """Parse a yes/no answer from its first non-blank character."""
    answer = text.strip()[:1].lower()
    if answer == "y":
        return True
    if answer == "n":
        return False
    raise InvalidInput(YES_NO_RETRY)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class ConsoleSession:
    """Prompt, assess and report loop over a single :class:`RiskRegistry`.

    Attributes:
        registry: Store that accumulates tiers for the whole session.
        settings: Year bounds used by the year prompt.
    """

    def __init__(
        self,
        registry: RiskRegistry,
        settings: Settings | None = None,
        input_fn: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.registry: RiskRegistry = registry
        self.settings: Settings = settings if settings is not None else Settings()
        # Resolved per instance so a patched builtins.input is picked up.
        self._input: Callable[[str], str] = input_fn if input_fn is not None else input
        self._out: TextIO = output if output is not None else sys.stdout

    # -- I/O primitives -------------------------------------------------------

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return one line of input.

        Raises:
            SessionAborted: If the input stream is exhausted.
        """
        try:
            return self._input(prompt)
        except EOFError:
            raise SessionAborted("input stream closed") from None

    def prompt_until_valid(
        self,
        prompt: str,
        parse: Callable[[str], T],
        max_attempts: int | None = None,
    ) -> T:
        """Read lines until ``parse`` accepts one.

        A rejected line is discarded and the parser's message becomes the
        next prompt.  ``max_attempts=None`` retries without limit, which is
        what the interactive session uses.

        Raises:
            SessionAborted: If ``max_attempts`` lines are all rejected, or
                the input stream is exhausted.
        """
        attempts = 0
        while True:
            line = self.read_line(prompt)
            attempts += 1
            try:
                return parse(line)
            except InvalidInput as exc:
                logger.debug("Rejected input %r", line)
                if max_attempts is not None and attempts >= max_attempts:
                    raise SessionAborted(
                        f"no valid input after {attempts} attempts"
                    ) from exc
                prompt = str(exc)

    def ask_yes_no(self, question: str) -> bool:
        return self.prompt_until_valid(f"{question} (y/n): ", parse_yes_no)

    # -- Vehicle collection ---------------------------------------------------

    def read_vehicle_type(self) -> VehicleType:
        self._print("Select Vehicle Type:")
        for vehicle_type in VehicleType:
            self._print(f"{vehicle_type.value}. {vehicle_type.name.title()}")
        return self.prompt_until_valid("Enter your choice (1-3): ", parse_vehicle_type)

    def read_vehicle(self) -> Vehicle:
        """Collect one vehicle's attributes from the console."""
        make = self.read_line("Enter vehicle make: ")
        model = self.read_line("Enter vehicle model: ")
        min_year, max_year = self.settings.min_year, self.settings.max_year
        year = self.prompt_until_valid(
            "Enter vehicle year: ",
            lambda text: parse_year(text, min_year, max_year),
        )
        vehicle_type = self.read_vehicle_type()
        accident_count = self.prompt_until_valid(
            "Enter number of accidents: ", parse_accident_count
        )
        is_commercial = self.ask_yes_no("Is this a commercial vehicle")
        return Vehicle(
            make=make,
            model=model,
            year=year,
            type=vehicle_type,
            accident_count=accident_count,
            is_commercial=is_commercial,
        )

    # -- Assessment -----------------------------------------------------------

    def assess(self, vehicle: Vehicle) -> RiskAssessment:
        """Assess ``vehicle`` and record its tier in the registry."""
        result = assess_vehicle(vehicle)
        self.registry.record(result.label, result.level)
        return result

    def display_registry(self) -> None:
        for line in self.registry.format_entries():
            self._print(line)

    def run(self) -> None:
        """Assess vehicles until the user declines to continue."""
        while True:
            vehicle = self.read_vehicle()
            self.assess(vehicle)
            self.display_registry()
            again = self.ask_yes_no("Do you want to assess another vehicle")
            self._print()
            if not again:
                break
        logger.info("Session finished with %d recorded vehicle(s)", len(self.registry))
