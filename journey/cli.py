"""Journey Metrics Calculator command line.

Running ``journey`` with no sub-command starts the interactive session: pick a
calculation from the menu, enter the two known values, read the result, repeat.
The ``speed``, ``distance`` and ``time`` sub-commands run a single calculation
from their arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt

from journey.calculator import CalculationResult, derive_distance, derive_speed, derive_time
from journey.config import Settings, get_settings
from journey.errors import JourneyError
from journey.parser import parse_duration, parse_quantity
from journey.units import UNIT_NAMES, UnitKind, supported_units

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="journey",
    help="Derive speed, distance or time of a journey from the other two.",
    add_completion=False,
)
console = Console()

DISTANCE_PROMPT = "Enter distance value and unit (e.g., 100 km)"
SPEED_PROMPT = "Enter speed value and unit (e.g., 50 km/h)"
TIME_PROMPT = "Enter time value (e.g., 1h 20min)"
CONTINUE_PROMPT = "\nDo you want to perform another calculation? (y/n)"
FAREWELL = "Thank you for using the Journey Metrics Calculator!"


# ---------------------------------------------------------------------------
# Calculations from raw input text
# ---------------------------------------------------------------------------


def calculate_speed(distance_text: str, duration_text: str) -> CalculationResult:
    """Speed from a distance entry (``"100 km"``) and a duration entry (``"1h 20min"``)."""
    distance = parse_quantity(distance_text)
    return derive_speed(distance.magnitude, distance.unit, parse_duration(duration_text))


def calculate_distance(speed_text: str, duration_text: str) -> CalculationResult:
    """Distance from a speed entry (``"50 km/h"``) and a duration entry."""
    speed = parse_quantity(speed_text)
    return derive_distance(speed.magnitude, speed.unit, parse_duration(duration_text))


def calculate_time(distance_text: str, speed_text: str) -> CalculationResult:
    """Time from a distance entry and a speed entry."""
    distance = parse_quantity(distance_text)
    speed = parse_quantity(speed_text)
    return derive_time(distance.magnitude, distance.unit, speed.magnitude, speed.unit)


class CalculationType(StrEnum):
    """What the user wants to find out."""

    SPEED = "speed"
    DISTANCE = "distance"
    TIME = "time"


@dataclass(frozen=True)
class Calculation:
    """The two prompts a calculation asks, and how to compute it from the answers."""

    prompts: tuple[str, str]
    compute: Callable[[str, str], CalculationResult]


CALCULATIONS: dict[CalculationType, Calculation] = {
    CalculationType.SPEED: Calculation((DISTANCE_PROMPT, TIME_PROMPT), calculate_speed),
    CalculationType.DISTANCE: Calculation((SPEED_PROMPT, TIME_PROMPT), calculate_distance),
    CalculationType.TIME: Calculation((DISTANCE_PROMPT, SPEED_PROMPT), calculate_time),
}

# Menu numbers, in display order
MENU: dict[int, CalculationType] = {
    1: CalculationType.SPEED,
    2: CalculationType.DISTANCE,
    3: CalculationType.TIME,
}


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def format_value(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def render_units() -> None:
    """Print every supported unit symbol, grouped by kind."""
    console.print("[bold]Supported units:[/bold]")
    for kind in UnitKind:
        listed = ", ".join(f"{unit} ({UNIT_NAMES[unit]})" for unit in supported_units(kind))
        console.print(f"- {kind.value.capitalize()}: {escape(listed)}", soft_wrap=True)


def render_welcome() -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold green]Welcome to the Journey Metrics Calculator![/bold green]",
            border_style="green",
        )
    )
    render_units()
    console.print()


def render_result(result: CalculationResult, precision: int) -> None:
    """Print the primary value and its equivalents, in order."""
    primary = f"{format_value(result.primary_value, precision)} {result.primary_unit}"
    console.print()
    console.print(Panel.fit(f"[bold]Result: {primary}[/bold]", border_style="cyan"))
    console.print("Equivalent Values:")
    for unit, value in result.equivalents.items():
        console.print(f"- {format_value(value, precision)} {unit}")


def render_error(exc: JourneyError) -> None:
    console.print(f"\n[bold red]*** Error: {escape(str(exc))} ***[/bold red]\n", soft_wrap=True)


# ---------------------------------------------------------------------------
# Interactive session
# ---------------------------------------------------------------------------


class MenuPrompt(IntPrompt):
    """Integer prompt that re-asks until one of the menu numbers is entered."""

    validate_error_message = "[prompt.invalid]Invalid choice. Please enter 1, 2, or 3"
    illegal_choice_message = "[prompt.invalid.choice]Invalid choice. Please enter 1, 2, or 3"


class JourneyShell:
    """Read-evaluate-print loop around the calculator.

    Failures from parsing or calculating are reported and the loop carries on;
    only declining to continue (or closing the input) ends the session.
    """

    def __init__(self, settings: Settings, show_welcome: bool = True) -> None:
        self.settings = settings
        self.show_welcome = show_welcome

    def run(self) -> None:
        if self.show_welcome:
            render_welcome()

        try:
            while True:
                try:
                    self.process_calculation()
                except JourneyError as exc:
                    logger.info("Calculation failed (%s): %s", type(exc).__name__, exc)
                    render_error(exc)

                if not self.ask_continue():
                    break
        except (EOFError, KeyboardInterrupt):
            console.print()
            logger.debug("Input closed, ending session")

        console.print(f"\n{FAREWELL}\n")

    def choose_calculation(self) -> CalculationType:
        console.print("Select calculation type:")
        for number, calculation_type in MENU.items():
            console.print(f"{number}. {calculation_type.value.capitalize()}")
        choice = MenuPrompt.ask(
            "Choice",
            console=console,
            choices=[str(number) for number in MENU],
            show_choices=False,
        )
        return MENU[choice]

    def process_calculation(self) -> None:
        calculation_type = self.choose_calculation()
        calculation = CALCULATIONS[calculation_type]

        console.print()
        answers = [Prompt.ask(prompt, console=console) for prompt in calculation.prompts]
        result = calculation.compute(*answers)
        logger.info(
            "%s: %s -> %s %s",
            calculation_type.value,
            answers,
            result.primary_value,
            result.primary_unit,
        )
        render_result(result, self.settings.precision)

    def ask_continue(self) -> bool:
        answer = Prompt.ask(CONTINUE_PROMPT, console=console, default="", show_default=False)
        return answer.strip().lower() == "y"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _run_once(calculation_type: CalculationType, first: str, second: str) -> None:
    """Run one calculation from command-line arguments; exit 1 on failure."""
    try:
        result = CALCULATIONS[calculation_type].compute(first, second)
    except JourneyError as exc:
        logger.info("Calculation failed (%s): %s", type(exc).__name__, exc)
        render_error(exc)
        raise typer.Exit(1) from None
    render_result(result, get_settings().precision)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    no_welcome: bool = typer.Option(False, "--no-welcome", help="Skip the welcome banner"),
) -> None:
    """Journey Metrics Calculator. Without a command, starts the interactive session."""
    settings = get_settings()
    _configure_logging("DEBUG" if verbose else settings.log_level)

    if ctx.invoked_subcommand is None:
        JourneyShell(settings, show_welcome=settings.show_welcome and not no_welcome).run()


@app.command()
def speed(
    distance: str = typer.Argument(..., help="Distance with unit, e.g. '100 km'"),
    duration: str = typer.Argument(..., help="Duration, e.g. '1h 30min'"),
) -> None:
    """Average speed over a distance covered in a duration."""
    _run_once(CalculationType.SPEED, distance, duration)


@app.command()
def distance(
    speed: str = typer.Argument(..., help="Speed with unit, e.g. '50 km/h'"),
    duration: str = typer.Argument(..., help="Duration, e.g. '2h'"),
) -> None:
    """Distance covered at a speed for a duration."""
    _run_once(CalculationType.DISTANCE, speed, duration)


@app.command()
def time(
    distance: str = typer.Argument(..., help="Distance with unit, e.g. '100 km'"),
    speed: str = typer.Argument(..., help="Speed with unit, e.g. '50 km/h'"),
) -> None:
    """Time needed to cover a distance at a speed."""
    _run_once(CalculationType.TIME, distance, speed)


@app.command()
def units() -> None:
    """List the supported units."""
    render_units()
