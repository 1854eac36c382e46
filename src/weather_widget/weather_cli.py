"""Terminal shell: read locations, drive the render-state controller."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.markup import escape

from .config import Settings, load_settings
from .controller import Failed, Populated, RenderStateController
from .exceptions import ConfigError, EmptyLocationError, PreferenceStoreError
from .log_setup import setup_logger
from .preferences import JsonFilePreferenceStore
from .ui.terminal_view import RichTerminalView
from .units import DisplayUnit
from .weather.visual_crossing import VisualCrossingProvider

TOGGLE_COMMANDS = frozenset({"u", "unit", "units"})
QUIT_COMMANDS = frozenset({"q", "quit", "exit"})


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse weather shell arguments."""
    parser = argparse.ArgumentParser(
        description="Look up current weather and a 3-day forecast for a location."
    )
    parser.add_argument(
        "location",
        nargs="?",
        default=None,
        help="Location to look up once. Omit to start the interactive prompt.",
    )
    unit_group = parser.add_mutually_exclusive_group()
    unit_group.add_argument(
        "--metric",
        dest="unit",
        action="store_const",
        const=DisplayUnit.METRIC,
        help="Display metric units (saved as the preference).",
    )
    unit_group.add_argument(
        "--imperial",
        dest="unit",
        action="store_const",
        const=DisplayUnit.IMPERIAL,
        help="Display imperial units (saved as the preference).",
    )
    return parser.parse_args(argv)


def validate_location_input(text: str | None) -> str:
    """Return the trimmed location, raising EmptyLocationError when blank."""
    location = (text or "").strip()
    if not location:
        raise EmptyLocationError("Location input is empty.")
    return location


def build_controller(
    settings: Settings,
    logger: logging.Logger,
    provider: VisualCrossingProvider,
    view: RichTerminalView,
) -> RenderStateController:
    preferences = JsonFilePreferenceStore(
        settings.preference_file,
        logger=logger,
        default=settings.default_display_unit,
    )
    return RenderStateController(
        provider=provider,
        preferences=preferences,
        view=view,
        logger=logger,
    )


async def run_once(controller: RenderStateController, location: str) -> int:
    state = await controller.submit(location)
    return 4 if isinstance(state, Failed) else 0


async def run_interactive(
    controller: RenderStateController,
    console: Console,
) -> int:
    console.print(
        "Enter a location to look up, [bold]u[/bold] to toggle units, [bold]q[/bold] to quit."
    )
    while True:
        try:
            text = await asyncio.to_thread(
                console.input, f"[bold]location[/bold] ({controller.unit.value})> "
            )
        except (EOFError, KeyboardInterrupt):
            console.print()
            return 0

        command = text.strip().lower()
        if command in QUIT_COMMANDS:
            return 0
        if command in TOGGLE_COMMANDS:
            try:
                controller.toggle_unit()
            except PreferenceStoreError as exc:
                console.print(f"[red]Could not save unit preference:[/red] {escape(str(exc))}")
                continue
            if not isinstance(controller.state, Populated):
                console.print(f"Units set to {controller.unit.value}.")
            continue

        try:
            location = validate_location_input(text)
        except EmptyLocationError as exc:
            console.print(f"[yellow]{exc.user_message}[/yellow]")
            continue
        await controller.submit(location)


async def _run(args: argparse.Namespace, settings: Settings, logger: logging.Logger) -> int:
    console = Console()
    view = RichTerminalView(console=console)
    async with VisualCrossingProvider(settings=settings, logger=logger) as provider:
        controller = build_controller(settings, logger, provider, view)
        if args.unit is not None:
            controller.set_unit(args.unit)

        if args.location is not None:
            return await run_once(controller, validate_location_input(args.location))

        view.attach_logger(logger)
        try:
            return await run_interactive(controller, console)
        finally:
            view.detach_logger()


def main(argv: list[str] | None = None) -> int:
    """Run the weather shell."""
    args = parse_args(argv)
    logger = setup_logger()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    logger.setLevel(settings.log_level_no)
    logger.debug("Loaded settings: %s", settings.safe_summary())

    try:
        return asyncio.run(_run(args, settings, logger))
    except EmptyLocationError as exc:
        logger.error("Invalid input: %s", exc.user_message)
        return 2
    except PreferenceStoreError as exc:
        logger.error("Preference failure: %s", exc)
        return 3


if __name__ == "__main__":
    sys.exit(main())
