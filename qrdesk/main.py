"""qrdesk - Main Entry Point."""

import asyncio
import sys

from . import config
from .adapters import QRCodeAdapter, DownloadsAdapter, StdoutAdapter
from .console import Console, HELP_TEXT
from .controller import WorkflowController


def _parse_number(name: str, raw: str, cast, minimum) -> float:
    """Parse numeric setting, raise ValueError when malformed."""
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def build_controller() -> WorkflowController:
    """Mount adapters and build one session controller."""
    confirm_seconds = _parse_number(
        "QRDESK_CONFIRM_SECONDS", config.CONFIRM_SECONDS, float, 0
    )
    box_size = _parse_number("QRDESK_BOX_SIZE", config.BOX_SIZE, int, 1)
    border = _parse_number("QRDESK_BORDER", config.BORDER, int, 0)

    logger = StdoutAdapter(min_level=config.LOG_LEVEL)
    downloads = DownloadsAdapter(download_dir=config.DOWNLOAD_DIR)
    generator = QRCodeAdapter(
        error_correction=config.ERROR_CORRECTION,
        box_size=box_size,
        border=border,
        dark_color=config.DARK_COLOR,
        light_color=config.LIGHT_COLOR,
    )

    return WorkflowController(
        generator=generator,
        downloads=downloads,
        sink=downloads,
        logger=logger,
        confirm_seconds=confirm_seconds,
    )


async def run(console: Console) -> None:
    """Read lines until EOF or /quit."""
    loop = asyncio.get_running_loop()
    console.write(HELP_TEXT)

    while True:
        # Blocking input off-loop so timers keep firing
        try:
            line = await loop.run_in_executor(None, input, "> ")
        except EOFError:
            break

        if not await console.handle(line):
            break


def main() -> None:
    """Main initialization."""
    try:
        controller = build_controller()
    except ValueError as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    controller.logger.log("info", "Starting qrdesk session")

    try:
        asyncio.run(run(Console(controller)))
    except KeyboardInterrupt:
        pass

    controller.logger.log("info", "Session ended")


if __name__ == "__main__":
    main()
