import argparse
import sys

from config import get_settings
from errors import FluxError
from logger import get_logger, setup_logging
from survival_state import AppState
from tui_engine import CursesTerminal, run_app
from ui import Layout, draw_for

logger = get_logger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Flux Survivalist terminal interface")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in Layout],
        default=None,
        help="Screen to show: tab bar or inventory column (env FLUX_LAYOUT)",
    )
    parser.add_argument(
        "--tick-rate",
        type=int,
        default=None,
        metavar="MS",
        help="Tick interval in milliseconds (env FLUX_TICK_RATE_MS)",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file (env FLUX_LOG_FILE)")
    parser.add_argument("--log-level", default=None, help="Log level (env FLUX_LOG_LEVEL)")
    return parser


# --- MAIN LOOP ---
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as exc:
        parser.error(f"bad environment setting: {exc}")
    if args.layout is not None:
        settings.layout = args.layout
    if args.tick_rate is not None:
        settings.tick_rate_ms = args.tick_rate
    if args.log_file is not None:
        settings.log_file = args.log_file
    if args.log_level is not None:
        settings.log_level = args.log_level

    try:
        layout = Layout(settings.layout)
    except ValueError:
        parser.error(f"unknown layout: {settings.layout!r}")
    if settings.tick_rate_ms <= 0:
        parser.error("tick rate must be positive")

    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError as exc:
        parser.error(f"cannot open log file {settings.log_file!r}: {exc.strerror}")
    logger.info("Starting %s layout, tick every %d ms", layout.value, settings.tick_rate_ms)

    app = AppState()
    try:
        with CursesTerminal() as terminal:
            run_app(terminal, app, draw_for(layout), settings.tick_rate)
    except FluxError as exc:
        logger.error("Session aborted: %s", exc, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    print("Exited cleanly.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
