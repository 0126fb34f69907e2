"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from pawnchess.console import ConsoleGame
from pawnchess.settings import LOG_LEVELS, AppSettings

_LOGGER = logging.getLogger(__name__)


def _parse_settings(argv: list[str] | None) -> AppSettings:
    ap = argparse.ArgumentParser(prog="pawnchess", description="Pawns-Only Chess")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level for stderr diagnostics",
    )
    ap.add_argument("--white", help="first (white) player's name")
    ap.add_argument("--black", help="second (black) player's name")
    ap.add_argument("--no-banner", action="store_true", help="skip the title line")
    args = ap.parse_args(argv)
    return AppSettings(
        log_level=args.log_level,
        white_name=args.white,
        black_name=args.black,
        show_banner=not args.no_banner,
    )


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level_value,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Launch a console game of Pawns-Only Chess."""
    settings = _parse_settings(argv)
    _configure_logging(settings)

    try:
        ConsoleGame(settings).run()
    except KeyboardInterrupt:
        return 130
    except Exception:
        _LOGGER.exception("Game aborted by an unexpected error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
