"""Application entry point for the Brave Search CLI.

Updates:
  v0.1.1 - 2026-10-12 - Print resolved settings with masked credentials.
  v0.1.0 - 2026-10-06 - Wire settings, logging, and the search command.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cli.commands import COMMAND_SPECS
from cli.parser import build_parser, parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import SettingsError, load_settings

EXIT_SETTINGS_ERROR = 2
EXIT_USAGE = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, logging, and CLI commands."""
    args = parse_args(argv)
    logger = logging.getLogger("brave_search.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        setup_logging(args.logging_config)
        logger.error("Failed to load settings: %s", exc)
        return EXIT_SETTINGS_ERROR

    setup_logging(args.logging_config, level=settings.log_level)
    if args.print_settings:
        print_settings_summary(settings)
        return 0

    spec = COMMAND_SPECS.get(getattr(args, "command", None))
    if spec is None:
        build_parser().print_help()
        return EXIT_USAGE
    return spec.handler(settings, args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
