"""Command-line entry point for rho."""
from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

from rho.commands import apply_commands
from rho.logging_utils import configure_logging
from rho.settings import Settings


def main(argv: Optional[Iterable[str]] = None) -> int:
    """
    Run rho on an argument vector (default: sys.argv[1:]).

    Always returns 0: failures are reported as diagnostics, not exit codes.
    """
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    settings = Settings.from_env()
    configure_logging(logging.DEBUG if settings.debug else logging.INFO)

    apply_commands(raw_argv, settings=settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
