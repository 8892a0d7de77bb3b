"""Desktop viewer entry point."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch the Boardcheck viewer."""
    from boardcheck.ui.bootstrap import run_application

    logging.basicConfig(level=logging.INFO)
    sys.exit(run_application())


if __name__ == "__main__":
    main()
