"""
numtasks – Main entry point.

Minimal bootstrap script to verify the package imports and its settings load.
"""

from numtasks import __version__
from numtasks.config.settings import get_settings


def main() -> None:
    """Print a bootstrap confirmation message."""
    settings = get_settings()
    print(
        f"numtasks {__version__} bootstrap complete "
        f"(rounding mode: {settings.numeric.rounding_mode})"
    )


if __name__ == "__main__":
    main()
