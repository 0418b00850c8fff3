"""Entry point for vsthemer."""

import argparse
import os
import sys
import traceback
from importlib.metadata import PackageNotFoundError, version

from vsthemer.app import main


def get_version() -> str:
    """Return the installed package version.

    Returns:
        The version string, or "unknown" if it cannot be determined.
    """
    try:
        return version("vsthemer")
    except PackageNotFoundError:
        return "unknown"


def parse_args() -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="vsthemer",
        description="View and edit Visual Studio .vstheme color themes in the terminal.",
    )
    parser.add_argument("path", nargs="?", help="Theme file to open on startup")
    parser.add_argument(
        "--export-dir",
        help="Directory for exported themes (default: next to the opened file)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args()


def _ensure_truecolor() -> None:
    """Ask Rich for 24-bit color so swatches render exactly.

    Only applies when the terminal did not set COLORTERM itself.
    """
    if not os.environ.get("COLORTERM"):
        os.environ["COLORTERM"] = "truecolor"


def run() -> None:
    """Run the app with standard Python tracebacks."""
    args = parse_args()
    _ensure_truecolor()
    try:
        main(path=args.path, export_dir=args.export_dir)
    except Exception:
        # Print standard Python traceback instead of Rich's fancy one
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    run()
