"""Command-line front door for lnka.

Parses CLI options, merges them with the config file, sets up debug
logging, and runs one interactive session. Exit status: 0 on success or
no changes, 1 on errors, 130 when the user aborts.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_preferences
from .errors import EmptySelectionError, UserAbortError
from .session import SessionOptions, SessionResult, run_session

EXIT_ABORTED = 130
DEFAULT_LOG_FILE = "lnka-debug.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lnka",
        description="Interactively choose which files of SOURCE_DIR are symlinked into TARGET_DIR.",
    )
    parser.add_argument("source_dir", metavar="SOURCE_DIR", help="Directory holding all available files.")
    parser.add_argument("target_dir", metavar="TARGET_DIR", help="Directory holding links to enabled files.")
    parser.add_argument("--title", default=None, help="Title shown above the list.")
    parser.add_argument(
        "--max-items",
        type=_positive_int,
        default=None,
        help="Rows shown before the list paginates (default: config or 15).",
    )
    parser.add_argument("-y", "--yes", action="store_true", help="Apply changes without asking for confirmation.")
    parser.add_argument("--dry-run", action="store_true", help="Show the planned changes without applying them.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--debug", action="store_true", help="Write debug logs to a file.")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Debug log destination (default: ./{DEFAULT_LOG_FILE}). Implies --debug.",
    )
    return parser


def configure_logging(debug: bool, log_file: Path | None = None) -> None:
    """Route ``lnka`` debug records to a file; the terminal stays untouched."""
    if not debug:
        return
    package_logger = logging.getLogger("lnka")
    handler = logging.FileHandler(log_file or Path(DEFAULT_LOG_FILE), encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def _report(result: SessionResult, dry_run: bool) -> int:
    """Print what happened and return the exit status."""
    plan = result.plan
    for name, exc in plan.failures.items():
        print(f"Skipped {name}: {exc}", file=sys.stderr)
    if plan.is_empty:
        print("No changes.")
        return 1 if plan.failures else 0
    if dry_run:
        print(plan.summary())
        return 1 if plan.failures else 0
    if result.declined or result.applied is None:
        print("No changes applied.")
        return 1 if plan.failures else 0

    applied = result.applied
    for name in applied.disabled:
        print(f"Disabled: {name}")
    for name in applied.enabled:
        print(f"Enabled: {name}")
    for name, exc in applied.failures.items():
        print(f"Failed {name}: {exc}", file=sys.stderr)
    return 1 if applied.failures or plan.failures else 0


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one session, exiting with its status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.debug or args.log_file is not None, args.log_file)

    source_dir = Path(args.source_dir)
    target_dir = Path(args.target_dir)
    for directory in (source_dir, target_dir):
        if not directory.is_dir():
            raise SystemExit(f"Directory not found: {directory}")
    if not sys.stdin.isatty():
        raise SystemExit("lnka needs an interactive terminal on stdin.")

    preferences = load_preferences()
    options = SessionOptions(
        title=args.title if args.title is not None else f"Select files to enable in {target_dir}",
        max_visible_items=args.max_items or preferences.max_visible_items,
        confirm=preferences.confirm_changes and not args.yes,
        dry_run=args.dry_run,
        no_color=args.no_color,
    )
    logger.debug("starting session source=%s target=%s options=%s", source_dir, target_dir, options)

    try:
        result = run_session(source_dir, target_dir, options)
    except UserAbortError:
        print("Aborted.")
        raise SystemExit(EXIT_ABORTED)
    except EmptySelectionError as exc:
        raise SystemExit(f"Nothing to select: {exc} in {source_dir}")
    except OSError as exc:
        raise SystemExit(f"Error: {exc}")

    status = _report(result, args.dry_run)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
