"""CLI entrypoint for memtest."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from memtest import __version__
from memtest.config import apply_cli_overrides, load_config
from memtest.constants.analyzer import EXIT_CONFIG_ERROR, EXIT_INTERRUPTED
from memtest.constants.branding import CLI_DESCRIPTION, CLI_USAGE
from memtest.exceptions import ConfigError, StepFailedError, ToolLaunchError
from memtest.exceptions.validation import format_errors
from memtest.session import run_session
from memtest.validation import preflight_validate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="memtest",
        usage=CLI_USAGE,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "-C",
        "--root",
        type=Path,
        default=Path("."),
        help="Directory searched for memtest.yaml (default: current directory)",
    )
    report_target = parser.add_mutually_exclusive_group()
    report_target.add_argument(
        "-o",
        "--report",
        type=Path,
        default=None,
        help="Report file path (default: valgrind-out.txt in the temp directory)",
    )
    report_target.add_argument(
        "-u",
        "--unique-report",
        action="store_true",
        help="Write to a fresh temp file instead of the shared report path",
    )
    parser.add_argument("-y", "--no-pause", action="store_true", help="Do not wait for Enter before viewing")
    parser.add_argument("-N", "--no-view", action="store_true", help="Do not open the report in the pager")
    parser.add_argument("--cleanup", action="store_true", help="Delete the report after the pager exits")
    parser.add_argument("--analyzer", default=None, help="Analyzer command (default: valgrind)")
    parser.add_argument("--pager", default=None, help="Pager command (default: less)")
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Validate configuration and exit without running anything",
    )
    parser.add_argument("--debug", action="store_true", help="Log each step and its exit status")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to analyze, forwarded to the analyzer unchanged",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.check_config:
        print("Configuration is valid.")
        return 0

    target = _target_command(args.command)

    try:
        config = load_config(args.root, args.config)
        config = apply_cli_overrides(
            config,
            analyzer=args.analyzer,
            pager=args.pager,
            report_path=args.report,
            unique_report=args.unique_report,
            no_pause=args.no_pause,
            no_view=args.no_view,
            cleanup=args.cleanup,
        )
        result = run_session(target, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except ToolLaunchError as exc:
        print(f"memtest: {exc}", file=sys.stderr)
        return exc.returncode
    except StepFailedError as exc:
        # The failing tool already reported on its own stderr.
        logger.debug("Stopping: %s", exc)
        return exc.returncode
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    return result.exit_status


def _target_command(words: list[str]) -> tuple[str, ...]:
    """Drop a single leading ``--`` separator; everything else is forwarded as-is."""
    if words and words[0] == "--":
        return tuple(words[1:])
    return tuple(words)


if __name__ == "__main__":
    raise SystemExit(main())
