"""Command-line interface for go-test-scaffolder."""

import argparse
import logging
import sys
from pathlib import Path

from go_test_scaffolder.config import ScaffoldConfig
from go_test_scaffolder.driver import scaffold_tree
from go_test_scaffolder.errors import ScaffoldError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="go-test-scaffolder",
        description="Generate table-driven test stubs for Go functions",
    )
    parser.add_argument(
        "--path",
        "-p",
        default="./",
        help="Root directory to scan (default: ./)",
    )
    parser.add_argument(
        "--exclude-dir",
        action="append",
        default=[],
        metavar="NAME",
        help="Directory name to skip, in addition to .git (repeatable)",
    )
    parser.add_argument(
        "--exclude-file",
        action="append",
        default=[],
        metavar="NAME",
        help="Skip files whose name contains NAME (repeatable)",
    )
    parser.add_argument(
        "--exclude-ext",
        action="append",
        default=[],
        metavar="EXT",
        help="Skip files with this extension (repeatable)",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=None,
        help="Directory with templates overriding the bundled ones",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the stubs that would be generated without writing",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )
    return parser


def parse_args(args: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    return create_parser().parse_args(args)


def build_config(parsed: argparse.Namespace) -> ScaffoldConfig:
    """Build the run configuration from parsed arguments."""
    config = ScaffoldConfig(template_dir=parsed.template_dir, dry_run=parsed.dry_run)
    return config.with_exclusions(
        dirs=parsed.exclude_dir,
        file_names=parsed.exclude_file,
        extensions=parsed.exclude_ext,
    )


def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, 1 for any fatal error)
    """
    try:
        parsed = parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 1

    setup_logging(parsed.verbose)
    config = build_config(parsed)

    try:
        updates = scaffold_tree(Path(parsed.path), config)
    except ScaffoldError as e:
        logger.error(f"Scaffolding failed during {e.phase}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    verb = "Would add" if config.dry_run else "Added"
    for update in updates:
        if update.stub_names:
            print(
                f"{verb} {len(update.stub_names)} stubs to {update.artifact_path}",
                file=sys.stderr,
            )
    return 0


def main():
    """Entry point for the CLI."""
    exit_code = run_cli(sys.argv[1:])
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
