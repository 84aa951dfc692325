"""CLI entrypoint for Repohash."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from repohash import __version__
from repohash.config import RepohashConfig, load_config
from repohash.constants.branding import CLI_DESCRIPTION
from repohash.exceptions import ConfigError, RepohashError
from repohash.exceptions.validation import format_errors
from repohash.scanner import generate_sidecars
from repohash.validation import preflight_validate

EXIT_INTERRUPTED: int = 130


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="repohash",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--repo",
        type=Path,
        required=True,
        metavar="FOLDER",
        help="The folder on disk representing the repository",
    )
    parser.add_argument(
        "-t",
        "--threads",
        type=int,
        default=None,
        metavar="THREADS",
        help="The number of threads to use when processing files (default: CPU count)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every checksum before computing it")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report which checksums would be computed. Implies --verbose",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML config file with run defaults")
    parser.add_argument(
        "--follow-links",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Follow symbolic links while walking the repository (default: on)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    validation_errors = preflight_validate(args.repo, args.config, threads=args.threads)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    level = logging.INFO if config.effective_verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        generate_sidecars(root=args.repo, config=config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RepohashError as exc:
        print(f"Repohash error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted; pending files were skipped.", file=sys.stderr)
        return EXIT_INTERRUPTED

    return 0


def _resolve_config(args: argparse.Namespace) -> RepohashConfig:
    """Layer CLI flags over the config file (or defaults)."""
    config = load_config(args.config)
    if args.threads is not None:
        config = replace(config, threads=args.threads)
    if args.verbose:
        config = replace(config, verbose=True)
    if args.dry_run:
        config = replace(config, dry_run=True)
    if args.follow_links is not None:
        config = replace(config, follow_links=args.follow_links)
    return config


if __name__ == "__main__":
    raise SystemExit(main())
