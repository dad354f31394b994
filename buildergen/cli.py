"""Command-line interface: generate builders for annotated Java sources."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from .processor import BuilderProcessor
from .sink import FileSink
from .sources import JavaSourceReader
from .utils.config import BuilderGenConfig, get_config, load_config, set_config
from .utils.exceptions import BuilderGenError
from .utils.info import print_info
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildergen",
        description="Generate fluent builder classes for @BuilderPattern-annotated Java POJOs",
    )
    parser.add_argument("--config", help="Path to a YAML or JSON configuration file")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR); overrides configuration",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser("generate", help="Read Java sources and write builders")
    gen_parser.add_argument("paths", nargs="+", help="Java files or directories to scan")
    gen_parser.add_argument("-o", "--output-dir", help="Directory for generated sources")
    gen_parser.add_argument(
        "--strict",
        action="store_true",
        help="Require every getter and every setter to be paired",
    )
    gen_parser.add_argument(
        "--all-types",
        action="store_true",
        help="Generate for every class, not only those annotated with @BuilderPattern",
    )
    gen_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the round result as JSON",
    )
    gen_parser.set_defaults(handler=_handle_generate)

    info_parser = subparsers.add_parser("info", help="Show version, configuration and environment")
    info_parser.set_defaults(handler=_handle_info)

    return parser


def _load(args: argparse.Namespace) -> BuilderGenConfig:
    config = load_config(args.config) if args.config else get_config()
    set_config(config)
    log_file = config.logging.log_file if config.logging.enable_file_logging else None
    setup_logging(args.log_level or config.logging.level, log_file)
    return config


def _handle_generate(args: argparse.Namespace) -> int:
    config = _load(args)
    if args.strict:
        config.validation.strict_pojo_check = True
    output_dir = args.output_dir or config.output.output_dir

    reader = JavaSourceReader()
    types, parse_diagnostics = reader.read_paths(args.paths)
    selected = types if args.all_types else BuilderProcessor.select_annotated(types)
    logger.info(f"Found {len(types)} classes, {len(selected)} selected for generation")

    processor = BuilderProcessor(FileSink(output_dir, config.output.file_extension), config)
    result = processor.process_round(selected)
    result.diagnostics[:0] = parse_diagnostics

    if args.json:
        print(json.dumps({
            "generated": result.generated,
            "diagnostics": [d.to_dict() for d in result.diagnostics],
        }, indent=2))
    else:
        for name in result.generated:
            print(f"generated {name}")
        for diag in result.diagnostics:
            print(f"error: {diag}", file=sys.stderr)

    return 0 if result.ok else 1


def _handle_info(args: argparse.Namespace) -> int:
    _load(args)
    print_info()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        return args.handler(args)
    except BuilderGenError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
