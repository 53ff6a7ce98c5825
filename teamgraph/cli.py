#!/usr/bin/env python3
"""Command-line interface for teamgraph

Example usage::

    python -m teamgraph.cli analyze nba.csv
    python -m teamgraph.cli analyze nba.csv --format json --top 10
    python -m teamgraph.cli validate-config --config config/default.yaml
"""
from __future__ import annotations

import argparse
import json
import sys

from teamgraph.core.config_manager import (
    DUPLICATE_POLICIES, OUTPUT_FORMATS, ConfigurationManager, validate_config
)
from teamgraph.core.exceptions import TeamGraphError
from teamgraph.core.logging_config import auto_setup_logging, get_logger
from teamgraph.tools.roster_analysis import (
    RosterAnalyzer, RosterDataLoader, format_json, format_text
)

logger = get_logger("cli")


def _apply_overrides(config: ConfigurationManager, args: argparse.Namespace) -> None:
    """Command-line flags win over file and environment settings."""
    if args.path:
        config.input.path = args.path
    if args.name_column:
        config.input.name_column = args.name_column
    if args.group_column:
        config.input.group_column = args.group_column
    if args.duplicate_policy:
        config.graph_construction.duplicate_policy = args.duplicate_policy
    if args.scale_by_reachable:
        config.centrality.scale_by_reachable = True
    if args.format:
        config.output.format = args.format
    if args.top is not None:
        config.output.top_k = args.top
    if args.precision is not None:
        config.output.precision = args.precision
    if args.log_level:
        config.system.log_level = args.log_level.upper()
    config.validate_config_with_schema()


def _run_analyze(args: argparse.Namespace) -> int:
    config = ConfigurationManager(args.config)
    _apply_overrides(config, args)
    auto_setup_logging(config.system.log_level)

    loader = RosterDataLoader.from_config(config)
    records = loader.load_csv(config.input.path)

    analyzer = RosterAnalyzer.from_config(config)
    result = analyzer.analyze(records, source=config.input.path)

    if config.output.format == "json":
        print(format_json(result, top_k=config.output.top_k))
    else:
        print(format_text(result, precision=config.output.precision, top_k=config.output.top_k))
    return 0


def _run_validate_config(args: argparse.Namespace) -> int:
    report = validate_config(args.config)
    print(json.dumps(report, indent=2))
    return 0 if report["status"] == "valid" else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Teammate graph components and closeness centrality")
    sub = parser.add_subparsers(dest="command")

    analyze = sub.add_parser("analyze", help="Analyze a roster CSV file")
    analyze.add_argument("path", nargs="?", help="Roster CSV (defaults to input.path)")
    analyze.add_argument("--config", help="Path to YAML configuration")
    analyze.add_argument("--name-column", help="Column holding the player name")
    analyze.add_argument("--group-column", help="Column holding the team")
    analyze.add_argument("--duplicate-policy", choices=DUPLICATE_POLICIES)
    analyze.add_argument("--scale-by-reachable", action="store_true",
                         help="Use the reachable node count in the closeness numerator")
    analyze.add_argument("--format", choices=OUTPUT_FORMATS)
    analyze.add_argument("--top", type=int, help="Only show the K highest scores (0 = all)")
    analyze.add_argument("--precision", type=int, help="Decimal places in text output")
    analyze.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                         type=str.upper)

    validate = sub.add_parser("validate-config", help="Validate a configuration file")
    validate.add_argument("--config", help="Path to YAML configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "analyze":
            return _run_analyze(args)
        elif args.command == "validate-config":
            return _run_validate_config(args)
        parser.error(f"Unknown command: {args.command}")
    except TeamGraphError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
