"""ghostleg CLI entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ghostleg.analysis import report_ladder
from ghostleg.config import Config, InvalidConfiguration, LadderConfig, load_config
from ghostleg.generator import GenerationError, generate_with_seed
from ghostleg.output import export_json, export_result_sheet, render_ascii


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ghostleg command."""
    parser = argparse.ArgumentParser(
        description="ghostleg - Generate ghost-leg (amidakuji) ladders",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to config.toml (optional, uses defaults if not provided)",
    )
    parser.add_argument(
        "-n",
        "--columns",
        type=int,
        default=None,
        help="Number of columns (overrides config)",
    )
    parser.add_argument(
        "--exclude-self",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Guarantee no column ends where it started (overrides config)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: config's output_dir). "
        "Files are written to <output>/<seed>/",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config, 0 = random)",
    )
    parser.add_argument(
        "--sheet",
        action="store_true",
        help="Also write a human-readable result sheet",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    # Load or create config
    try:
        if args.config:
            config = load_config(args.config)
            if args.verbose:
                print(f"Loaded config from {args.config}")
        else:
            config = Config()
            if args.verbose:
                print("Using default configuration")

        # Overrides rebuild LadderConfig so they are validated too
        if args.columns is not None or args.exclude_self is not None:
            config.ladder = LadderConfig(
                column_count=(
                    args.columns
                    if args.columns is not None
                    else config.ladder.column_count
                ),
                exclude_self=(
                    args.exclude_self
                    if args.exclude_self is not None
                    else config.ladder.exclude_self
                ),
                labels=config.ladder.labels if args.columns is None else [],
            )
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except InvalidConfiguration as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config.seed = args.seed

    output_dir = args.output if args.output is not None else Path(config.paths.output_dir)

    if args.verbose:
        mode = "fixed seed" if config.seed != 0 else "random seed"
        print(f"Generating ladder ({mode})...")

    try:
        result = generate_with_seed(config)
    except GenerationError as e:
        print(f"Error: Generation failed: {e}", file=sys.stderr)
        return 1

    ladder = result.ladder
    labels = config.ladder.effective_labels

    if args.verbose and result.validation.warnings:
        print("Validation warnings:")
        for warning in result.validation.warnings:
            print(f"  - {warning}")

    print(f"Generated ladder with seed {result.seed}")
    print(f"  Columns: {ladder.column_count}")
    print(f"  Rows: {ladder.row_count}")
    print(f"  Rungs: {ladder.rung_count()}")

    if args.verbose:
        print()
        print(render_ascii(ladder))
        print()
        print(report_ladder(ladder, labels))

    # Create output directory: <output>/<seed>/
    seed_dir = output_dir / str(result.seed)
    seed_dir.mkdir(parents=True, exist_ok=True)

    json_path = seed_dir / "ladder.json"
    export_json(
        ladder,
        json_path,
        result.seed,
        labels=labels,
        exclude_self=config.ladder.exclude_self,
    )
    print(f"Written: {json_path}")

    if args.sheet:
        sheet_path = seed_dir / "result.txt"
        export_result_sheet(ladder, sheet_path, result.seed, labels)
        print(f"Written: {sheet_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
