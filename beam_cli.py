import argparse
import json
import logging
import sys
from typing import List, Optional

from beam_calculator import BeamResult, analyze
from beam_config import BeamConfig
from errors import BeamInputError
from units import UNIT_SYSTEMS, convert_config, format_value, unit_labels


def _read_config(path: Optional[str]) -> dict:
    if path is None:
        return {}
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _report(result: BeamResult) -> str:
    u = unit_labels(result.config.units)
    dp = result.config.decimal_places
    lines = [result.reaction_text]
    lines.append(
        f"Max |V| = {format_value(result.extrema.max_abs_shear, dp)} {u['force']}"
        f" at x = {format_value(result.extrema.shear_position, dp)} {u['length']}"
    )
    lines.append(
        f"Max |M| = {format_value(result.extrema.max_abs_moment, dp)} {u['moment']}"
        f" at x = {format_value(result.extrema.moment_position, dp)} {u['length']}"
    )
    lines.append("")
    for i, step in enumerate(result.derivation.steps, start=1):
        lines.append(f"Step {i}: {step}")
    if result.derivation.shear:
        lines.append("")
        lines.append(result.derivation.shear)
        lines.append(result.derivation.moment)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beam-calc",
        description="Reactions, shear force and bending moment for a loaded beam.",
    )
    parser.add_argument("config", nargs="?", help="JSON beam configuration ('-' for stdin)")
    parser.add_argument("--units", choices=UNIT_SYSTEMS, help="units the configuration is written in")
    parser.add_argument("--convert-to", choices=UNIT_SYSTEMS, help="convert the configuration before solving")
    parser.add_argument("--decimal-places", type=int)
    parser.add_argument("--resolution", type=int, help="number of intervals sampled along the beam")
    parser.add_argument("--strict", action="store_true", help="reject invalid input instead of repairing it")
    parser.add_argument("--json", action="store_true", help="print the full result as JSON")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        data = _read_config(args.config)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Could not read configuration: {exc}", file=sys.stderr)
        return 1
    if not isinstance(data, dict):
        print("Configuration must be a JSON object", file=sys.stderr)
        return 1
    for key, value in (("units", args.units), ("decimalPlaces", args.decimal_places), ("resolution", args.resolution)):
        if value is not None:
            data[key] = value

    try:
        config = BeamConfig.from_mapping(data, strict=args.strict)
        if args.convert_to:
            config = convert_config(config, args.convert_to)
    except BeamInputError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    result = analyze(config)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
