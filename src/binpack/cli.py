from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from binpack.config import configure_logging
from binpack.geometry import OverlapRule
from binpack.io.schemas import PackRequest, PackResponse
from binpack.packing.first_fit import pack, unplaced_items

logger = logging.getLogger(__name__)


def load_request(path: Path) -> PackRequest:
    """Read a packing request from a JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return PackRequest.model_validate(data)


def write_result(response: PackResponse, path: str) -> None:
    """
    Write a packing result to a JSON file.

    Creates parent folders if needed and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug(f"write_result: writing to {output_path}")
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(response.model_dump(mode="json"), f, indent=2, sort_keys=True)


def summary_lines(response: PackResponse) -> list[str]:
    lines = []
    for i, c in enumerate(response.containers, start=1):
        lines.append(
            f"container {i} ({c.width}x{c.height}x{c.depth}): "
            f"placed={len(c.placed_items)} unfitted={len(c.unfitted_items)} "
            f"fill_rate={c.fill_rate * 100:.2f}% weight={c.total_weight}/{c.max_weight}"
        )
    lines.append(f"unplaced={len(response.unplaced)}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="binpack", description="Pack items into containers (3D first fit).")
    parser.add_argument("input", type=Path, help="JSON file with 'containers' and 'items'")
    parser.add_argument("-o", "--output", default=None, help="Write the full result JSON here")
    parser.add_argument(
        "--overlap-rule",
        choices=[r.value for r in OverlapRule],
        default=None,
        help="Override the configured overlap test",
    )
    parser.add_argument(
        "--chronological",
        action="store_true",
        help="List placed/unfitted items in insertion order instead of most recent first",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        request = load_request(args.input)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    overlap_rule = args.overlap_rule or request.overlap_rule
    chronological = args.chronological or request.chronological

    results = pack(request.to_job(), overlap_rule=overlap_rule)
    response = PackResponse.from_results(results, unplaced_items(results), chronological=chronological)

    for line in summary_lines(response):
        print(line)

    if args.output:
        write_result(response, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
