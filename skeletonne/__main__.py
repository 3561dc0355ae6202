"""Export a skeleton design from the command line.

Usage:
  python -m skeletonne design.json --format tsx
  python -m skeletonne --add horizontal --add horizontal
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from skeletonne.dsl.schema import ExportFormat, Orientation, PlaygroundState, default_state
from skeletonne.engine.playground import Playground
from skeletonne.renderer.code_generator import generate_code

logger = logging.getLogger("skeletonne.cli")


def load_state(path: Optional[str]) -> PlaygroundState:
    """Read a state snapshot from a JSON file, or the starter design."""
    if path is None:
        return default_state()
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, list):
        data = {"skeletons": data}
    return PlaygroundState.model_validate(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skeletonne",
        description="Generate skeleton loader code from a layout snapshot",
    )
    parser.add_argument(
        "state",
        nargs="?",
        default=None,
        help="JSON file with {'skeletons': [...]} (default: starter design)",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.TSX.value,
        help="Export target",
    )
    parser.add_argument(
        "--add",
        action="append",
        choices=[o.value for o in Orientation],
        default=[],
        help="Append an element before exporting (repeatable)",
    )
    parser.add_argument(
        "--dump-state",
        action="store_true",
        help="Print the resulting state as JSON instead of code",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        state = load_state(args.state)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not load state: {e}")
        return 1

    playground = Playground(state)
    for orientation in args.add:
        playground.add(Orientation(orientation))

    if args.dump_state:
        print(playground.state.model_dump_json(indent=2))
    else:
        print(generate_code(playground.state.skeletons, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
