#!/usr/bin/env python3
"""Treasure Hunt - Main entry point.

Reads a board file describing a map, its mountains, treasures and
adventurers, plays every adventurer's commands round by round, and writes
the final board to a result file.
"""

import argparse
import logging
import sys

from treasure_hunt.engine.simulation import HuntSimulation, HuntSummary
from treasure_hunt.interface.renderer import MapRenderer
from treasure_hunt.models.entity_set import EntitySet
from treasure_hunt.schemas.results import HuntResult, save_result_json
from treasure_hunt.utils.constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH
from treasure_hunt.utils.serialization import build_hunt, load_board, save_board


class HuntOrchestrator:
    """Runs a hunt from loaded board entities and reports the result."""

    def __init__(self, entity_set: EntitySet, show_map: bool = False):
        """Initialize hunt orchestrator.

        Args:
            entity_set: Board entities as loaded from the input file
            show_map: If True, print the map before and after the hunt
        """
        grid, adventurers = build_hunt(entity_set)
        self.simulation = HuntSimulation(grid, adventurers)
        self.renderer = MapRenderer()
        self.show_map = show_map

    def run(self) -> HuntSummary:
        """Play the hunt to completion."""
        if self.show_map:
            self._print_map("Initial map")

        summary = self.simulation.run()

        if self.show_map:
            self._print_map("Final map")
        return summary

    def export(self) -> EntitySet:
        """Final board entities for the result file."""
        return self.simulation.export()

    def _print_map(self, title: str) -> None:
        print(f"\n{title}:")
        print(self.renderer.render(self.simulation.grid, self.simulation.adventurers))
        print()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Treasure Hunt - Grid simulation of treasure-seeking adventurers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                      # Read files/exercise.txt, write files/result.txt
  %(prog)s board.txt --output result.txt        # Custom input and output
  %(prog)s board.txt --show-map                 # Print the map before and after
  %(prog)s board.txt --json result.json         # Also export the result as JSON
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Board file to play (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument(
        "--output",
        type=str,
        metavar="FILE",
        default=DEFAULT_OUTPUT_PATH,
        help=f"Result file to write (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--json",
        type=str,
        metavar="FILE",
        default=None,
        help="Also write the result as JSON to FILE",
    )
    parser.add_argument(
        "--show-map",
        action="store_true",
        help="Print the map before and after the hunt",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (one line per resolved command)",
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        entity_set = load_board(args.input)
    except FileNotFoundError:
        print(f"Error: File {args.input} not found.")
        return 1
    except ValueError as e:
        print(f"Error loading board: {e}")
        return 1

    try:
        orchestrator = HuntOrchestrator(entity_set, show_map=args.show_map)
        summary = orchestrator.run()
    except (ValueError, IndexError, RuntimeError) as e:
        print(f"Error running hunt: {e}")
        return 1

    final_board = orchestrator.export()
    try:
        save_board(final_board, args.output)
        print(f"Result written to {args.output}")

        if args.json:
            save_result_json(
                HuntResult.from_entity_set(final_board, rounds=summary.rounds), args.json
            )
            print(f"JSON result written to {args.json}")
    except OSError as e:
        print(f"Error writing result: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
