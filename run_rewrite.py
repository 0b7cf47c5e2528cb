#!/usr/bin/env python3
# run_rewrite.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Command-line interface for formula rewriting with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Callable, Dict, List

from fol import parse
from fol.exceptions import ParseError, RewriteError
from fol.ast_nodes import Node
from rewrite import (
    collapse_negations,
    collect_names,
    free_variables,
    move_quantifiers_left,
    negate,
    remove_implications,
    rename,
    stringify,
)
from utils.logger import configure_logging, get_logger

TRANSFORMS: Dict[str, Callable[[Node], Node]] = {
    "stringify": lambda node: node,
    "negate": negate,
    "collapse": collapse_negations,
    "remove-implications": remove_implications,
    "move-quantifiers-left": move_quantifiers_left,
    "rename": rename,
}

QUERIES = ("names", "free")


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}") from e

    if not content:
        raise ValueError("Formula file is empty")

    return content


def apply_operations(node: Node, operations: List[str]) -> List[str]:
    """Apply operations left to right and render each result.

    Transforms replace the current formula; queries report on it without
    changing it.

    Args:
        node: Parsed formula
        operations: Operation names, in application order

    Returns:
        One output line per operation
    """
    lines = []
    for operation in operations:
        if operation == "names":
            names = collect_names(node)
            lines.append(
                ", ".join(f"{name}: {kind.value}" for name, kind in names.items())
            )
        elif operation == "free":
            lines.append(", ".join(sorted(free_variables(node))))
        else:
            node = TRANSFORMS[operation](node)
            lines.append(stringify(node))
    return lines


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="First-order logic formula rewriting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_rewrite.py "!(P -> Q)" --op collapse
  python run_rewrite.py "(P -> Q) -> R" --op remove-implications --op collapse
  python run_rewrite.py -f formula.fol --op rename --op move-quantifiers-left
  python run_rewrite.py "A.x f(x) | g(y)" --op names --op free --debug
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula text")
    source.add_argument("-f", "--file", type=Path, help="Path to a formula file")

    parser.add_argument(
        "--op",
        dest="operations",
        action="append",
        choices=list(TRANSFORMS) + list(QUERIES),
        help="Operation to apply; repeat to chain (default: stringify)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the rewriting application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        text = read_formula_file(args.file) if args.file else args.formula
        logger.info(f"Formula loaded: {text}")

        node = parse(text)
        for line in apply_operations(node, args.operations or ["stringify"]):
            print(line)
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except RewriteError as e:
        logger.error(f"Rewrite error: {e}")
        return 3

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 4


if __name__ == "__main__":
    sys.exit(main())
