#!/usr/bin/env python3
"""
Demo runner for the Huffman coding and linked list exercises.

This script:
- Encodes a message with Huffman codes and prints the code table
- Compares the compressed bit count with plain 8-bit encoding
- Walks a small linked list through find_middle() and invert()

Run with:
    python huffman_demo.py [options]
"""
import json
import sys
from pathlib import Path

from huffman_core import SymbolRangeError
from huffman_service import HuffmanService
from linked_list import SimpleLinkedList

DEFAULT_MESSAGE = (
    "to whom much is given much is tested get arrested guess until he get the "
    "message i feel the pressure under more scrutiny and what i do act more "
    "stupidly"
)


def run_huffman_demo(message):
    """Encode ``message`` and print its codes and size comparison."""
    print(f"\n{'=' * 60}")
    print("HUFFMAN ENCODING")
    print(f"{'=' * 60}")

    report = HuffmanService().encode(message)
    print(report.render())
    return report


def run_linked_list_demo(values=("A", "B", "C", "D", "E")):
    print(f"\n{'=' * 60}")
    print("LINKED LIST")
    print(f"{'=' * 60}")

    demo = SimpleLinkedList()
    print(f"Middle node when list is empty: {demo.find_middle()}")
    for value in values:
        demo.add(value)
        print(f"Middle node of {demo}: {demo.find_middle()}")

    print(f"Original list: {demo}")
    print(f"Inverted list: {demo.invert()}")


def write_report(report, output_path):
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report.to_dict(), f, indent=2)
    print(f"\nReport saved to: {output_path}")


def main(argv=None):
    """Main entry point for the demo."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the Huffman coding and linked list demos")
    parser.add_argument(
        "--message",
        type=str,
        default=DEFAULT_MESSAGE,
        help="Message to Huffman-encode (default: built-in example sentence)"
    )
    parser.add_argument(
        "--demo",
        choices=("huffman", "linked-list", "all"),
        default="all",
        help="Which demo to run (default: all)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the Huffman report as JSON to this path"
    )

    args = parser.parse_args(argv)

    if args.demo in ("huffman", "all"):
        try:
            report = run_huffman_demo(args.message)
        except SymbolRangeError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        if args.output:
            write_report(report, args.output)

    if args.demo in ("linked-list", "all"):
        run_linked_list_demo()

    return 0


if __name__ == "__main__":
    sys.exit(main())
