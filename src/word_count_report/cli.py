#!/usr/bin/env python3
"""
cli.py

Command line entry point.

Usage:
  word-count-report data/input.txt out/
  word-count-report data/input.txt out/report.html --csv out/counts.csv

Paths left off the command line are asked for interactively.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .pipeline.run import run

INPUT_PROMPT = "Please input the name of the text file: "
OUTPUT_PROMPT = "Please enter the folder you want to store the html files: "


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="word-count-report",
        description="Count the words in a text file and write an HTML table of words and counts.",
    )
    ap.add_argument("input", nargs="?", help="text file to count")
    ap.add_argument("output", nargs="?", help="output folder, or a .html file path")
    ap.add_argument("--title", default=None, help="name shown in the report (default: input path)")
    ap.add_argument("--csv", default=None, help="also write word,count rows to this CSV file")
    ap.add_argument("-q", "--quiet", action="store_true")
    return ap


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    input_path = args.input or _ask(INPUT_PROMPT)
    output = args.output or _ask(OUTPUT_PROMPT)
    if not input_path or not output:
        ap.error("both an input file and an output location are required")

    try:
        run(
            input_path,
            output,
            title=args.title,
            csv_path=args.csv,
            verbose=not args.quiet,
        )
    except FileNotFoundError as e:
        print(f"Error: file not found: {e.filename}", file=sys.stderr)
        return 1
    except PermissionError as e:
        print(f"Error: permission denied: {e.filename}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError:
        print(f"Error: {input_path} is not valid UTF-8", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
