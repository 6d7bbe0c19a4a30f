"""
main.py

What this file does:
- Counts the words of one text file and writes the HTML report.

How to run:
- From project root:
  PYTHONPATH=src python main.py data/input.txt out/
or
  PYTHONPATH=src python -m word_count_report.cli data/input.txt out/
"""

from __future__ import annotations

from word_count_report.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
