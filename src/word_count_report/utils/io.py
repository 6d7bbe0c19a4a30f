"""
utils/io.py

What this file does:
- Reads the input text file line by line (terminators stripped, blank lines kept).
- Works out where the HTML report goes and opens it for writing.

How it fits:
- This is the only place that touches the filesystem for the report.
- Errors (missing file, permissions) are not caught here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, TextIO

REPORT_SUFFIXES = (".html", ".htm")


def iter_lines(path: str | Path) -> Iterator[str]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")


def resolve_output_path(output: str | Path, input_path: str | Path) -> Path:
    """
    `output` is either the report file itself (ends in .html/.htm) or a folder,
    in which case the report is named after the input file.
    """
    output = Path(output)
    if output.suffix.lower() in REPORT_SUFFIXES:
        return output
    return output / (Path(input_path).stem + ".html")


def open_report(path: str | Path) -> TextIO:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("w", encoding="utf-8")
