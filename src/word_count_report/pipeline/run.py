"""
pipeline/run.py

Runs one input file end to end:
  1) Read the lines of the input file
  2) Tokenize + count words (case-sensitive), sort distinct words ignoring case
  3) Render the HTML table and write it to the output location
  4) Optionally write the same table as CSV

Single pass, one file per run, nothing is kept between runs.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Optional

from ..report.export import write_counts_csv
from ..report.html import write_html
from ..text.tokenize import SEPARATORS
from ..utils.io import iter_lines, open_report, resolve_output_path
from ..vocab.state import WordCounts, count_words


@dataclass
class RunResult:
    input_path: Path
    output_path: Path
    counts: WordCounts
    csv_path: Optional[Path] = None


def run(
    input_path: str | Path,
    output: str | Path,
    title: Optional[str] = None,
    csv_path: str | Path | None = None,
    separators: AbstractSet[str] = SEPARATORS,
    verbose: bool = False,
) -> RunResult:
    if title is None:
        # shown as the user typed it, before Path() normalizes it
        title = os.fspath(input_path)
    input_path = Path(input_path)
    output_path = resolve_output_path(output, input_path)

    wc = count_words(iter_lines(input_path), separators)

    with open_report(output_path) as sink:
        write_html(sink, title, wc.words, wc.counts)

    result = RunResult(input_path=input_path, output_path=output_path, counts=wc)
    if csv_path is not None:
        result.csv_path = write_counts_csv(wc, csv_path)

    if verbose:
        if wc.distinct == 0:
            print(f"⚠️  no words found in {input_path}", file=sys.stderr)
        print(f"✅ Counted {wc.total} words ({wc.distinct} distinct) in {input_path}")
        print(f"✅ Wrote {output_path}")
        if result.csv_path is not None:
            print(f"✅ Wrote {result.csv_path}")

    return result
