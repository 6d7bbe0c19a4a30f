"""
report/export.py

What this file does:
- Turns the sorted word counts into a pandas DataFrame (columns: word, count).
- Writes it as a UTF-8 CSV next to (or instead of looking at) the HTML report.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..vocab.state import WordCounts


def counts_frame(wc: WordCounts) -> pd.DataFrame:
    return pd.DataFrame(list(wc.rows()), columns=["word", "count"])


def write_counts_csv(wc: WordCounts, csv_path: str | Path) -> Path:
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    counts_frame(wc).to_csv(csv_path, index=False, encoding="utf-8")
    return csv_path
