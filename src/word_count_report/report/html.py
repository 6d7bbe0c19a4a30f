"""
report/html.py

What this file does:
- Renders the word/count table as a small static HTML page.

How it fits:
- Rows follow the order of the `words` list it is given (already sorted by
  vocab/state.py); each count is looked up in `counts`.
- The line layout (one element per line, fixed indentation) is the report
  format; don't reflow it.
"""

from __future__ import annotations

from html import escape
from typing import List, Mapping, Sequence, TextIO


def render_html(title: str, words: Sequence[str], counts: Mapping[str, int]) -> List[str]:
    heading = f"Words Counted in {escape(title)}"
    out: List[str] = [
        "<html>",
        " <head>",
        f"  <title>{heading}</title>",
        " </head>",
        " <body>",
        f"  <h2>{heading}</h2>",
        "  <hr />",
        '  <table border="1">',
        "   <tr>",
        "    <th>Words</th>",
        "    <th>Counts</th>",
        "   </tr>",
    ]

    for word in words:
        if word not in counts:
            raise KeyError(f"word {word!r} has no count")
        out.extend([
            "   <tr>",
            f"    <td>{escape(word)}</td>",
            f"    <td>{counts[word]}</td>",
            "   </tr>",
        ])

    out.extend([
        "  </table>",
        " </body>",
        "</html>",
    ])
    return out


def write_html(sink: TextIO, title: str, words: Sequence[str], counts: Mapping[str, int]) -> int:
    lines = render_html(title, words, counts)
    for line in lines:
        sink.write(line + "\n")
    return len(lines)
