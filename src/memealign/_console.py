"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/_console.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from rich.traceback import install as rich_tb

from .core.alignment import MotifAlignment

theme = Theme(
    {
        "ok": "green",
        "bad": "red",
        "muted": "dim",
        "frame": "bright_cyan",
        "title": "bold bright_cyan",
        "site": "bold bright_white",
        "plus": "green",
        "minus": "magenta",
    }
)
console = Console(theme=theme)


class _JsonLineFormatter(logging.Formatter):
    """One JSON object per record; the exception text rides along when present."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_console_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Install a single root handler on stderr; stdout stays free for exported alignments."""
    lvl = level.upper()
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(lvl)

    handler: logging.Handler
    if json_logs:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_JsonLineFormatter())
    else:
        # report text may contain brackets, so markup stays off
        handler = RichHandler(
            console=Console(theme=theme, stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
    handler.setLevel(lvl)
    root.addHandler(handler)


def rich_tracebacks(enabled: bool = True) -> None:
    if enabled:
        rich_tb(show_locals=False)


def _rounded_table(title: str) -> Table:
    return Table(
        title=Text(title, style="title"),
        header_style="bold",
        border_style="frame",
        box=box.ROUNDED,
    )


def _fmt_float(value: Optional[float]) -> str:
    return "—" if value is None else f"{value:.3g}"


def render_alignment(aln: MotifAlignment, index: int) -> None:
    """One table per sites block, rows in report order."""
    label = aln.motif_label or aln.motif_id or f"block {index}"
    t = _rounded_table(f"Motif {label}  E-value = {_fmt_float(aln.score)}")
    t.add_column("sequence", no_wrap=True)
    t.add_column("strand", justify="center")
    t.add_column("start", justify="right")
    t.add_column("end", justify="right")
    t.add_column("p-value", justify="right")
    t.add_column("site", no_wrap=True)
    for site in aln:
        plus = site.strand > 0
        t.add_row(
            Text(site.sequence_name),
            Text("+" if plus else "-", style="plus" if plus else "minus"),
            str(site.start),
            str(site.end),
            _fmt_float(site.pvalue),
            Text(site.residues, style="site"),
        )
    console.print(t)


def render_validation_summary(rows: Iterable[dict]) -> None:
    t = _rounded_table("MEME Validation")
    t.add_column("file")
    t.add_column("status")
    t.add_column("version")
    t.add_column("sections", justify="right")
    t.add_column("detail")
    for row in rows:
        ok = row["error"] is None
        t.add_row(
            Text(row["file"]),
            Text("ok" if ok else "invalid", style="ok" if ok else "bad"),
            row["version"] or "—",
            str(row["sections"]),
            Text(row["error"] or "", style="muted"),
        )
    console.print(t)
