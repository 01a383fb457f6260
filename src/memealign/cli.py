"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/cli.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.markup import escape

from ._console import console, render_alignment, render_validation_summary, rich_tracebacks, setup_console_logging
from ._logging import get_logger
from .api import open_reader
from .config import ReaderConfig, RootConfig, discover_config, load_config
from .errors import (
    ConfigError,
    HtmlOutputDetectedError,
    MemeParseError,
    MissingHeaderError,
    RaggedAlignmentError,
    TruncatedSectionError,
    UnrecognizedLineError,
    UnsupportedVersionError,
    WriteNotSupportedError,
)
from .io.export import export_alignments

_LOG = get_logger(__name__)

app = typer.Typer(
    add_completion=True,
    no_args_is_help=True,
    help="Read MEME sites sections as alignments.",
)

_SUFFIX = {
    "json": ".json",
    "fasta": ".fasta",
    "clustal": ".aln",
    "stockholm": ".sto",
    "phylip-relaxed": ".phy",
}


def _exit_for(e: Exception) -> int:
    mapping = {
        ConfigError: 2,
        MissingHeaderError: 3,
        UnsupportedVersionError: 4,
        HtmlOutputDetectedError: 5,
        UnrecognizedLineError: 6,
        TruncatedSectionError: 6,
        RaggedAlignmentError: 6,
        WriteNotSupportedError: 7,
    }
    for etype, code in mapping.items():
        if isinstance(e, etype):
            return code
    return 1


def _root_cfg(ctx: typer.Context) -> RootConfig:
    return ctx.obj if isinstance(ctx.obj, RootConfig) else RootConfig()


def _reader_cfg(ctx: typer.Context, alphabet: Optional[str]) -> ReaderConfig:
    data = _root_cfg(ctx).reader.model_dump()
    if alphabet:
        data["alphabet"] = alphabet.lower()
    try:
        return ReaderConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid reader options: {e}") from e


@app.callback()
def _root(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Path to memealign.yaml"),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="MEMEALIGN_LOG_LEVEL",
        help="Console log level.",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit JSON logs."),
    trace: bool = typer.Option(False, "--trace", help="Rich tracebacks on errors."),
):
    setup_console_logging(log_level, json_logs)
    rich_tracebacks(enabled=trace)
    try:
        cfg_path = discover_config(config)
        ctx.obj = load_config(cfg_path) if cfg_path else RootConfig()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=_exit_for(e))
    if cfg_path:
        _LOG.info("Using config: %s", cfg_path)


# ───────────────────────────────────────────────────────────────────────────────
# SITES
# ───────────────────────────────────────────────────────────────────────────────


@app.command(help="Show every sites section of a MEME text report as a table.")
def sites(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="MEME text output (meme.txt)."),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", help="dna|rna|protein"),
):
    try:
        cfg = _reader_cfg(ctx, alphabet)
        n = 0
        with open_reader(path, config=cfg) as reader:
            for aln in reader:
                n += 1
                render_alignment(aln, n)
        if n == 0:
            console.print("[yellow]No sites sections found.[/yellow]")
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=_exit_for(e))


# ───────────────────────────────────────────────────────────────────────────────
# VALIDATE
# ───────────────────────────────────────────────────────────────────────────────


@app.command(help="Check that files parse cleanly; reports version and section count.")
def validate(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(..., help="One or more MEME text reports."),
):
    cfg = _root_cfg(ctx).reader
    rows = []
    first_error: Optional[Exception] = None
    for path in paths:
        row = {"file": str(path), "version": None, "sections": 0, "error": None}
        reader = None
        try:
            reader = open_reader(path, config=cfg)
            with reader:
                for _ in reader:
                    row["sections"] += 1
        except (MemeParseError, FileNotFoundError) as e:
            row["error"] = str(e).splitlines()[0]
            first_error = first_error or e
        if reader is not None:
            row["version"] = reader.state.version
        rows.append(row)
    render_validation_summary(rows)
    if first_error is not None:
        raise typer.Exit(code=_exit_for(first_error))


# ───────────────────────────────────────────────────────────────────────────────
# EXPORT
# ───────────────────────────────────────────────────────────────────────────────


@app.command(help="Convert sites sections to another alignment format.")
def export(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="MEME text output (meme.txt)."),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="json|fasta|clustal|stockholm|phylip-relaxed"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output file ('-' for stdout)."),
    alphabet: Optional[str] = typer.Option(None, "--alphabet", help="dna|rna|protein"),
    overwrite: Optional[bool] = typer.Option(None, "--overwrite/--no-overwrite"),
):
    try:
        root = _root_cfg(ctx)
        fmt = (fmt or root.export.format).lower()
        allow_overwrite = root.export.overwrite if overwrite is None else overwrite

        if out is None and root.export.out_dir:
            out = Path(root.export.out_dir) / f"{path.stem}{_SUFFIX.get(fmt, '.txt')}"

        with open_reader(path, config=_reader_cfg(ctx, alphabet)) as reader:
            alns = list(reader)

        if out is None or str(out) == "-":
            written = export_alignments(alns, sys.stdout, fmt)
        else:
            if out.exists() and not allow_overwrite:
                raise ConfigError(f"Refusing to overwrite {out}. Pass --overwrite.")
            out.parent.mkdir(parents=True, exist_ok=True)
            written = export_alignments(alns, out, fmt)
            console.print(f"[green]✔ Wrote {written} alignment(s) to {escape(str(out))}[/green]")
        _LOG.info("Exported %d alignment(s) from %s as %s", written, path, fmt)
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=_exit_for(e))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
