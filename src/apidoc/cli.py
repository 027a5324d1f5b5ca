from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from apidoc.config import get_settings
from apidoc.document.builder import build_document, include_by_group_name
from apidoc.document.model import Document
from apidoc.document.operations import build_operation
from apidoc.document.paths import normalize_path
from apidoc.document.tags import TagCollector
from apidoc.domain.loader import DescriptionLoadError, load_descriptions
from apidoc.domain.models import EndpointDescription


app = typer.Typer(no_args_is_help=True, add_completion=False)

endpoints_app = typer.Typer(no_args_is_help=True)
app.add_typer(endpoints_app, name="endpoints")

console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: Optional[str]) -> None:
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(path: str) -> list[EndpointDescription]:
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise typer.BadParameter(f"Descriptions file does not exist: {p}")
    try:
        return load_descriptions(p)
    except DescriptionLoadError as e:
        raise typer.BadParameter(str(e)) from e


def _build(path: str, document: Optional[str], app_name: Optional[str]) -> Document:
    settings = get_settings()
    descriptions = _load(path)
    return build_document(
        descriptions,
        application_name=app_name or settings.application_name,
        document_name=document or settings.document_name,
    )


@app.command()
def build(
    descriptions: str = typer.Argument(..., help="JSON file with endpoint descriptions"),
    document: Optional[str] = typer.Option(None, help="Document name (default: APIDOC_DOCUMENT_NAME or v1)"),
    app_name: Optional[str] = typer.Option(None, help="Application name used in the title"),
    out: Optional[str] = typer.Option(None, help="Output path (default: print to stdout)"),
    log_level: Optional[str] = typer.Option(None, help="Log level (DEBUG/INFO/WARNING/...)"),
) -> None:
    _setup_logging(log_level)
    doc = _build(descriptions, document, app_name)
    text = doc.to_json(indent=2)

    if out:
        out_path = Path(out).expanduser()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        console.print(
            f"[bold green]Wrote[/bold green] {doc.info.title}: "
            f"{len(doc.paths)} paths, {len(doc.tags)} tags -> {out_path}"
        )
    else:
        # plain stdout so the output can be piped
        typer.echo(text)


@endpoints_app.command("list")
def endpoints_list(
    descriptions: str = typer.Argument(..., help="JSON file with endpoint descriptions"),
    document: Optional[str] = typer.Option(None, help="Only endpoints included in this document"),
    format: str = typer.Option("table", help="Output format: table|json"),
) -> None:
    fmt = format.lower().strip()
    if fmt not in ("table", "json"):
        raise typer.BadParameter("format must be one of: table, json")

    rows = _load(descriptions)
    if document:
        include = include_by_group_name(document)
        rows = [d for d in rows if include(d)]

    listing = []
    for d in rows:
        op = build_operation(d, TagCollector())
        listing.append(
            {
                "method": d.method,
                "path": normalize_path(d.relative_path),
                "resource": d.resource or "",
                "group": d.group_name or "",
                "tags": [t.name for t in op.tags],
                "responses": list(op.responses),
            }
        )

    if fmt == "json":
        typer.echo(json.dumps(listing, indent=2))
        return

    console.print(f"[bold]Endpoints:[/bold] {len(listing)}")
    table = Table(show_header=True, header_style="bold")
    table.add_column("METHOD", no_wrap=True)
    table.add_column("PATH")
    table.add_column("TAGS")
    table.add_column("GROUP", no_wrap=True)
    table.add_column("STATUS", no_wrap=True)

    for r in listing:
        table.add_row(
            r["method"],
            r["path"],
            ", ".join(r["tags"]),
            r["group"],
            " ".join(r["responses"]),
        )

    console.print(table)


@app.command()
def tags(
    descriptions: str = typer.Argument(..., help="JSON file with endpoint descriptions"),
    document: Optional[str] = typer.Option(None, help="Document name"),
    log_level: Optional[str] = typer.Option(None, help="Log level (DEBUG/INFO/WARNING/...)"),
) -> None:
    _setup_logging(log_level)
    doc = _build(descriptions, document, None)

    # operations per tag, for a quick overview
    counts: dict[str, int] = {t.name: 0 for t in doc.tags}
    for operations in doc.paths.values():
        for op in operations.values():
            for t in op.tags:
                counts[t.name] = counts.get(t.name, 0) + 1

    console.print(f"[bold]{doc.info.title}[/bold]")
    for name, cnt in counts.items():
        console.print(f"  {cnt:>4}  {name}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
