"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtailor.config import ConfigLoadError, Settings, load_config
from mdtailor.core.errors import ConfigError, DocumentError, SchemaValidationError
from mdtailor.core.models import NODE_SEQUENCE, LoadedDocument
from mdtailor.core.pipeline import load_route_document
from mdtailor.core.routes import find_route
from mdtailor.log import configure_logging
from mdtailor.render.components import render_components
from mdtailor.render.elements import element_components
from mdtailor.render.markup import render_markup
from mdtailor.util.fs import discover_files, resolve_document


FORMATS = ("html", "nodes", "tree")


def _fail(msg: str) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    overrides = dict(overrides or {})
    overrides["log_level"] = (ctx.obj or {}).get("log_level")
    try:
        settings = load_config(overrides=overrides)
    except ConfigLoadError as e:
        _fail("\n".join(_describe(e.error)))
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _describe(error: DocumentError) -> list[str]:
    """Message line plus one indented line per field issue."""
    lines = [error.message]
    if isinstance(error, (SchemaValidationError, ConfigError)):
        lines += [f"    {i.path}: {i.reason}" for i in error.issues]
    if isinstance(error, SchemaValidationError) and error.unexpected:
        lines.append(f"    unexpected: {', '.join(error.unexpected)}")
    return lines


def _render(doc: LoadedDocument, fmt: str, settings: Settings, escape: bool) -> str:
    if fmt == "html":
        return render_markup(doc.nodes, escape=escape)
    if fmt == "nodes":
        return NODE_SEQUENCE.dump_json(doc.nodes, indent=2).decode("utf-8")
    tree = render_components(doc.nodes, element_components(settings.class_names))
    return json.dumps([e.to_dict() for e in tree], indent=2, ensure_ascii=False)


def _check_format(fmt: str) -> None:
    if fmt not in FORMATS:
        _fail(f"Unknown format '{fmt}'; expected one of: {', '.join(FORMATS)}")


def routes_cmd(ctx: typer.Context):
    """List configured routes."""
    settings = _settings(ctx)
    if not settings.routes:
        typer.echo("No routes configured. Add them to config.yaml.")
        raise typer.Exit(1)
    for r in settings.routes:
        typer.echo(f"{r.name}\t{r.path}\t{r.folder}\t{len(r.fields)} field(s)")


def check_cmd(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File or directory to check")],
    route: Annotated[str, typer.Option("--route", "-r", help="Route whose fields apply")],
    ):
    """Validate front matter of every .md/.mdx file under path."""
    settings = _settings(ctx)
    files = discover_files(Path(path))
    if not files:
        _fail(f"No .md/.mdx files found at {path}")

    failed = 0
    for f in files:
        result = load_route_document(f.read_text(encoding="utf-8"), settings.routes, route)
        if result.ok:
            typer.echo(f"  ok: {f}")
            continue
        failed += 1
        head, *detail = _describe(result.error)
        typer.echo(f"  error: {f} - {head}")
        for line in detail:
            typer.echo(line)

    typer.echo(f"Checked {len(files)} document(s): {len(files) - failed} ok, {failed} failed")
    if failed:
        raise typer.Exit(1)


def render_cmd(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Document to render")],
    route: Annotated[str, typer.Option("--route", "-r", help="Route whose fields apply")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="html, nodes, or tree")] = "html",
    escape: Annotated[Optional[bool], typer.Option("--escape/--no-escape", help="HTML-escape text")] = None,
    ):
    """Render one document body as HTML, node JSON, or an element tree."""
    _check_format(fmt)
    settings = _settings(ctx, overrides={"escape_html": escape})
    source = Path(path)
    if not source.is_file():
        _fail(f"File not found: {path}")

    result = load_route_document(source.read_text(encoding="utf-8"), settings.routes, route)
    if not result.ok:
        _fail("\n".join(_describe(result.error)))
    typer.echo(_render(result.value, fmt, settings, settings.escape_html))


def show_cmd(
    ctx: typer.Context,
    route: Annotated[str, typer.Argument(help="Route name")],
    name: Annotated[str, typer.Argument(help="Document name inside the route folder")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="html, nodes, or tree")] = "html",
    ):
    """Resolve a document by route and name; print its metadata and rendered body."""
    _check_format(fmt)
    settings = _settings(ctx)
    found = find_route(settings.routes, route)
    if not found.ok:
        _fail(found.error.message)

    source = resolve_document(Path(settings.work_dir), found.value, name)
    if source is None:
        _fail(f"No document '{name}' in {Path(settings.work_dir) / found.value.folder}")

    result = load_route_document(source.read_text(encoding="utf-8"), settings.routes, route)
    if not result.ok:
        _fail("\n".join(_describe(result.error)))
    typer.echo(json.dumps(result.value.metadata, indent=2, ensure_ascii=False, default=str))
    typer.echo(_render(result.value, fmt, settings, settings.escape_html))
