"""Typer CLI entrypoint for csswg-valuegen."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from apps.cli.format_human import (
    render_family_index,
    render_generation_summary,
    render_property_table,
)
from core.orchestrator.models import GenerationReport
from core.orchestrator.pipeline import run_generation
from core.overrides.loader import load_overrides
from core.sources.cache import FileTextCache
from core.sources.index import resolve_index
from core.sources.remote import SpecSourceClient, build_http_client
from core.sources.settings import GeneratorSettings, settings_from_env
from core.utils.errors import SourceFetchError, UnknownFamilyError

app = typer.Typer(help="CSS value definition generator", rich_markup_mode=None)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNKNOWN_FAMILY = 2

CacheDirOption = Annotated[
    Path | None,
    typer.Option("--cache-dir", help="Directory holding index and document cache files."),
]
OverridesOption = Annotated[
    Path | None,
    typer.Option("--overrides", help="Override tables YAML (defaults to the bundled file)."),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", help="Log fetch and write events to stderr.")
]


@app.callback()
def cli_callback() -> None:
    """CLI root callback to keep subcommands explicit."""


@app.command("generate")
def generate_command(
    family: Annotated[str, typer.Argument(help="Draft family name, e.g. sizing.")] = "",
    cache_dir: CacheDirOption = None,
    out_root: Annotated[
        Path | None,
        typer.Option("--out-root", help="Directory containing one module directory per family."),
    ] = None,
    overrides: OverridesOption = None,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the rendered module instead of writing it."),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Generate (or remove) the value definition module for one family."""

    _configure_logging(verbose)
    settings = _settings(cache_dir=cache_dir, out_root=out_root)
    report = _run(family, settings, overrides, write=not stdout)

    if stdout:
        typer.echo(report.module_text, nl=False)
        raise typer.Exit(code=EXIT_OK)

    for document in report.skipped_documents:
        typer.echo(
            f"WARNING(document): {report.family}-{document.version} skipped ({document.outcome})."
        )
    typer.echo(render_generation_summary(report))
    typer.echo("INFO: success")
    raise typer.Exit(code=EXIT_OK)


@app.command("inspect")
def inspect_command(
    family: Annotated[str, typer.Argument(help="Draft family name, e.g. sizing.")] = "",
    cache_dir: CacheDirOption = None,
    overrides: OverridesOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the classification of every property in a family without writing."""

    _configure_logging(verbose)
    settings = _settings(cache_dir=cache_dir)
    report = _run(family, settings, overrides, write=False)
    typer.echo(render_property_table(report))
    raise typer.Exit(code=EXIT_OK)


@app.command("families")
def families_command(
    cache_dir: CacheDirOption = None,
    verbose: VerboseOption = False,
) -> None:
    """List draft families and their versions from the spec index."""

    _configure_logging(verbose)
    settings = _settings(cache_dir=cache_dir)
    try:
        with build_http_client(settings.timeout_seconds) as http:
            index = resolve_index(
                FileTextCache(settings.cache_dir), SpecSourceClient(http), settings
            )
    except SourceFetchError as exc:
        typer.echo(f"ERROR: fetch failed: {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc
    except OSError as exc:
        typer.echo(f"ERROR: {type(exc).__name__}: {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc
    typer.echo(render_family_index(index))
    raise typer.Exit(code=EXIT_OK)


def _run(
    family: str,
    settings: GeneratorSettings,
    overrides: Path | None,
    *,
    write: bool,
) -> GenerationReport:
    try:
        tables = load_overrides(overrides)
        with build_http_client(settings.timeout_seconds) as http:
            return run_generation(
                family.strip(),
                cache=FileTextCache(settings.cache_dir),
                client=SpecSourceClient(http),
                settings=settings,
                tables=tables,
                write=write,
            )
    except UnknownFamilyError as exc:
        typer.echo(f"ERROR: {exc}")
        if exc.known_families:
            typer.echo(f"INFO: known families: {', '.join(exc.known_families)}")
        raise typer.Exit(code=EXIT_UNKNOWN_FAMILY) from exc
    except SourceFetchError as exc:
        typer.echo(f"ERROR: fetch failed: {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc
    except (OSError, ValueError) as exc:
        typer.echo(f"ERROR: {type(exc).__name__}: {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc


def _settings(*, cache_dir: Path | None = None, out_root: Path | None = None) -> GeneratorSettings:
    settings = settings_from_env()
    if cache_dir is not None:
        settings = replace(settings, cache_dir=cache_dir)
    if out_root is not None:
        settings = replace(settings, out_root=out_root)
    return settings


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
