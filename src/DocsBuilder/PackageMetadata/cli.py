# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.cli",
#   "purpose": "Typer CLI for inspecting a package's manifest and build metadata.",
#   "sections": [
#     {
#       "id": "root",
#       "name": "root",
#       "anchor": "function-root",
#       "kind": "function"
#     },
#     {
#       "id": "locate-command",
#       "name": "locate_command",
#       "anchor": "function-locate-command",
#       "kind": "function"
#     },
#     {
#       "id": "metadata-command",
#       "name": "metadata_command",
#       "anchor": "function-metadata-command",
#       "kind": "function"
#     },
#     {
#       "id": "main",
#       "name": "main",
#       "anchor": "function-main",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Typer CLI for inspecting a package's manifest and build metadata.

``docsbuilder locate`` shows which manifest the builder would read for a
package and ``docsbuilder metadata`` prints the resolved
``[package.metadata.docs.rs]`` customisations, either as aligned text or as a
JSON document that build orchestration can consume directly.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, NoReturn, Optional, Sequence

import typer
from pydantic import ValidationError

from DocsBuilder.PackageMetadata import __version__

from .errors import ManifestLookupError
from .logging import LOGGER_NAME, StructuredLogger, get_logger, log_event
from .manifest import LocalPackage, from_manifest, locate
from .metadata import PackageMetadata
from .settings import BuilderSettings, OutputFormat, load_settings

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Inspect crate manifests and their documentation build metadata.",
)

__all__ = [
    "app",
    "locate_command",
    "main",
    "metadata_command",
    "render_pretty",
]

LogLevelOption = Annotated[
    Optional[str],
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
LogFormatOption = Annotated[
    Optional[str],
    typer.Option("--log-format", help="Log output format (console|json)"),
]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"DocsBuilder {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the package version and exit.",
        ),
    ] = False,
) -> None:
    """Documentation builder package metadata tools."""


def _settings_or_exit(**overrides: Optional[str]) -> BuilderSettings:
    try:
        return load_settings(**overrides)
    except ValidationError as exc:
        typer.secho(f"✗ Configuration Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)


def _logger_for(settings: BuilderSettings) -> StructuredLogger:
    return get_logger(
        LOGGER_NAME,
        settings.log_level.value,
        log_format=settings.log_format.value,
    ).child(component="cli")


def _package_for(path: Path) -> LocalPackage:
    if path.is_dir():
        return LocalPackage.from_directory(path)
    return LocalPackage(path)


def _fail(logger: StructuredLogger, exc: Exception, path: Path) -> NoReturn:
    log_event(
        logger,
        "error",
        str(exc),
        error_code=type(exc).__name__,
        package_path=str(path),
    )
    typer.secho(f"✗ {exc}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def render_pretty(metadata: PackageMetadata) -> str:
    """Render ``metadata`` as aligned ``key: value`` lines."""

    payload = metadata.to_dict()
    width = max(len(key) for key in payload)
    lines = []
    for key, value in payload.items():
        if value is None:
            rendered = "-"
        elif isinstance(value, bool):
            rendered = "true" if value else "false"
        elif isinstance(value, list):
            rendered = ", ".join(value) if value else "[]"
        else:
            rendered = str(value)
        lines.append(f"{key.ljust(width)}  {rendered}")
    return "\n".join(lines)


@app.command("locate")
def locate_command(
    path: Annotated[
        Path, typer.Argument(help="Package directory or path to its Cargo.toml")
    ],
    log_level: LogLevelOption = None,
    log_format: LogFormatOption = None,
) -> None:
    """Print the manifest the builder reads for the package at PATH."""

    settings = _settings_or_exit(log_level=log_level, log_format=log_format)
    logger = _logger_for(settings)
    try:
        manifest_path = locate(_package_for(path))
    except ManifestLookupError as exc:
        _fail(logger, exc, path)
    typer.echo(str(manifest_path))


@app.command("metadata")
def metadata_command(
    path: Annotated[
        Path, typer.Argument(help="Package directory or path to its Cargo.toml")
    ],
    output: Annotated[
        Optional[str],
        typer.Option("--output", help="Render output as 'pretty' text or 'json'"),
    ] = None,
    log_level: LogLevelOption = None,
    log_format: LogFormatOption = None,
) -> None:
    """Print the documentation build metadata declared by the package at PATH."""

    settings = _settings_or_exit(log_level=log_level, log_format=log_format, output=output)
    logger = _logger_for(settings)
    try:
        manifest_path = locate(_package_for(path))
        metadata = from_manifest(manifest_path)
    except (ManifestLookupError, OSError, UnicodeDecodeError) as exc:
        _fail(logger, exc, path)

    log_event(logger, "debug", "Resolved package metadata", manifest_path=str(manifest_path))
    if settings.output is OutputFormat.JSON:
        typer.echo(json.dumps(metadata.to_dict(), indent=2, sort_keys=True))
    else:
        typer.echo(render_pretty(metadata))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Typer application and return its exit code."""

    result = app(args=list(argv) if argv is not None else None, standalone_mode=False)
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
