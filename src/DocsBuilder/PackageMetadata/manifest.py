# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.manifest",
#   "purpose": "Locate a crate's manifest on disk and load its build metadata.",
#   "sections": [
#     {
#       "id": "packagehandle",
#       "name": "PackageHandle",
#       "anchor": "class-packagehandle",
#       "kind": "class"
#     },
#     {
#       "id": "localpackage",
#       "name": "LocalPackage",
#       "anchor": "class-localpackage",
#       "kind": "class"
#     },
#     {
#       "id": "locate",
#       "name": "locate",
#       "anchor": "function-locate",
#       "kind": "function"
#     },
#     {
#       "id": "from-manifest",
#       "name": "from_manifest",
#       "anchor": "function-from-manifest",
#       "kind": "function"
#     },
#     {
#       "id": "from-package",
#       "name": "from_package",
#       "anchor": "function-from-package",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Locate a crate's manifest on disk and load its build metadata.

Published crates are repackaged with a normalised ``Cargo.toml``; the file the
author actually wrote survives as ``Cargo.toml.orig``. The locator prefers the
pristine copy so comments and the exact shape of the settings table are read
as authored, and falls back to the canonical manifest otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from .errors import ManifestNotFound, SourcePathUnavailable
from .logging import LOGGER_NAME, get_logger
from .metadata import PackageMetadata, extract

__all__ = [
    "CANONICAL_MANIFEST",
    "MANIFEST_CANDIDATES",
    "LocalPackage",
    "PackageHandle",
    "from_manifest",
    "from_package",
    "locate",
]

CANONICAL_MANIFEST = "Cargo.toml"
MANIFEST_CANDIDATES: tuple[str, ...] = ("Cargo.toml.orig", CANONICAL_MANIFEST)

_LOGGER = get_logger(LOGGER_NAME).child(component="manifest")


@runtime_checkable
class PackageHandle(Protocol):
    """Anything that knows where its package manifest lives."""

    @property
    def manifest_path(self) -> Path: ...


@dataclass(frozen=True)
class LocalPackage:
    """Package handle backed by a manifest path on the local filesystem."""

    manifest_path: Path

    @classmethod
    def from_directory(cls, directory: Path | str) -> "LocalPackage":
        """Return a handle for the canonical manifest inside ``directory``."""

        return cls(Path(directory) / CANONICAL_MANIFEST)


def _source_dir(manifest_path: Path) -> Path:
    parent = manifest_path.parent
    # ``Path("/").parent`` and ``Path("").parent`` are the path itself.
    if parent == manifest_path:
        raise SourcePathUnavailable("source path unavailable", manifest_path)
    return parent


def locate(
    package: PackageHandle, candidates: Sequence[str] = MANIFEST_CANDIDATES
) -> Path:
    """Return the first existing manifest among ``candidates`` for ``package``.

    Args:
        package: Handle exposing the package's ``manifest_path``.
        candidates: File names probed in priority order inside the source
            directory.

    Returns:
        Path to the first candidate present on disk.

    Raises:
        SourcePathUnavailable: If the manifest path has no parent directory.
        ManifestNotFound: If none of the candidates exist.
    """

    src_dir = _source_dir(Path(package.manifest_path))
    for name in candidates:
        manifest_path = src_dir / name
        if manifest_path.exists():
            _LOGGER.debug(
                "Located package manifest",
                extra={"extra_fields": {"manifest_path": str(manifest_path)}},
            )
            return manifest_path
    raise ManifestNotFound("manifest not found", src_dir)


def from_manifest(path: Path | str) -> PackageMetadata:
    """Read the manifest at ``path`` and resolve its :class:`PackageMetadata`."""

    return extract(Path(path).read_text(encoding="utf-8"))


def from_package(package: PackageHandle) -> PackageMetadata:
    """Locate the manifest for ``package`` and resolve its build metadata."""

    return from_manifest(locate(package))
