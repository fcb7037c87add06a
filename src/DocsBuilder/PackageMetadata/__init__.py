# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.__init__",
#   "purpose": "Public surface for manifest discovery and docs.rs build metadata.",
#   "sections": [
#     {
#       "id": "getattr",
#       "name": "__getattr__",
#       "anchor": "function-getattr",
#       "kind": "function"
#     },
#     {
#       "id": "dir",
#       "name": "__dir__",
#       "anchor": "function-dir",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Public surface for manifest discovery and docs.rs build metadata.

Build orchestration needs two things from a crate before compiling its
documentation: which manifest to read, and which customisations that manifest
declares in ``[package.metadata.docs.rs]``. Both are available from this
namespace::

    from DocsBuilder.PackageMetadata import LocalPackage, from_package

    metadata = from_package(LocalPackage.from_directory("/srv/crates/serde-1.0.0"))
    if metadata.all_features:
        ...

The Typer application in :mod:`DocsBuilder.PackageMetadata.cli` is loaded on
first attribute access so library callers do not import the CLI stack.
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import TYPE_CHECKING

from .config_loaders import ConfigLoadError, load_toml_document
from .errors import ManifestLookupError, ManifestNotFound, SourcePathUnavailable
from .manifest import (
    CANONICAL_MANIFEST,
    MANIFEST_CANDIDATES,
    LocalPackage,
    PackageHandle,
    from_manifest,
    from_package,
    locate,
)
from .metadata import SETTINGS_PATH, PackageMetadata, extract

if TYPE_CHECKING:  # pragma: no cover - import-time hints only
    from . import cli as cli  # noqa: F401 (re-exported at runtime)

__version__ = "0.1.0"

__all__ = [
    "CANONICAL_MANIFEST",
    "MANIFEST_CANDIDATES",
    "SETTINGS_PATH",
    "ConfigLoadError",
    "LocalPackage",
    "ManifestLookupError",
    "ManifestNotFound",
    "PackageHandle",
    "PackageMetadata",
    "SourcePathUnavailable",
    "__version__",
    "extract",
    "from_manifest",
    "from_package",
    "load_toml_document",
    "locate",
]

_LAZY_ATTR_MODULES: dict[str, str] = {
    "cli": "DocsBuilder.PackageMetadata.cli",
}


def __getattr__(name: str) -> ModuleType:
    """Import lazily exposed submodules on first access."""

    module_name = _LAZY_ATTR_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(module_name)
    globals()[name] = module
    return module


def __dir__() -> list[str]:
    """Expose lazy submodules alongside the eager exports."""

    return sorted(set(globals()) | set(_LAZY_ATTR_MODULES))
