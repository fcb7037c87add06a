# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.metadata",
#   "purpose": "Typed build customisation record parsed from [package.metadata.docs.rs].",
#   "sections": [
#     {
#       "id": "packagemetadata",
#       "name": "PackageMetadata",
#       "anchor": "class-packagemetadata",
#       "kind": "class"
#     },
#     {
#       "id": "extract",
#       "name": "extract",
#       "anchor": "function-extract",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Typed build customisation record parsed from ``[package.metadata.docs.rs]``.

Crate authors customise documentation builds by adding a settings table to
their ``Cargo.toml``::

    [package]
    name = "test"

    [package.metadata.docs.rs]
    features = [ "feature1", "feature2" ]
    all-features = true
    no-default-features = true
    default-target = "x86_64-unknown-linux-gnu"
    rustc-args = [ "--example-rustc-arg" ]
    rustdoc-args = [ "--example-rustdoc-arg" ]
    dependencies = [ "example-system-dependency" ]

Every key is optional. :func:`extract` is total: unparseable text, a missing
table, or a wrongly typed value falls back to the default for the affected
field only, so user configuration can never abort an automated build.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .config_loaders import ConfigLoadError, load_toml_document

__all__ = [
    "SETTINGS_PATH",
    "PackageMetadata",
    "extract",
]

SETTINGS_PATH: Tuple[str, ...] = ("package", "metadata", "docs", "rs")


@dataclass(frozen=True, slots=True)
class PackageMetadata:
    """Build customisations declared by a crate for the documentation builder."""

    features: Optional[Tuple[str, ...]] = None
    """Features to build. ``None`` means only the default features."""

    all_features: bool = False
    """Build with every feature enabled."""

    no_default_features: bool = False
    """Disable the default feature set, usually combined with ``features``."""

    default_target: Optional[str] = None
    """Platform triple to build the default documentation for."""

    rustc_args: Optional[Tuple[str, ...]] = None
    """Extra command line arguments for ``rustc``."""

    rustdoc_args: Optional[Tuple[str, ...]] = None
    """Extra command line arguments for ``rustdoc``."""

    dependencies: Optional[Tuple[str, ...]] = None
    """System packages that must be installed before building."""

    @classmethod
    def from_str(cls, manifest: str) -> "PackageMetadata":
        """Alias of :func:`extract` kept on the record for discoverability."""

        return extract(manifest)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping keyed by field name."""

        payload = asdict(self)
        for key, value in payload.items():
            if isinstance(value, tuple):
                payload[key] = list(value)
        return payload


def _get_table(node: object, key: str) -> Optional[Mapping[str, Any]]:
    """Return ``node[key]`` when both are tables, otherwise ``None``."""

    if not isinstance(node, Mapping):
        return None
    child = node.get(key)
    if not isinstance(child, Mapping):
        return None
    return child


def _settings_table(document: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    node: Optional[Mapping[str, Any]] = document
    for key in SETTINGS_PATH:
        node = _get_table(node, key)
        if node is None:
            return None
    return node


def _str_array(table: Mapping[str, Any], key: str) -> Optional[Tuple[str, ...]]:
    # A single non-string element discards the whole array.
    value = table.get(key)
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return tuple(value)


def _bool(table: Mapping[str, Any], key: str, default: bool) -> bool:
    value = table.get(key)
    return value if isinstance(value, bool) else default


def _str(table: Mapping[str, Any], key: str) -> Optional[str]:
    value = table.get(key)
    return value if isinstance(value, str) else None


def extract(document_text: str) -> PackageMetadata:
    """Resolve :class:`PackageMetadata` from the text of a ``Cargo.toml``.

    Args:
        document_text: Raw manifest contents.

    Returns:
        The resolved record. Never raises: malformed documents and a missing
        ``[package.metadata.docs.rs]`` table yield ``PackageMetadata()``.
    """

    defaults = PackageMetadata()
    try:
        document = load_toml_document(document_text)
    except ConfigLoadError:
        return defaults

    table = _settings_table(document)
    if table is None:
        return defaults

    return PackageMetadata(
        features=_str_array(table, "features"),
        all_features=_bool(table, "all-features", defaults.all_features),
        no_default_features=_bool(table, "no-default-features", defaults.no_default_features),
        default_target=_str(table, "default-target"),
        rustc_args=_str_array(table, "rustc-args"),
        rustdoc_args=_str_array(table, "rustdoc-args"),
        dependencies=_str_array(table, "dependencies"),
    )
