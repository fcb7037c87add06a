# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.config_loaders",
#   "purpose": "TOML loader that turns manifest text into plain Python data.",
#   "sections": [
#     {
#       "id": "configloaderror",
#       "name": "ConfigLoadError",
#       "anchor": "class-configloaderror",
#       "kind": "class"
#     },
#     {
#       "id": "load-toml-document",
#       "name": "load_toml_document",
#       "anchor": "function-load-toml-document",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""TOML loader that turns manifest text into plain Python data.

Package manifests are TOML documents. This module wraps the TOML parser
(``tomllib`` on Python 3.11+, the ``tomli`` backport elsewhere) so callers deal
with a single :class:`ConfigLoadError` instead of parser-specific exceptions.
It returns plain ``dict``/``list``/scalar structures and leaves interpretation
to the metadata extractor.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on Python < 3.11 only
    import tomli as tomllib

__all__ = [
    "ConfigLoadError",
    "load_toml_document",
]


@dataclass(slots=True)
class ConfigLoadError(RuntimeError):
    """Raised when a configuration document cannot be deserialized."""

    message: str

    def __str__(self) -> str:  # pragma: no cover - dataclass convenience
        """Return the stored error message for human-facing output."""

        return self.message


def load_toml_document(raw: str) -> Dict[str, Any]:
    """Deserialize a manifest expressed as TOML into nested dictionaries."""

    try:
        return tomllib.loads(raw)
    except (tomllib.TOMLDecodeError, RecursionError, ValueError, TypeError) as exc:
        # Deeply nested arrays exhaust the recursive parser.
        raise ConfigLoadError("Failed to parse TOML manifest payload") from exc
