# === NAVMAP v1 ===
# {
#   "module": "DocsBuilder.PackageMetadata.errors",
#   "purpose": "Exception types raised while locating a package manifest.",
#   "sections": [
#     {
#       "id": "manifestlookuperror",
#       "name": "ManifestLookupError",
#       "anchor": "class-manifestlookuperror",
#       "kind": "class"
#     },
#     {
#       "id": "sourcepathunavailable",
#       "name": "SourcePathUnavailable",
#       "anchor": "class-sourcepathunavailable",
#       "kind": "class"
#     },
#     {
#       "id": "manifestnotfound",
#       "name": "ManifestNotFound",
#       "anchor": "class-manifestnotfound",
#       "kind": "class"
#     }
#   ]
# }
# === /NAVMAP ===

"""Exception types raised while locating a package manifest.

Only manifest discovery can fail: metadata extraction degrades malformed
configuration to defaults instead of raising. Both failure kinds share the
:class:`ManifestLookupError` base so build orchestration can treat "this
package has no usable manifest" as a single, non-retryable condition.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

__all__ = [
    "ManifestLookupError",
    "ManifestNotFound",
    "SourcePathUnavailable",
]


@dataclass(slots=True)
class ManifestLookupError(LookupError):
    """Base exception for manifest discovery failures."""

    message: str
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Initialise the ``LookupError`` base with the human-readable message."""

        LookupError.__init__(self, self.message)

    def __str__(self) -> str:
        """Return the message, suffixed with the offending path when known."""

        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class SourcePathUnavailable(ManifestLookupError):
    """Raised when the package manifest path has no parent directory."""


class ManifestNotFound(ManifestLookupError):
    """Raised when no candidate manifest exists in the package source directory."""
