"""src/urilex/uri.py

Parsed URI structure and its serializer.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["ParsedUri", "format_uri"]


@dataclass(frozen=True)
class ParsedUri:
    """
    Components of a ``scheme://host[:port][/path][?query][#fragment]`` URI.

    Attributes:
        scheme: Protocol identifier preceding ``://``.
        hostname: Text between ``://`` and the port, path, query or fragment.
        port: Port number, or None when the URI has none.
        path: Path, always starting with ``/``.
        query: Raw text after ``?``, or None.
        fragment: Raw text after ``#``, or None.
    """

    scheme: str
    hostname: str
    port: Optional[int] = None
    path: str = "/"
    query: Optional[str] = None
    fragment: Optional[str] = None

    @property
    def authority(self) -> str:
        """Hostname with the port appended when present."""
        if self.port is None:
            return self.hostname
        return f"{self.hostname}:{self.port}"

    def replace(self, **changes: Any) -> "ParsedUri":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        return format_uri(self)


def format_uri(uri: ParsedUri) -> str:
    """
    Serialize a parsed URI into its canonical text.

    Only canonical input round-trips exactly; for example
    ``https://example.com`` serializes back with the default ``/`` path.
    A ``/`` path followed by a query or fragment serializes as ``/?`` or
    ``/#``, which parses back without the query and fragment.
    """
    parts = [uri.scheme, "://", uri.authority, uri.path]
    if uri.query is not None:
        parts.append(f"?{uri.query}")
    if uri.fragment is not None:
        parts.append(f"#{uri.fragment}")
    return "".join(parts)
