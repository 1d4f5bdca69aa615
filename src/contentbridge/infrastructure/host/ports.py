"""Host capabilities the bridge depends on.

Kept small so tests can supply plain fakes instead of a real document picker.
"""
from __future__ import annotations

from typing import BinaryIO, Protocol

from contentbridge.domain.models.content_uri import ContentUri
from contentbridge.domain.models.display_name import DisplayNameLookup


class HostContentResolver(Protocol):
    """Opens and describes resources behind permission-scoped content URIs.

    Implementations return ``None`` from :meth:`open_stream` when the
    identifier is unknown, revoked or of a scheme they cannot serve. I/O
    trouble is reported as ``OSError`` or ``ContentResolutionError``.
    """

    def open_stream(self, uri: ContentUri) -> BinaryIO | None: ...

    def query_display_name(self, uri: ContentUri) -> DisplayNameLookup: ...


__all__ = ["HostContentResolver"]
