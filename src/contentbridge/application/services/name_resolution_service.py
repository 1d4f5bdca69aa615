from __future__ import annotations

import logging

from contentbridge.domain.models.content_uri import ContentUri
from contentbridge.domain.models.display_name import (
    NOT_FOUND,
    DisplayNameLookup,
    NotFound,
    derive_display_name,
)
from contentbridge.infrastructure.host.ports import HostContentResolver

logger = logging.getLogger(__name__)


class NameResolutionService:
    def __init__(self, resolver: HostContentResolver) -> None:
        self.resolver = resolver

    def resolve_name(self, content_uri: str) -> str | None:
        uri = ContentUri.parse(content_uri)
        return derive_display_name(self._lookup(uri), uri.path)

    def _lookup(self, uri: ContentUri) -> DisplayNameLookup:
        if not uri.is_content:
            return NOT_FOUND
        try:
            lookup = self.resolver.query_display_name(uri)
        except Exception as exc:
            # Metadata is best effort: any host failure falls back to the path.
            logger.debug("Display name lookup for %s failed: %s", uri, exc)
            return NotFound(str(exc) or type(exc).__name__)
        if lookup is None:
            return NOT_FOUND
        return lookup
