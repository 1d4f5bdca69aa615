from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import BinaryIO

from contentbridge.core.errors import ContentResolutionError, DocumentPublishError
from contentbridge.core.ids import new_uuid
from contentbridge.core.time import now_utc_iso
from contentbridge.domain.models.content_uri import ContentUri
from contentbridge.domain.models.display_name import NOT_FOUND, DisplayNameLookup, Found, NotFound
from contentbridge.domain.models.document import Document
from contentbridge.infrastructure.db.repos.document_repo import DocumentRepo

logger = logging.getLogger(__name__)

_DOCUMENT_SEGMENT = "document"


class LocalDocumentProvider:
    """Host resolver backed by a registry of locally published documents.

    ``content://<authority>/document/<id>`` identifiers are served only while
    their grant is active. ``file://`` identifiers are opened straight from
    the local filesystem and never carry metadata.
    """

    def __init__(self, repo: DocumentRepo, authority: str) -> None:
        self.repo = repo
        self.authority = authority

    def publish(self, local_path: Path, display_name: str | None = None, *, use_filename: bool = True) -> Document:
        path = local_path.expanduser().resolve()
        if not path.exists() or not path.is_file():
            raise DocumentPublishError(f"File not found: {path}")

        if display_name is None and use_filename:
            display_name = path.name

        document = Document(
            id=new_uuid(),
            authority=self.authority,
            local_path=str(path),
            display_name=display_name,
            media_type=mimetypes.guess_type(path.name)[0] or "application/octet-stream",
            size_bytes=path.stat().st_size,
            granted=True,
            published_at=now_utc_iso(),
        )
        self.repo.insert(document)
        logger.info("Published %s as %s", path, document.content_uri)
        return document

    def revoke(self, content_uri: str) -> bool:
        document_id = self._document_id(ContentUri.parse(content_uri))
        if document_id is None:
            return False
        revoked = self.repo.revoke(document_id, revoked_at=now_utc_iso())
        if revoked:
            logger.info("Revoked grant for %s", content_uri)
        return revoked

    def list_documents(self, limit: int = 100, include_revoked: bool = False) -> list[Document]:
        return self.repo.list(limit=limit, include_revoked=include_revoked)

    def open_stream(self, uri: ContentUri) -> BinaryIO | None:
        if uri.is_file:
            return self._open_local(uri.path)
        if not uri.is_content:
            logger.debug("Unsupported scheme for %s", uri)
            return None

        document_id = self._document_id(uri)
        if document_id is None:
            return None
        document = self.repo.get_granted(self.authority, document_id)
        if document is None:
            logger.debug("No granted document for %s", uri)
            return None
        stream = self._open_local(document.local_path)
        if stream is None:
            raise ContentResolutionError(f"Backing file for {uri} is no longer available")
        return stream

    def query_display_name(self, uri: ContentUri) -> DisplayNameLookup:
        if not uri.is_content:
            return NotFound("not a content uri")
        document_id = self._document_id(uri)
        if document_id is None:
            return NotFound("unknown authority or document path")

        row = self.repo.query_display_name(self.authority, document_id)
        if row is None:
            return NOT_FOUND
        name = row["display_name"]
        if not isinstance(name, str) or not name:
            return NotFound("display name column is empty")
        return Found(name)

    def _document_id(self, uri: ContentUri) -> str | None:
        if not uri.is_content or uri.authority != self.authority:
            return None
        segments = uri.path_segments()
        if len(segments) != 2 or segments[0] != _DOCUMENT_SEGMENT:
            return None
        return segments[1]

    @staticmethod
    def _open_local(path: str | None) -> BinaryIO | None:
        if not path:
            return None
        local = Path(path)
        if not local.is_file():
            return None
        return local.open("rb")
