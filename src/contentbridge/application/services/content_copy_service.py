from __future__ import annotations

import logging
from pathlib import Path

from contentbridge.core.errors import ContentBridgeError
from contentbridge.core.files import DEFAULT_COPY_CHUNK_BYTES, write_stream, write_stream_atomic
from contentbridge.domain.models.content_uri import ContentUri
from contentbridge.infrastructure.host.ports import HostContentResolver

logger = logging.getLogger(__name__)


class ContentCopyService:
    """Copies the bytes behind a content URI into a local destination path."""

    def __init__(
        self,
        resolver: HostContentResolver,
        *,
        chunk_size: int = DEFAULT_COPY_CHUNK_BYTES,
        atomic: bool = False,
    ) -> None:
        self.resolver = resolver
        self.chunk_size = chunk_size
        self.atomic = atomic

    def copy(self, content_uri: str, destination: str | Path) -> bool:
        """Return ``True`` only when every byte landed and both handles closed.

        An identifier that cannot be opened is an expected outcome and gives
        ``False``. So does any failure after that, I/O or otherwise; a
        partially written destination is left behind unless ``atomic`` is set.
        """
        uri = ContentUri.parse(content_uri)
        dst = Path(destination)
        try:
            stream = self.resolver.open_stream(uri)
            if stream is None:
                logger.info("No readable stream for %s", uri)
                return False

            write = write_stream_atomic if self.atomic else write_stream
            with stream:
                written = write(stream, dst, self.chunk_size)
        except (OSError, ContentBridgeError) as exc:
            logger.warning("Copy of %s to %s failed: %s", uri, dst, exc)
            return False
        except Exception:
            logger.error("Copy of %s to %s failed", uri, dst, exc_info=True)
            return False

        logger.info("Copied %d bytes from %s to %s", written, uri, dst)
        return True
