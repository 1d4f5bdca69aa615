from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path

from contentbridge.domain.models.document import Document
from contentbridge.infrastructure.db.sqlite import get_connection

_DOCUMENT_COLUMNS = (
    "id, authority, local_path, display_name, media_type, size_bytes, granted, published_at, revoked_at"
)


def _row_to_document(row: sqlite3.Row) -> Document:
    return Document(
        id=row["id"],
        authority=row["authority"],
        local_path=row["local_path"],
        display_name=row["display_name"],
        media_type=row["media_type"],
        size_bytes=int(row["size_bytes"]),
        granted=bool(row["granted"]),
        published_at=row["published_at"],
        revoked_at=row["revoked_at"],
    )


class DocumentRepo:
    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path

    def insert(self, document: Document) -> None:
        with closing(get_connection(self.db_path)) as conn:
            conn.execute(
                """
                INSERT INTO documents (
                    id,
                    authority,
                    local_path,
                    display_name,
                    media_type,
                    size_bytes,
                    granted,
                    published_at,
                    revoked_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    document.id,
                    document.authority,
                    document.local_path,
                    document.display_name,
                    document.media_type,
                    document.size_bytes,
                    1 if document.granted else 0,
                    document.published_at,
                    document.revoked_at,
                ),
            )
            conn.commit()

    def revoke(self, document_id: str, *, revoked_at: str) -> bool:
        with closing(get_connection(self.db_path)) as conn:
            cursor = conn.execute(
                """
                UPDATE documents
                SET granted = 0, revoked_at = ?
                WHERE id = ? AND granted = 1
                """,
                (revoked_at, document_id),
            )
            conn.commit()
            return cursor.rowcount > 0

    def get_granted(self, authority: str, document_id: str) -> Document | None:
        with closing(get_connection(self.db_path)) as conn:
            row = conn.execute(
                f"SELECT {_DOCUMENT_COLUMNS} FROM documents WHERE id = ? AND authority = ? AND granted = 1",
                (document_id, authority),
            ).fetchone()
        return _row_to_document(row) if row else None

    def query_display_name(self, authority: str, document_id: str) -> sqlite3.Row | None:
        """Return the metadata row for a granted document, if any.

        The cursor is closed before returning; callers only see the row.
        """
        with closing(get_connection(self.db_path)) as conn:
            with closing(
                conn.execute(
                    "SELECT display_name FROM documents WHERE id = ? AND authority = ? AND granted = 1",
                    (document_id, authority),
                )
            ) as cursor:
                return cursor.fetchone()

    def list(self, limit: int = 100, include_revoked: bool = False) -> list[Document]:
        where = "" if include_revoked else "WHERE granted = 1"
        with closing(get_connection(self.db_path)) as conn:
            rows = conn.execute(
                f"SELECT {_DOCUMENT_COLUMNS} FROM documents {where} ORDER BY published_at DESC, id LIMIT ?",
                (limit,),
            ).fetchall()
        return [_row_to_document(r) for r in rows]

    def count(self) -> int:
        with closing(get_connection(self.db_path)) as conn:
            row = conn.execute("SELECT COUNT(*) AS n FROM documents WHERE granted = 1").fetchone()
        return int(row["n"]) if row else 0
