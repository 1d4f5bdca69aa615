from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Document:
    id: str
    authority: str
    local_path: str
    display_name: str | None
    media_type: str
    size_bytes: int
    granted: bool
    published_at: str
    revoked_at: str | None = None

    @property
    def content_uri(self) -> str:
        return f"content://{self.authority}/document/{self.id}"
