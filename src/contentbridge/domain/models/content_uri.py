from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

CONTENT_SCHEME = "content"
FILE_SCHEME = "file"

_C0_CONTROL_OR_SPACE = "".join(chr(c) for c in range(0x21))


@dataclass(frozen=True, slots=True)
class ContentUri:
    """A resource identifier split into its URI parts.

    ``path`` is percent-decoded. It is ``None`` for opaque identifiers such as
    ``mailto:someone`` and for strings that cannot be parsed at all, so a
    caller can tell "no path" apart from "empty path".
    """

    raw: str
    scheme: str | None
    authority: str | None
    path: str | None

    @classmethod
    def parse(cls, raw: str) -> ContentUri:
        try:
            parts = urlsplit(raw.strip(_C0_CONTROL_OR_SPACE))
        except ValueError:
            return cls(raw=raw, scheme=None, authority=None, path=None)

        scheme = parts.scheme.lower() or None
        if scheme is not None and not parts.netloc and not parts.path.startswith("/"):
            # Opaque: nothing after the scheme is a hierarchical path.
            return cls(raw=raw, scheme=scheme, authority=None, path=None)

        authority = parts.netloc or None
        return cls(raw=raw, scheme=scheme, authority=authority, path=unquote(parts.path))

    @property
    def is_content(self) -> bool:
        return self.scheme == CONTENT_SCHEME

    @property
    def is_file(self) -> bool:
        return self.scheme == FILE_SCHEME

    def path_segments(self) -> list[str]:
        if not self.path:
            return []
        return [segment for segment in self.path.split("/") if segment]

    def __str__(self) -> str:
        return self.raw
