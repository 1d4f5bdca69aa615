from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Found:
    name: str


@dataclass(frozen=True, slots=True)
class NotFound:
    reason: str | None = None


DisplayNameLookup = Union[Found, NotFound]

NOT_FOUND = NotFound()


def derive_display_name(lookup: DisplayNameLookup, path: str | None) -> str | None:
    """Pick the display name for a resource.

    A non-empty metadata name always wins. Otherwise the text after the last
    ``/`` of ``path`` is used, or the whole path when it has no separator.
    Empty results collapse to ``None``.
    """
    if isinstance(lookup, Found) and isinstance(lookup.name, str) and lookup.name:
        return lookup.name
    if path is None:
        return None
    cut = path.rfind("/")
    tail = path[cut + 1 :] if cut != -1 else path
    return tail or None
