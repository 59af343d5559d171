from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CursorKind(StrEnum):
    KEYSET = "keyset"
    OFFSET = "offset"


@dataclass(frozen=True, slots=True)
class SortKey:
    field: str
    descending: bool = True
    nulls_first: bool = False


@dataclass(frozen=True, slots=True)
class PaginationPolicy:
    """How a listing orders its rows and where the next page starts.

    The last sort key must be the unique id so equal sort values never
    make page boundaries ambiguous.
    """

    kind: CursorKind
    sort: tuple[SortKey, ...]
    id_field: str = "id"

    def __post_init__(self) -> None:
        if not self.sort or self.sort[-1].field != self.id_field:
            raise ValueError(f"sort must end with the {self.id_field!r} tie-break")

    @classmethod
    def keyset(cls, *sort: SortKey) -> PaginationPolicy:
        return cls(CursorKind.KEYSET, tuple(sort))

    @classmethod
    def offset(cls, *sort: SortKey) -> PaginationPolicy:
        return cls(CursorKind.OFFSET, tuple(sort))

    @property
    def cursor_field(self) -> str:
        return "cursor" if self.kind is CursorKind.KEYSET else "offset"

    @staticmethod
    def has_more(returned: int, limit: int) -> bool:
        # Heuristic: a full page may be followed by an empty one.
        return returned == limit
