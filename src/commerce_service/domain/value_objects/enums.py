from __future__ import annotations

from enum import StrEnum


class Region(StrEnum):
    TW = "TW"
    JP = "JP"


class Source(StrEnum):
    KKDAY = "KKDAY"
    KLOOK = "KLOOK"


class PostOrderBy(StrEnum):
    LIKE_COUNT_DESC = "LIKE_DESC"
    CREATED_AT_DESC = "CREATED_AT_DESC"
