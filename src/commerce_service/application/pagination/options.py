from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_LIMIT = 40

# Integer ids and offsets are bound to the int4 range the store accepts.
MAX_INT4 = 2**31 - 1


class ListOptions(BaseModel):
    """Canonical filter/sort/position record of a listing.

    Subclasses declare the resource filters, the position field
    (``cursor`` or ``offset``) and their own default ``limit``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    limit: int = Field(15, ge=1, le=MAX_LIMIT)
