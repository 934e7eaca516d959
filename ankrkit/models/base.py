"""Base models shared by every Advanced API request and response."""

from __future__ import annotations

from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ankrkit.models.chains import Chain

# A single chain, a list of chains, or None for "all chains".
BlockchainFilter = Union[Chain, list[Chain], None]

# Block numbers accept hex strings, decimals, "earliest" and "latest".
BlockRef = Union[int, str, None]


class AnkrModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AnkrRequest(AnkrModel):
    """Request params of one RPC method.

    ``send_defaults`` maps field names to the value sent when the field is
    left zero-valued; see ankrkit.models.defaults.apply_defaults.
    """

    send_defaults: ClassVar[dict[str, Any]] = {}

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaginatedRequest(AnkrRequest):
    page_size: int | None = None
    page_token: str | None = None


class PaginatedResponse(AnkrModel):
    next_page_token: str | None = None

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page_token)
