"""Asset model."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AssetCollection(BaseModel):
    """Asset with its contract fields and collection fee terms flattened together.

    Every field of the asset's ``asset_contract`` object is kept as an extra
    attribute; the collection-level fee fields are lifted alongside them.
    Missing or non-numeric fee points are ``nan``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow", frozen=True
    )

    royalty_fee_points: int | float
    protocol_fee_points: int | float
    royalty_fee_address: str | None = None
    sell_orders: list[dict[str, Any]] | None = None
    token_id: str | None = None

    def to_json(self) -> dict[str, Any]:
        """Serialize with camelCase names for the lifted fields."""
        return self.model_dump(by_alias=True)
