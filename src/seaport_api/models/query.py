"""Query parameter models for the asset and order endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.seaport_api.core.enums import OrderSide


class AssetsQueryParams(BaseModel):
    """Filters for the asset listing endpoint."""

    model_config = ConfigDict(frozen=True)

    owner: str | None = Field(None, description="Only assets held by this address")
    include_orders: bool | None = Field(None, description="Embed orders in each asset")
    limit: int | None = Field(None, gt=0, description="Page size")
    assets: list[dict[str, Any]] | None = Field(
        None, description="Extra filter blocks, each encoded on its own"
    )


class OrdersQueryParams(BaseModel):
    """Filters for the order listing endpoints."""

    model_config = ConfigDict(frozen=True)

    side: OrderSide = Field(default=OrderSide.SELL, description="bid, ask or all")
    token_ids: list[str] | None = Field(None, description="Token identifiers")
    asset_contract_address: str | None = Field(None, description="Asset contract address")
    limit: int | None = Field(None, gt=0, description="Page size")
    cursor: str | None = None
    payment_token_address: str | None = None
    maker: str | None = None
    taker: str | None = None
    owner: str | None = None
    bundled: bool | None = None
    include_bundled: bool | None = None
    listed_after: int | str | None = None
    listed_before: int | str | None = None
    order_by: str | None = None
    order_direction: str | None = None
    only_english: bool | None = None
