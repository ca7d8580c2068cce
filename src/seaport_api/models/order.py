"""Order models.

Three shapes of an order live here:

* ``OrderParameters`` / ``OrderWithCounter``: the protocol-native shape a
  signer produces (camelCase JSON, uint256 values as decimal strings).
* ``OrderParametersModel``: the wire shape sent to the marketplace by the
  field mapper.
* ``OrderV2``: the normalized order deserialized from marketplace responses.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.seaport_api.config.constants import DEFAULT_NONCE
from src.seaport_api.core.enums import ItemType, OrderSide, OrderType, SeaportOrderType
from src.seaport_api.models.account import Account, OrderFee

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _uint_to_str(v: Any) -> Any:
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


class OfferItem(BaseModel):
    """Item the offerer gives up."""

    model_config = _CAMEL_CONFIG

    item_type: ItemType
    token: str
    identifier_or_criteria: str
    start_amount: str
    end_amount: str

    @field_validator("identifier_or_criteria", "start_amount", "end_amount", mode="before")
    @classmethod
    def parse_uint(cls, v: Any) -> Any:
        """Accept integers for uint256 fields and keep them as decimal strings."""
        return _uint_to_str(v)


class ConsiderationItem(OfferItem):
    """Item the offerer demands, paid to ``recipient``."""

    recipient: str


class OrderParameters(BaseModel):
    """Seaport order parameters as produced before signing."""

    model_config = _CAMEL_CONFIG

    offerer: str
    zone: str
    zone_hash: str
    start_time: str
    end_time: str
    order_type: SeaportOrderType
    salt: str
    conduit_key: str
    offer: tuple[OfferItem, ...]
    consideration: tuple[ConsiderationItem, ...]
    total_original_consideration_items: int | None = None

    @field_validator("start_time", "end_time", "salt", mode="before")
    @classmethod
    def parse_uint(cls, v: Any) -> Any:
        """Accept integers for uint256 fields and keep them as decimal strings."""
        return _uint_to_str(v)


class OrderComponents(OrderParameters):
    """Order parameters bound to the offerer's counter."""

    counter: int | str


class OrderWithCounter(BaseModel):
    """Signed order submission payload."""

    model_config = _CAMEL_CONFIG

    parameters: OrderComponents
    signature: str

    def with_consideration_total(self) -> "OrderWithCounter":
        """Return a copy whose parameters record the consideration item count."""
        parameters = self.parameters.model_copy(
            update={"total_original_consideration_items": len(self.parameters.consideration)}
        )
        return self.model_copy(update={"parameters": parameters})

    @property
    def is_bid(self) -> bool:
        """True when the first offer item is currency (ERC20 with identifier "0")."""
        if not self.parameters.offer:
            return False
        first = self.parameters.offer[0]
        return first.item_type == ItemType.ERC20 and first.identifier_or_criteria == "0"

    def to_json(self) -> dict[str, Any]:
        """Serialize to the protocol's camelCase JSON."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


# ===== Wire shape =====


class OfferItemModel(BaseModel):
    """Offer item in the marketplace wire shape."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    item_type: int
    token: str
    identifier_or_criteria: str
    start_amount: int | float = Field(..., alias="startAmount")
    end_amount: int | float = Field(..., alias="endAmount")


class ConsiderationItemModel(OfferItemModel):
    """Consideration item in the marketplace wire shape."""

    recipient: str


class OrderParametersModel(BaseModel):
    """Order parameters in the marketplace wire shape."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    offerer: str
    zone: str
    zone_hash: str
    start_time: int | float
    end_time: int | float
    order_type: int
    salt: str
    conduit_key: str = Field(..., alias="conduitKey")
    # TODO: replace with the offerer's on-chain counter once nonce tracking exists
    nonce: str = DEFAULT_NONCE
    offer: tuple[OfferItemModel, ...]
    consideration: tuple[ConsiderationItemModel, ...]

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the marketplace's field names."""
        return self.model_dump(by_alias=True)


# ===== Normalized shape =====


class OrderV2(BaseModel):
    """Normalized marketplace order."""

    model_config = _CAMEL_CONFIG

    created_date: str | None = None
    closing_date: str | None = None
    listing_time: int
    expiration_time: int
    order_hash: str | None = None
    maker: Account
    taker: Account | None = None
    protocol_data: dict[str, Any]
    protocol_address: str | None = None
    current_price: str
    maker_fees: tuple[OrderFee, ...]
    taker_fees: tuple[OrderFee, ...]
    side: OrderSide
    order_type: OrderType
    cancelled: bool
    finalized: bool
    marked_invalid: bool
    client_signature: str | None = None
    maker_asset_bundle: Any = None
    taker_asset_bundle: Any = None

    @field_validator("current_price", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Any:
        """Prices arrive as strings or numbers; keep the decimal string."""
        return _uint_to_str(v)

    def to_json(self) -> dict[str, Any]:
        """Serialize to the normalized camelCase JSON."""
        return self.model_dump(by_alias=True, mode="json")


@dataclass(frozen=True)
class RejectedOrder:
    """Order dropped from a response, with the reasons it was rejected."""

    order_hash: str | None
    errors: tuple[str, ...]


@dataclass(frozen=True)
class OrdersResult:
    """Orders accepted from a query plus the ones rejected by validation."""

    orders: tuple[OrderV2, ...] = ()
    rejected: tuple[RejectedOrder, ...] = ()

    @property
    def count(self) -> int:
        """Number of accepted orders."""
        return len(self.orders)
