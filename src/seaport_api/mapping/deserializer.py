"""Deserialize marketplace order payloads into normalized orders."""

from typing import Any

from src.seaport_api.mapping.field_mapper import account_from_json, fee_from_json
from src.seaport_api.models.order import OrderV2


def deserialize_order(order: dict[str, Any]) -> OrderV2:
    """Convert a raw snake_case order payload into an OrderV2.

    Nested maker/taker accounts and fee lists are rebuilt field by field;
    ``protocol_data`` is passed through untouched. Required keys are not
    defaulted: a payload without ``maker_fees`` raises ``KeyError``.

    Args:
        order: Order object as returned by the marketplace API

    Returns:
        OrderV2: Normalized order

    Raises:
        KeyError: If a required field is missing
        pydantic.ValidationError: If a field has the wrong type
    """
    taker = order.get("taker")
    return OrderV2(
        created_date=order.get("created_date"),
        closing_date=order.get("closing_date"),
        listing_time=order["listing_time"],
        expiration_time=order["expiration_time"],
        order_hash=order.get("order_hash"),
        maker=account_from_json(order["maker"]),
        taker=account_from_json(taker) if taker else None,
        protocol_data=order["protocol_data"],
        protocol_address=order.get("protocol_address"),
        current_price=order["current_price"],
        maker_fees=tuple(fee_from_json(fee) for fee in order["maker_fees"]),
        taker_fees=tuple(fee_from_json(fee) for fee in order["taker_fees"]),
        side=order["side"],
        order_type=order["order_type"],
        cancelled=order["cancelled"],
        finalized=order["finalized"],
        marked_invalid=order["marked_invalid"],
        client_signature=order.get("client_signature"),
        maker_asset_bundle=order.get("maker_asset_bundle"),
        taker_asset_bundle=order.get("taker_asset_bundle"),
    )
