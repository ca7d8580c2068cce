"""Conversion between protocol-native order fields and marketplace wire fields."""

import math
import re
from collections.abc import Mapping
from typing import Any

from src.seaport_api.models.account import Account, OrderFee, User
from src.seaport_api.models.order import (
    ConsiderationItem,
    ConsiderationItemModel,
    OfferItem,
    OfferItemModel,
    OrderParameters,
    OrderParametersModel,
)

# Plain numeric literals only: no digit separators, no inf or nan words
_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def to_number(value: Any) -> int | float:
    """Coerce a uint-like value to a number.

    Integral input keeps full precision as ``int``. Anything that does not
    parse as a number becomes ``nan``; callers validate amounts beforehand.

    Args:
        value: String, int or float

    Returns:
        int | float: Parsed number, or nan
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return value
    if value is None:
        return math.nan
    text = str(value).strip()
    if _HEX_RE.match(text):
        return int(text, 16)
    if _INT_RE.match(text):
        return int(text)
    if _DECIMAL_RE.match(text):
        return float(text)
    return math.nan


def offer_item_to_wire(item: OfferItem) -> OfferItemModel:
    return OfferItemModel(
        item_type=int(item.item_type),
        token=item.token,
        identifier_or_criteria=item.identifier_or_criteria,
        start_amount=to_number(item.start_amount),
        end_amount=to_number(item.end_amount),
    )


def consideration_item_to_wire(item: ConsiderationItem) -> ConsiderationItemModel:
    return ConsiderationItemModel(
        item_type=int(item.item_type),
        token=item.token,
        identifier_or_criteria=item.identifier_or_criteria,
        start_amount=to_number(item.start_amount),
        end_amount=to_number(item.end_amount),
        recipient=item.recipient,
    )


def to_wire_order(order: OrderParameters) -> OrderParametersModel:
    """Map protocol order parameters to the marketplace wire shape.

    Empty offer or consideration sequences pass through untouched; the
    validation gate is responsible for rejecting them.

    Args:
        order: Protocol-native order parameters

    Returns:
        OrderParametersModel: Wire-shaped parameters with nonce "0"
    """
    return OrderParametersModel(
        offerer=order.offerer,
        zone=order.zone,
        zone_hash=order.zone_hash,
        start_time=to_number(order.start_time),
        end_time=to_number(order.end_time),
        order_type=int(order.order_type),
        salt=order.salt,
        conduit_key=order.conduit_key,
        offer=tuple(offer_item_to_wire(item) for item in order.offer),
        consideration=tuple(consideration_item_to_wire(item) for item in order.consideration),
    )


def user_from_json(user: Any) -> User:
    """Build a User; a bare numeric user id carries no username."""
    if isinstance(user, Mapping):
        return User(username=user.get("username"))
    return User(username=None)


def account_from_json(account: dict[str, Any]) -> Account:
    """Build an Account from its snake_case wire form."""
    user = account.get("user")
    return Account(
        address=account["address"],
        config=account.get("config"),
        profile_img_url=account.get("profile_img_url"),
        user=user_from_json(user) if user is not None else None,
    )


def account_to_json(account: Account) -> dict[str, Any]:
    return {
        "address": account.address,
        "config": account.config,
        "profile_img_url": account.profile_img_url,
        "user": {"username": account.user.username} if account.user else None,
    }


def fee_from_json(fee: dict[str, Any]) -> OrderFee:
    return OrderFee(account=account_from_json(fee["account"]), basis_points=fee["basis_points"])


def fee_to_json(fee: OrderFee) -> dict[str, Any]:
    """Serialize a fee record back to the wire shape."""
    return {"account": account_to_json(fee.account), "basis_points": fee.basis_points}
