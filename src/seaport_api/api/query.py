"""Query-string and path builders for the marketplace endpoints."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from src.seaport_api.config.constants import (
    DEFAULT_QUERY_LIMIT,
    ORDERS_API_PATH_TEMPLATE,
    SEAPORT_PROTOCOL,
)
from src.seaport_api.core.enums import OrderSide
from src.seaport_api.models.query import AssetsQueryParams, OrdersQueryParams

# Optional order filters, serialized in this order when present
_ORDER_FILTERS = (
    "cursor",
    "payment_token_address",
    "maker",
    "taker",
    "owner",
    "bundled",
    "include_bundled",
    "listed_after",
    "listed_before",
    "order_by",
    "order_direction",
    "only_english",
)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return [_query_value(v) for v in value]
    return value


def encode_query(params: Mapping[str, Any]) -> str:
    """Percent-encode ``params`` as ``key=value&key=value``.

    ``None`` values are dropped, sequences repeat their key and booleans are
    rendered lower-case.
    """
    pairs = {k: _query_value(v) for k, v in params.items() if v is not None}
    return urlencode(pairs, doseq=True, quote_via=quote)


def assets_query_params(params: AssetsQueryParams) -> dict[str, Any]:
    query: dict[str, Any] = {
        "include_orders": params.include_orders or False,
        "limit": params.limit or DEFAULT_QUERY_LIMIT,
    }
    if params.owner:
        query["owner"] = params.owner
    return query


def build_assets_query(params: AssetsQueryParams) -> str:
    """Build the query string for the asset listing endpoint.

    Args:
        params: Asset filters

    Returns:
        str: Encoded query, primary block first then each extra asset filter
    """
    query = encode_query(assets_query_params(params))
    extra = [encode_query(asset) for asset in params.assets or []]
    extra = [block for block in extra if block]
    if not extra:
        return query
    return "&".join([query, *extra])


def orders_query_params(params: OrdersQueryParams) -> dict[str, Any]:
    """Serialize order filters with the API's snake_case names."""
    query: dict[str, Any] = {
        "token_ids": params.token_ids,
        "asset_contract_address": params.asset_contract_address,
        "limit": params.limit or DEFAULT_QUERY_LIMIT,
    }
    for name in _ORDER_FILTERS:
        query[name] = getattr(params, name)
    return {k: v for k, v in query.items() if v is not None}


def build_orders_query(params: OrdersQueryParams) -> str:
    return encode_query(orders_query_params(params))


def side_path(side: OrderSide | str) -> str:
    """Map an order side to its endpoint segment: bids are offers, the rest listings."""
    return "offers" if OrderSide(side) == OrderSide.BUY else "listings"


def get_orders_api_path(
    chain_path: str, side: OrderSide | str, protocol: str = SEAPORT_PROTOCOL
) -> str:
    """Return ``/v2/orders/{chain}/{protocol}/{offers|listings}``."""
    return ORDERS_API_PATH_TEMPLATE.format(
        chain=chain_path, protocol=protocol, side=side_path(side)
    )
