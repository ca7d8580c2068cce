"""Sample order payloads."""

import copy
import json
from typing import Any

MAKER_ADDRESS = "0x1111111111111111111111111111111111111111"
FEE_RECIPIENT_ADDRESS = "0x2222222222222222222222222222222222222222"
NFT_CONTRACT_ADDRESS = "0x3333333333333333333333333333333333333333"
WETH_ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
SEAPORT_ADDRESS = "0x00000000006c3852cbef3e08e8df289169ede581"
CONDUIT_KEY = "0x0000007b02230091a7ed01230072f7006a004d60a8d4e71d599b8104250f0000"
ZONE_HASH = "0x" + "0" * 64
SIGNATURE = "0x" + "ab" * 65

# Listing: one ERC721 offered for ETH paid to maker and fee recipient
SAMPLE_LISTING_PARAMETERS: dict[str, Any] = {
    "offerer": MAKER_ADDRESS,
    "zone": ZERO_ADDRESS,
    "zoneHash": ZONE_HASH,
    "startTime": "1660000000",
    "endTime": "1670000000",
    "orderType": 2,
    "salt": "12345",
    "conduitKey": CONDUIT_KEY,
    "offer": [
        {
            "itemType": 2,
            "token": NFT_CONTRACT_ADDRESS,
            "identifierOrCriteria": "42",
            "startAmount": "1",
            "endAmount": "1",
        }
    ],
    "consideration": [
        {
            "itemType": 0,
            "token": ZERO_ADDRESS,
            "identifierOrCriteria": "0",
            "startAmount": "975000000000000000",
            "endAmount": "975000000000000000",
            "recipient": MAKER_ADDRESS,
        },
        {
            "itemType": 0,
            "token": ZERO_ADDRESS,
            "identifierOrCriteria": "0",
            "startAmount": "25000000000000000",
            "endAmount": "25000000000000000",
            "recipient": FEE_RECIPIENT_ADDRESS,
        },
    ],
    "counter": 0,
}

# Bid: WETH offered for one ERC721
SAMPLE_OFFER_PARAMETERS: dict[str, Any] = {
    **SAMPLE_LISTING_PARAMETERS,
    "offer": [
        {
            "itemType": 1,
            "token": WETH_ADDRESS,
            "identifierOrCriteria": "0",
            "startAmount": "500000000000000000",
            "endAmount": "500000000000000000",
        }
    ],
    "consideration": [
        {
            "itemType": 2,
            "token": NFT_CONTRACT_ADDRESS,
            "identifierOrCriteria": "42",
            "startAmount": "1",
            "endAmount": "1",
            "recipient": MAKER_ADDRESS,
        }
    ],
}

SAMPLE_MAKER: dict[str, Any] = {
    "address": MAKER_ADDRESS,
    "config": "verified",
    "profile_img_url": "https://storage.example.com/profile/1.png",
    "user": {"username": "alice"},
}

SAMPLE_FEE_ACCOUNT: dict[str, Any] = {
    "address": FEE_RECIPIENT_ADDRESS,
    "config": "",
    "profile_img_url": "https://storage.example.com/profile/2.png",
    "user": None,
}

SAMPLE_WIRE_ORDER: dict[str, Any] = {
    "created_date": "2022-08-08T21:00:00.000000",
    "closing_date": "2022-12-02T16:53:20",
    "listing_time": 1660000000,
    "expiration_time": 1670000000,
    "order_hash": "0x" + "a" * 64,
    "maker": SAMPLE_MAKER,
    "taker": None,
    "protocol_data": {"parameters": SAMPLE_LISTING_PARAMETERS, "signature": SIGNATURE},
    "protocol_address": SEAPORT_ADDRESS,
    "current_price": "1000000000000000000",
    "maker_fees": [{"account": SAMPLE_FEE_ACCOUNT, "basis_points": 250}],
    "taker_fees": [],
    "side": "ask",
    "order_type": "basic",
    "cancelled": False,
    "finalized": False,
    "marked_invalid": False,
    "client_signature": SIGNATURE,
    "maker_asset_bundle": {"assets": [{"token_id": "42"}]},
    "taker_asset_bundle": {"assets": [{"token_id": None}]},
}

SAMPLE_ASSET: dict[str, Any] = {
    "token_id": "42",
    "asset_contract": {
        "address": NFT_CONTRACT_ADDRESS,
        "schema_name": "ERC721",
        "name": "Sample Collection",
    },
    "collection": {
        "dev_seller_fee_basis_points": "500",
        "opensea_seller_fee_basis_points": 250,
        "payout_address": FEE_RECIPIENT_ADDRESS,
    },
    "sell_orders": None,
}


def make_wire_order(**overrides: Any) -> dict[str, Any]:
    """Return a fresh copy of the sample wire order with overrides applied."""
    order = copy.deepcopy(SAMPLE_WIRE_ORDER)
    order.update(overrides)
    return order


def make_signed_order(parameters: dict[str, Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """Return a signed order-with-counter payload."""
    order = {
        "parameters": copy.deepcopy(parameters or SAMPLE_LISTING_PARAMETERS),
        "signature": SIGNATURE,
    }
    order.update(overrides)
    return order


def signed_order_json(parameters: dict[str, Any] | None = None, **overrides: Any) -> str:
    return json.dumps(make_signed_order(parameters, **overrides))
