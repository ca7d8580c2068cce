"""JSON Schema documents for orders handled by the adapter."""

from typing import Any

from src.seaport_api.config.constants import MAX_BASIS_POINTS

# Mixed-case addresses must also carry a valid EIP-55 checksum
ADDRESS: dict[str, Any] = {
    "type": "string",
    "pattern": "^0x[0-9a-fA-F]{40}$",
    "format": "address",
}
BYTES32: dict[str, Any] = {"type": "string", "pattern": "^0x[0-9a-fA-F]{64}$"}
HEX_BYTES: dict[str, Any] = {"type": "string", "pattern": "^0x([0-9a-fA-F]{2})*$"}
UINT: dict[str, Any] = {
    "anyOf": [
        {"type": "string", "pattern": "^[0-9]+$"},
        {"type": "integer", "minimum": 0},
    ]
}

OFFER_ITEM: dict[str, Any] = {
    "type": "object",
    "required": ["itemType", "token", "identifierOrCriteria", "startAmount", "endAmount"],
    "properties": {
        "itemType": {"type": "integer", "enum": [0, 1, 2, 3, 4, 5]},
        "token": ADDRESS,
        "identifierOrCriteria": UINT,
        "startAmount": UINT,
        "endAmount": UINT,
    },
}

CONSIDERATION_ITEM: dict[str, Any] = {
    "type": "object",
    "required": [*OFFER_ITEM["required"], "recipient"],
    "properties": {**OFFER_ITEM["properties"], "recipient": ADDRESS},
}

ORDER_PARAMETERS: dict[str, Any] = {
    "type": "object",
    "required": [
        "offerer",
        "zone",
        "zoneHash",
        "startTime",
        "endTime",
        "orderType",
        "offer",
        "consideration",
        "salt",
        "conduitKey",
    ],
    "properties": {
        "offerer": ADDRESS,
        "zone": ADDRESS,
        "zoneHash": BYTES32,
        "startTime": UINT,
        "endTime": UINT,
        "orderType": {"type": "integer", "enum": [0, 1, 2, 3]},
        "offer": {"type": "array", "minItems": 1, "items": OFFER_ITEM},
        "consideration": {"type": "array", "minItems": 1, "items": CONSIDERATION_ITEM},
        "totalOriginalConsiderationItems": {"type": "integer", "minimum": 0},
        "salt": {"anyOf": [UINT, HEX_BYTES]},
        "conduitKey": BYTES32,
        "counter": UINT,
    },
}

ORDER_WITH_COUNTER_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "OrderWithCounter",
    "type": "object",
    "required": ["parameters", "signature"],
    "properties": {
        "parameters": {
            **ORDER_PARAMETERS,
            "required": [*ORDER_PARAMETERS["required"], "counter"],
        },
        "signature": HEX_BYTES,
    },
}

ACCOUNT: dict[str, Any] = {
    "type": "object",
    "required": ["address"],
    "properties": {
        "address": ADDRESS,
        "config": {"type": ["string", "null"]},
        "profileImgUrl": {"type": ["string", "null"]},
        "user": {
            "anyOf": [
                {"type": "null"},
                {
                    "type": "object",
                    "properties": {"username": {"type": ["string", "null"]}},
                },
            ]
        },
    },
}

FEE: dict[str, Any] = {
    "type": "object",
    "required": ["account", "basisPoints"],
    "properties": {
        "account": ACCOUNT,
        "basisPoints": {"type": "integer", "minimum": 0, "maximum": MAX_BASIS_POINTS},
    },
}

ORDER_V2_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "OrderV2",
    "type": "object",
    "required": [
        "listingTime",
        "expirationTime",
        "orderHash",
        "maker",
        "protocolData",
        "protocolAddress",
        "currentPrice",
        "makerFees",
        "takerFees",
        "side",
        "orderType",
        "cancelled",
        "finalized",
        "markedInvalid",
    ],
    "properties": {
        "createdDate": {"type": ["string", "null"]},
        "closingDate": {"type": ["string", "null"]},
        "listingTime": {"type": "integer", "minimum": 0},
        "expirationTime": {"type": "integer", "minimum": 0},
        "orderHash": BYTES32,
        "maker": ACCOUNT,
        "taker": {"anyOf": [{"type": "null"}, ACCOUNT]},
        "protocolData": {
            "type": "object",
            "required": ["parameters"],
            "properties": {
                "parameters": ORDER_PARAMETERS,
                "signature": {"anyOf": [{"type": "null"}, HEX_BYTES]},
            },
        },
        "protocolAddress": ADDRESS,
        "currentPrice": {"type": "string", "pattern": "^[0-9]+(\\.[0-9]+)?$"},
        "makerFees": {"type": "array", "items": FEE},
        "takerFees": {"type": "array", "items": FEE},
        "side": {"type": "string", "enum": ["bid", "ask"]},
        "orderType": {"type": "string", "enum": ["basic", "dutch", "english", "criteria"]},
        "cancelled": {"type": "boolean"},
        "finalized": {"type": "boolean"},
        "markedInvalid": {"type": "boolean"},
        "clientSignature": {"type": ["string", "null"]},
    },
}
