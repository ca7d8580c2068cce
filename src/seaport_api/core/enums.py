"""Core enumerations for the Seaport API adapter."""

from enum import Enum, IntEnum


class ItemType(IntEnum):
    """Seaport item type."""

    NATIVE = 0
    ERC20 = 1
    ERC721 = 2
    ERC1155 = 3
    ERC721_WITH_CRITERIA = 4  # Token id selected by merkle root
    ERC1155_WITH_CRITERIA = 5


class SeaportOrderType(IntEnum):
    """Seaport on-chain order type (fill and zone restrictions)."""

    FULL_OPEN = 0
    PARTIAL_OPEN = 1
    FULL_RESTRICTED = 2
    PARTIAL_RESTRICTED = 3


class OrderSide(str, Enum):
    """Order side as used by the marketplace API."""

    BUY = "bid"
    SELL = "ask"
    ALL = "all"  # Query only: fetch both offers and listings


class OrderType(str, Enum):
    """Marketplace order kind."""

    BASIC = "basic"
    DUTCH = "dutch"
    ENGLISH = "english"
    CRITERIA = "criteria"
