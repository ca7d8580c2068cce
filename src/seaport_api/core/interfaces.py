"""Core interfaces for the Seaport API adapter."""

from abc import ABC, abstractmethod

from src.seaport_api.models.asset import AssetCollection
from src.seaport_api.models.order import OrdersResult, OrderV2
from src.seaport_api.models.query import AssetsQueryParams, OrdersQueryParams


class MarketplaceAPI(ABC):
    """Interface for marketplace order-book access."""

    @abstractmethod
    def get_assets(
        self, params: AssetsQueryParams, retries: int | None = None
    ) -> list[AssetCollection]:
        """Fetch assets with their fee terms.

        Args:
            params: Asset filters
            retries: Per-call retry budget override

        Returns:
            list[AssetCollection]: One flattened record per asset
        """
        pass

    @abstractmethod
    def get_orders(self, params: OrdersQueryParams, retries: int | None = None) -> OrdersResult:
        """Fetch and normalize orders.

        Args:
            params: Order filters, including the side to query
            retries: Per-call retry budget override

        Returns:
            OrdersResult: Accepted orders and the ones rejected by validation

        Raises:
            OrderNotFoundError: If a response carries no order list after all retries
        """
        pass

    @abstractmethod
    def post_order(self, order_str: str, retries: int | None = None) -> OrderV2:
        """Submit a signed order.

        Args:
            order_str: JSON-encoded signed order with counter
            retries: Per-call retry budget override

        Returns:
            OrderV2: The order as accepted by the marketplace

        Raises:
            InvalidOrderError: If the payload fails validation (never retried)
        """
        pass
