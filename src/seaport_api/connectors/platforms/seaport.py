"""OpenSea Seaport API client."""

import json
from collections.abc import Mapping
from typing import Any

import requests
from pydantic import ValidationError

from src.seaport_api.api.query import (
    build_assets_query,
    build_orders_query,
    get_orders_api_path,
)
from src.seaport_api.config.constants import (
    API_KEY_HEADER,
    ASSETS_API_PATH,
    DEFAULT_API_TIMEOUT_SECONDS,
    DEFAULT_CHAINS,
    ChainConfig,
)
from src.seaport_api.config.settings import Settings
from src.seaport_api.core.enums import OrderSide
from src.seaport_api.core.exceptions import (
    ApiRequestError,
    ConfigurationError,
    InvalidOrderError,
    OrderNotFoundError,
)
from src.seaport_api.core.interfaces import MarketplaceAPI
from src.seaport_api.mapping.deserializer import deserialize_order
from src.seaport_api.mapping.field_mapper import to_number
from src.seaport_api.models.asset import AssetCollection
from src.seaport_api.models.config import APIConfig
from src.seaport_api.models.order import OrdersResult, OrderV2, OrderWithCounter, RejectedOrder
from src.seaport_api.models.query import AssetsQueryParams, OrdersQueryParams
from src.seaport_api.utils.logger import get_logger
from src.seaport_api.utils.retry import RetryPolicy
from src.seaport_api.validation.schemas import order_v2_errors, order_with_counter_errors

logger = get_logger(__name__)


class SeaportAPI(MarketplaceAPI):
    """Client for the marketplace's Seaport order and asset endpoints."""

    def __init__(
        self,
        config: APIConfig | None = None,
        chains: Mapping[int, ChainConfig] = DEFAULT_CHAINS,
        session: requests.Session | None = None,
        retry_policy: RetryPolicy | None = None,
        settings: Settings | None = None,
    ):
        """Initialize Seaport API client.

        Args:
            config: Chain, base URL, API key, proxy and timeout options
            chains: Chain id to endpoint table
            session: HTTP session (a new one is created if omitted)
            retry_policy: Retry policy shared by all operations
            settings: Environment settings used for values ``config`` leaves unset

        Raises:
            ConfigurationError: If the chain id is not in ``chains``
        """
        config = config or APIConfig()
        chain = chains.get(config.chain_id)
        if chain is None:
            raise ConfigurationError(f"Unsupported chain id: {config.chain_id}")

        if config.api_key is None or config.api_timeout is None:
            settings = settings or Settings()
            api_key = config.api_key or settings.opensea_api_key
            api_timeout = config.api_timeout or settings.opensea_api_timeout
        else:
            api_key = config.api_key
            api_timeout = config.api_timeout

        self.chain_id = config.chain_id
        self.chain_path = chain.chain_path
        self.api_base_url = (config.api_base_url or chain.api_base_url).rstrip("/")
        self.api_key = api_key
        self.api_timeout = api_timeout or DEFAULT_API_TIMEOUT_SECONDS
        self.proxy_url = config.proxy_url
        self.session = session or requests.Session()
        self.retry_policy = retry_policy or RetryPolicy()

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        return headers

    @property
    def proxies(self) -> dict[str, str] | None:
        if not self.proxy_url:
            return None
        return {"http": self.proxy_url, "https": self.proxy_url}

    def _handle_response(self, method: str, path: str, response: requests.Response) -> Any:
        if response.status_code >= 400:
            raise ApiRequestError(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.json()

    def _get(self, path: str, query: str = "") -> Any:
        url = f"{self.api_base_url}{path}"
        if query:
            url = f"{url}?{query}"
        logger.debug("GET request", url=url)
        response = self.session.get(
            url, headers=self.headers, timeout=self.api_timeout, proxies=self.proxies
        )
        return self._handle_response("GET", path, response)

    def _post(self, path: str, body: dict[str, Any]) -> Any:
        url = f"{self.api_base_url}{path}"
        logger.debug("POST request", url=url)
        response = self.session.post(
            url,
            json=body,
            headers=self.headers,
            timeout=self.api_timeout,
            proxies=self.proxies,
        )
        return self._handle_response("POST", path, response)

    def get_assets(
        self, params: AssetsQueryParams, retries: int | None = None
    ) -> list[AssetCollection]:
        """Fetch assets and flatten contract and collection fee fields.

        Args:
            params: Asset filters
            retries: Per-call retry budget override

        Returns:
            list[AssetCollection]: One record per asset
        """
        query = build_assets_query(params)

        def fetch() -> list[AssetCollection]:
            data = self._get(ASSETS_API_PATH, query)
            return [self._asset_from_json(asset) for asset in data["assets"]]

        return self.retry_policy.call(fetch, retries=retries, name="get_assets")

    @staticmethod
    def _asset_from_json(asset: dict[str, Any]) -> AssetCollection:
        collection = asset.get("collection") or {}
        record = dict(asset.get("asset_contract") or {})
        record.update(
            royalty_fee_points=to_number(collection.get("dev_seller_fee_basis_points")),
            protocol_fee_points=to_number(collection.get("opensea_seller_fee_basis_points")),
            royalty_fee_address=collection.get("payout_address"),
            sell_orders=asset.get("sell_orders"),
            token_id=asset.get("token_id"),
        )
        return AssetCollection.model_validate(record)

    def get_orders(self, params: OrdersQueryParams, retries: int | None = None) -> OrdersResult:
        """Fetch orders, dropping the ones that fail validation.

        With ``OrderSide.ALL`` offers are requested first, then listings, and
        the results are concatenated in that order.

        Args:
            params: Order filters
            retries: Per-call retry budget override

        Returns:
            OrdersResult: Accepted orders plus rejected entries with reasons

        Raises:
            OrderNotFoundError: If a response has no order list once retries run out
        """
        if params.side == OrderSide.ALL:
            sides = [OrderSide.BUY, OrderSide.SELL]
        else:
            sides = [params.side]
        query = build_orders_query(params)

        def fetch() -> OrdersResult:
            responses = [
                self._get(get_orders_api_path(self.chain_path, side), query) for side in sides
            ]
            orders: list[OrderV2] = []
            rejected: list[RejectedOrder] = []

            for response in responses:
                order_list = response.get("orders") if isinstance(response, dict) else None
                if order_list is None:
                    raise OrderNotFoundError("Not found: no matching order found")

                for raw in order_list:
                    accepted = self._accept_order(raw)
                    if isinstance(accepted, RejectedOrder):
                        rejected.append(accepted)
                    else:
                        orders.append(accepted)

            return OrdersResult(orders=tuple(orders), rejected=tuple(rejected))

        return self.retry_policy.call(fetch, retries=retries, name="get_orders")

    def _accept_order(self, raw: Any) -> OrderV2 | RejectedOrder:
        """Deserialize and gate one order from a response."""
        order_hash = raw.get("order_hash") if isinstance(raw, dict) else None
        try:
            order = deserialize_order(raw)
        except KeyError as e:
            errors = [f"$.{e.args[0]}: missing required field"]
        except (AttributeError, TypeError) as e:
            errors = [f"$: {e}"]
        except ValidationError as e:
            errors = [
                f"$.{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]
        else:
            errors = order_v2_errors(order)
            if not errors:
                return order

        logger.warning("Skipping invalid order", order_hash=order_hash, errors=errors)
        return RejectedOrder(order_hash=order_hash, errors=tuple(errors))

    def post_order(self, order_str: str, retries: int | None = None) -> OrderV2:
        """Submit a signed order.

        The submission path follows the first offer item: currency (ERC20 with
        identifier "0") is posted as an offer, anything else as a listing.

        Args:
            order_str: JSON-encoded order with counter and signature
            retries: Per-call retry budget override

        Returns:
            OrderV2: The order echoed back by the marketplace

        Raises:
            InvalidOrderError: If the payload fails schema validation
            json.JSONDecodeError: If ``order_str`` is not JSON
        """
        payload = json.loads(order_str)
        errors = order_with_counter_errors(payload)
        if errors:
            logger.error("Refusing to post invalid order", errors=errors)
            raise InvalidOrderError("Order failed schema validation", errors=errors)

        order = OrderWithCounter.model_validate(payload).with_consideration_total()
        side = OrderSide.BUY if order.is_bid else OrderSide.SELL
        api_path = get_orders_api_path(self.chain_path, side)
        body = order.to_json()

        def submit() -> OrderV2:
            data = self._post(api_path, body)
            if not isinstance(data, dict) or "order" not in data:
                raise ApiRequestError(f"POST {api_path} response has no order")
            return deserialize_order(data["order"])

        logger.info("Posting order", path=api_path, side=side.value)
        return self.retry_policy.call(submit, retries=retries, name="post_order")
