"""Schema validation gate for incoming orders and outgoing submissions.

The gate only accepts or rejects; it never repairs a payload. Rejections
come with the list of violated constraints, formatted ``"<path>: <message>"``.
"""

from typing import Any

import jsonschema
from jsonschema import Draft7Validator, FormatChecker
from pydantic import BaseModel
from web3 import Web3

from src.seaport_api.validation.definitions import ORDER_V2_SCHEMA, ORDER_WITH_COUNTER_SCHEMA

FORMAT_CHECKER = FormatChecker()


@FORMAT_CHECKER.checks("address")
def is_address(value: Any) -> bool:
    """Accept all-lower or all-upper hex addresses, and mixed case only with a valid checksum."""
    if not isinstance(value, str):
        return True
    return Web3.is_address(value)


class SchemaValidator:
    """Validate JSON documents against one schema."""

    def __init__(self, name: str, schema: dict[str, Any]):
        """Initialize validator.

        Args:
            name: Schema name used in messages
            schema: Draft 7 JSON Schema

        Raises:
            ValueError: If the schema itself is invalid
        """
        try:
            Draft7Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema {name}: {e.message}") from e
        self.name = name
        self.schema = schema
        self.validator = Draft7Validator(schema, format_checker=FORMAT_CHECKER)

    @staticmethod
    def _as_json(data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data.model_dump(by_alias=True, mode="json")
        return data

    def errors(self, data: Any) -> list[str]:
        """Return every violated constraint, sorted by location."""
        found = sorted(
            self.validator.iter_errors(self._as_json(data)),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        return [f"{_format_path(e.absolute_path)}: {e.message}" for e in found]

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(self._as_json(data))


def _format_path(path: Any) -> str:
    parts = [f"[{p}]" if isinstance(p, int) else f".{p}" for p in path]
    return "$" + "".join(parts)


ORDER_V2_VALIDATOR = SchemaValidator("OrderV2", ORDER_V2_SCHEMA)
ORDER_WITH_COUNTER_VALIDATOR = SchemaValidator("OrderWithCounter", ORDER_WITH_COUNTER_SCHEMA)


def is_valid_order_v2(order: Any) -> bool:
    """Check a normalized order (model or camelCase dict)."""
    return ORDER_V2_VALIDATOR.is_valid(order)


def order_v2_errors(order: Any) -> list[str]:
    return ORDER_V2_VALIDATOR.errors(order)


def is_valid_order_with_counter(payload: Any) -> bool:
    """Check a signed order submission payload."""
    return ORDER_WITH_COUNTER_VALIDATOR.is_valid(payload)


def order_with_counter_errors(payload: Any) -> list[str]:
    return ORDER_WITH_COUNTER_VALIDATOR.errors(payload)
