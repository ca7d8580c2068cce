"""Tests for the schema validation gate."""

import copy

import pytest
from web3 import Web3

from src.seaport_api.mapping.deserializer import deserialize_order
from src.seaport_api.validation.definitions import ORDER_V2_SCHEMA
from src.seaport_api.validation.schemas import (
    SchemaValidator,
    is_valid_order_v2,
    is_valid_order_with_counter,
    order_v2_errors,
    order_with_counter_errors,
)
from tests.fixtures.orders import (
    SAMPLE_OFFER_PARAMETERS,
    WETH_ADDRESS,
    make_signed_order,
    make_wire_order,
)


class TestOrderV2Validation:
    """Test validation of normalized orders."""

    def test_valid_order_passes(self, wire_order):
        order = deserialize_order(wire_order)

        assert is_valid_order_v2(order)
        assert order_v2_errors(order) == []

    def test_validator_accepts_camel_case_dict(self, wire_order):
        assert is_valid_order_v2(deserialize_order(wire_order).to_json())

    def test_basis_points_above_maximum_fail(self):
        wire = make_wire_order()
        wire["maker_fees"][0]["basis_points"] = 10001

        errors = order_v2_errors(deserialize_order(wire))

        assert len(errors) == 1
        assert errors[0].startswith("$.makerFees[0].basisPoints:")

    def test_empty_offer_fails(self):
        """Orders with nothing offered are not tradable."""
        wire = make_wire_order()
        wire["protocol_data"]["parameters"]["offer"] = []

        errors = order_v2_errors(deserialize_order(wire))

        assert any(e.startswith("$.protocolData.parameters.offer:") for e in errors)

    def test_missing_order_hash_fails(self):
        assert not is_valid_order_v2(deserialize_order(make_wire_order(order_hash=None)))

    def test_validation_does_not_modify_order(self, wire_order):
        """The gate should only accept or reject."""
        order = deserialize_order(wire_order)
        before = order.to_json()

        order_v2_errors(order)

        assert order.to_json() == before


class TestOrderWithCounterValidation:
    """Test validation of signed submissions."""

    def test_signed_listing_passes(self, signed_listing):
        assert is_valid_order_with_counter(signed_listing)

    def test_signed_offer_passes(self):
        assert is_valid_order_with_counter(make_signed_order(SAMPLE_OFFER_PARAMETERS))

    def test_missing_signature_fails(self, signed_listing):
        del signed_listing["signature"]

        errors = order_with_counter_errors(signed_listing)

        assert errors == ["$: 'signature' is a required property"]

    def test_missing_counter_fails(self, signed_listing):
        del signed_listing["parameters"]["counter"]

        assert not is_valid_order_with_counter(signed_listing)

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("offerer", "not-an-address"),
            ("orderType", 9),
            ("startTime", "-1"),
            ("conduitKey", "0x1234"),
        ],
    )
    def test_malformed_parameters_fail(self, signed_listing, field, value):
        signed_listing["parameters"][field] = value

        errors = order_with_counter_errors(signed_listing)

        assert any(e.startswith(f"$.parameters.{field}:") for e in errors)

    def test_checksummed_offerer_passes(self, signed_listing):
        signed_listing["parameters"]["offerer"] = Web3.to_checksum_address(WETH_ADDRESS)

        assert is_valid_order_with_counter(signed_listing)

    def test_mixed_case_offerer_with_bad_checksum_fails(self, signed_listing):
        """A mixed-case address whose checksum does not match should be rejected."""
        checksummed = Web3.to_checksum_address(WETH_ADDRESS)
        flipped = checksummed[:2] + checksummed[2].swapcase() + checksummed[3:]
        signed_listing["parameters"]["offerer"] = flipped

        errors = order_with_counter_errors(signed_listing)

        assert len(errors) == 1
        assert errors[0].startswith("$.parameters.offerer:")
        assert "address" in errors[0]

    def test_invalid_item_type_reports_item_path(self, signed_listing):
        payload = copy.deepcopy(signed_listing)
        payload["parameters"]["consideration"][1]["itemType"] = 8

        errors = order_with_counter_errors(payload)

        assert any(e.startswith("$.parameters.consideration[1].itemType:") for e in errors)


class TestSchemaValidator:
    """Test the validator wrapper."""

    def test_invalid_schema_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaValidator("broken", {"type": "not-a-type"})

    def test_order_v2_schema_is_valid(self):
        validator = SchemaValidator("OrderV2", ORDER_V2_SCHEMA)

        assert validator.name == "OrderV2"
