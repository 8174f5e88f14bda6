"""Tests for the phone dialer service."""

import logging
from unittest.mock import MagicMock

import pytest

from nearme.adapters.search.nominatim_adapter import to_map_item
from nearme.config import DialerConfig
from nearme.domain.models import DialOutcome
from nearme.services.dialer import DialerService, build_dial_target


@pytest.fixture
def capability():
    mock = MagicMock()
    mock.can_open.return_value = True
    return mock


@pytest.fixture
def opener():
    return MagicMock()


@pytest.fixture
def dialer(capability, opener):
    return DialerService(capability=capability, opener=opener, config=DialerConfig())


class TestBuildDialTarget:
    def test_prefixes_tel_scheme(self):
        assert build_dial_target("5551234") == "tel://5551234"

    def test_keeps_formatting_characters(self):
        assert build_dial_target("+1-555-123-4567") == "tel://+1-555-123-4567"

    def test_does_not_validate_digits(self):
        assert build_dial_target("call-me") == "tel://call-me"

    def test_custom_scheme(self):
        assert build_dial_target("5551234", scheme="tel:") == "tel:5551234"

    @pytest.mark.parametrize("phone", ["", "   ", "555\n1234", "555\x001234", "\t"])
    def test_rejects_input_that_cannot_form_a_url(self, phone):
        assert build_dial_target(phone) is None

    @pytest.mark.parametrize(
        "phone, expected",
        [
            ("555 1234", "tel://555%201234"),
            ("+1 415 555 1234", "tel://+1%20415%20555%201234"),
            ("(555) 123 4567", "tel://(555)%20123%204567"),
            ("０１２３", "tel://%EF%BC%90%EF%BC%91%EF%BC%92%EF%BC%93"),
            ("[555", "tel://%5B555"),
            ("50%off", "tel://50%25off"),
        ],
    )
    def test_percent_encodes_characters_not_legal_in_a_url(self, phone, expected):
        assert build_dial_target(phone) == expected

    def test_keeps_valid_percent_escape(self):
        assert build_dial_target("555%201234") == "tel://555%201234"


class TestDialerService:
    def test_opens_dialer_when_device_can_call(self, dialer, capability, opener):
        outcome = dialer.make_call("5551234")

        assert outcome == DialOutcome.ATTEMPTED
        capability.can_open.assert_called_once_with("tel://5551234")
        opener.open.assert_called_once_with("tel://5551234")

    def test_incapable_device_logs_and_does_not_open(
        self, dialer, capability, opener, caplog
    ):
        capability.can_open.return_value = False

        with caplog.at_level(logging.INFO, logger="nearme.services.dialer"):
            outcome = dialer.make_call("5551234")

        assert outcome == DialOutcome.INCAPABLE
        opener.open.assert_not_called()
        assert "Device can't make phone calls" in caplog.text

    @pytest.mark.parametrize("phone", ["", "   ", "\t", "555\r1234"])
    def test_invalid_input_is_a_silent_no_op(self, dialer, capability, opener, phone):
        outcome = dialer.make_call(phone)

        assert outcome == DialOutcome.INVALID_INPUT
        capability.can_open.assert_not_called()
        opener.open.assert_not_called()

    def test_uses_configured_scheme(self, capability, opener):
        dialer = DialerService(
            capability=capability,
            opener=opener,
            config=DialerConfig(scheme="tel:"),
        )

        dialer.make_call("5551234")

        opener.open.assert_called_once_with("tel:5551234")

    def test_number_with_spaces_is_encoded_and_dialed(self, dialer, opener):
        outcome = dialer.make_call("555 1234")

        assert outcome == DialOutcome.ATTEMPTED
        opener.open.assert_called_once_with("tel://555%201234")

    def test_dials_phone_number_of_a_search_result(self, dialer, opener):
        item = to_map_item(
            {
                "class": "amenity",
                "type": "cafe",
                "name": "Blue Bottle Coffee",
                "extratags": {"phone": "+1 415 555 1234"},
            },
            "Blue Bottle Coffee, 66 Mint Street, San Francisco",
            37.7823,
            -122.4073,
        )

        outcome = dialer.make_call(item.phone_number)

        assert outcome == DialOutcome.ATTEMPTED
        opener.open.assert_called_once_with("tel://+1%20415%20555%201234")
