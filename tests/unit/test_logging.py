"""Unit tests for structlog configuration."""
import json

import pytest
import structlog

from eth_signature.config import SignatureConfig
from eth_signature.logging import configure_logging
from eth_signature.types.ethereum_types import Signature
from tests.vectors import TEST_SIGNATURE_HEX


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_debug_events(capsys, test_address: str):
    """Test that a successful recovery emits JSON debug events."""
    configure_logging(SignatureConfig(log_level="DEBUG", log_format="json"))

    Signature.from_hex(TEST_SIGNATURE_HEX).recover("Some data")

    events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    by_name = {event["event"]: event for event in events}
    assert by_name["signer_recovered"]["address"] == test_address
    assert by_name["signer_recovered"]["level"] == "debug"
    assert "timestamp" in by_name["signer_recovered"]
    assert by_name["public_key_recovered"]["recovery_id"] == 1


def test_level_filtering(capsys):
    """Test that debug events are dropped above DEBUG."""
    configure_logging(SignatureConfig(log_level="INFO", log_format="json"))

    Signature.from_hex(TEST_SIGNATURE_HEX).recover("Some data")

    assert capsys.readouterr().out == ""


def test_errors_are_not_logged(capsys, test_signature: Signature):
    """Test that failures are raised without log output."""
    configure_logging(SignatureConfig(log_level="DEBUG", log_format="console"))

    with pytest.raises(ValueError):
        test_signature.verify("Some data", "0x1234")

    assert capsys.readouterr().out == ""
