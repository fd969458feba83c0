import pytest
from eth_account import Account
from eth_account.messages import encode_defunct
from eth_keys import keys
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from eth_signature.config import get_config
from eth_signature.types.ethereum_types import Signature
from eth_signature.utils import hash_message
from tests.vectors import TEST_ADDRESS, TEST_MESSAGE, TEST_PRIVATE_KEY, TEST_SIGNATURE_VALUES


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Make every test read the environment afresh."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def test_address() -> ChecksumAddress:
    """Get the address of the test key."""
    return to_checksum_address(TEST_ADDRESS)


@pytest.fixture
def test_message() -> str:
    """Get a test message."""
    return TEST_MESSAGE


@pytest.fixture
def test_signature() -> Signature:
    """Create a test signature with the known vector values."""
    return Signature(**TEST_SIGNATURE_VALUES)


@pytest.fixture
def account():
    """The eth_account account of the test key."""
    return Account.from_key(TEST_PRIVATE_KEY)


@pytest.fixture
def sign_text():
    """Sign text with eth_account (EIP-191), returning our Signature type."""

    def _sign(text: str, private_key: str = TEST_PRIVATE_KEY) -> Signature:
        signed = Account.sign_message(encode_defunct(text=text), private_key=private_key)
        return Signature.from_bytes(bytes(signed.signature))

    return _sign


@pytest.fixture
def sign_digest():
    """Sign a raw digest with eth_keys, returning the recovery id and scalars."""

    def _sign(digest: bytes, private_key: str = TEST_PRIVATE_KEY) -> tuple[int, int, int]:
        signature = keys.PrivateKey(bytes.fromhex(private_key)).sign_msg_hash(digest)
        return signature.vrs

    return _sign


@pytest.fixture
def test_digest(test_message: str) -> bytes:
    """EIP-191 hash of the test message."""
    return hash_message(test_message.encode())
