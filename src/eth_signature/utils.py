"""Cryptographic utilities."""

from ecdsa import SECP256k1, VerifyingKey
from ecdsa.errors import MalformedPointError
from eth_account.messages import _hash_eip191_message, encode_defunct  # noqa: PLC2701
from eth_typing import ChecksumAddress
from eth_utils import is_address, keccak, to_checksum_address

from eth_signature.exceptions import RecoveryError

DIGEST_LENGTH: int = 32
SIGNATURE_LENGTH: int = 65
ADDRESS_LENGTH: int = 20

# Returned for v values that carry no recovery id; eth_keys rejects it.
INVALID_RECOVERY_ID: int = 4


def normalize_recovery_id(v: int) -> int:
    """Map a raw, Electrum (27/28) or EIP-155 (>= 35) v to a recovery id."""
    if v in (0, 1):
        return v
    if v in (27, 28):
        return v - 27
    if v >= 35:
        return (v - 1) % 2
    return INVALID_RECOVERY_ID


def hash_message(data: bytes) -> bytes:
    """Hash a message following EIP-191 (version 0x45, personal_sign)."""
    return bytes(_hash_eip191_message(encode_defunct(primitive=data)))


def decompress_public_key(compressed: bytes) -> bytes:
    """
    Expand a SEC1 compressed secp256k1 point.

    Args:
        compressed: 33-byte point, ``0x02``/``0x03`` prefix followed by X

    Returns:
        bytes: 65-byte uncompressed point, ``0x04 || X || Y``

    Raises:
        RecoveryError: If the bytes do not encode a point on the curve
    """
    try:
        verifying_key = VerifyingKey.from_string(compressed, curve=SECP256k1)
    except MalformedPointError as e:
        raise RecoveryError from e
    return verifying_key.to_string("uncompressed")


def public_key_to_address(public_key: bytes) -> ChecksumAddress:
    """Derive the checksummed address from an uncompressed public key."""
    return to_checksum_address(keccak(public_key[-64:])[-ADDRESS_LENGTH:])


def normalize_address(address: str | bytes) -> ChecksumAddress:
    """Accept an address in any case (or as 20 raw bytes) and checksum it."""
    if isinstance(address, bytes | bytearray):
        if len(address) != ADDRESS_LENGTH:
            msg = f"Invalid address length: {len(address)}"
            raise ValueError(msg)
        return to_checksum_address(bytes(address))
    if not is_address(address):
        msg = f"Invalid Ethereum address: {address!r}"
        raise ValueError(msg)
    return to_checksum_address(address)
