"""Signer recovery and verification for secp256k1 signatures."""

import structlog
from eth_keys import KeyAPI
from eth_keys.exceptions import BadSignature, ValidationError
from eth_typing import ChecksumAddress

from eth_signature.exceptions import CurveError, VerificationError
from eth_signature.types.messages import MessageLike, resolve_digest, to_recovery_message
from eth_signature.utils import (
    decompress_public_key,
    normalize_address,
    normalize_recovery_id,
    public_key_to_address,
)

logger = structlog.get_logger(__name__)

keys = KeyAPI()


def recover_public_key(r: bytes, s: bytes, v: int, message: MessageLike) -> bytes:
    """
    Recover the uncompressed public key that produced a signature.

    Args:
        r: R component of signature (32 bytes)
        s: S component of signature (32 bytes)
        v: Recovery identifier, raw (0/1), Electrum (27/28) or EIP-155 (>= 35)
        message: Anything ``to_recovery_message`` accepts

    Returns:
        bytes: 65-byte uncompressed public key

    Raises:
        CurveError: If the scalars or the recovery id are rejected by eth_keys
        RecoveryError: If the recovered key is not a valid curve point
    """
    digest = resolve_digest(to_recovery_message(message))
    recovery_id = normalize_recovery_id(v)

    try:
        signature = keys.Signature(vrs=(recovery_id, int.from_bytes(r, "big"), int.from_bytes(s, "big")))
        verifying_key = signature.recover_public_key_from_msg_hash(digest)
    except (BadSignature, ValidationError) as e:
        raise CurveError(str(e)) from e

    public_key = decompress_public_key(verifying_key.to_compressed_bytes())
    logger.debug("public_key_recovered", digest=digest.hex(), recovery_id=recovery_id)
    return public_key


def recover_address(r: bytes, s: bytes, v: int, message: MessageLike) -> ChecksumAddress:
    """Recover the address which was used to sign the given message."""
    address = public_key_to_address(recover_public_key(r, s, v, message))
    logger.debug("signer_recovered", address=address)
    return address


def verify_address(r: bytes, s: bytes, v: int, message: MessageLike, address: str | bytes) -> None:
    """
    Verify that a signature on ``message`` was produced by ``address``.

    Raises:
        VerificationError: If the recovered signer is a different address
        ValueError: If ``address`` is not an Ethereum address
    """
    expected = normalize_address(address)
    recovered = recover_address(r, s, v, message)
    if recovered != expected:
        raise VerificationError(expected, recovered)
