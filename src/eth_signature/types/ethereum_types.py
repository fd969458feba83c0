from eth_typing import ChecksumAddress
from eth_utils import decode_hex
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from eth_signature.exceptions import CurveError, DecodingError, InvalidLengthError
from eth_signature.recovery import recover_address, recover_public_key, verify_address
from eth_signature.types.messages import MessageLike
from eth_signature.utils import DIGEST_LENGTH, INVALID_RECOVERY_ID, SIGNATURE_LENGTH, normalize_recovery_id

MAX_V: int = 2**64
ELECTRUM_V_OFFSET: int = 27
EIP155_V_OFFSET: int = 35


class Signature(BaseModel):
    """Represents an Ethereum signature with v, r, s components."""

    model_config = ConfigDict(frozen=True)

    v: int = Field(..., description="Recovery identifier in 'Electrum' notation")
    r: bytes = Field(..., description="R component of signature")
    s: bytes = Field(..., description="S component of signature")

    @field_validator("r", "s", mode="before")
    @classmethod
    def coerce_scalar(cls, v):
        # eth_account hands out (v, r, s) as ints, JSON carries 0x-hex
        if isinstance(v, str):
            return decode_hex(v)
        if isinstance(v, int) and not isinstance(v, bool):
            if not 0 <= v < 2 ** (8 * DIGEST_LENGTH):
                msg = "Scalar does not fit in 32 bytes"
                raise ValueError(msg)
            return v.to_bytes(DIGEST_LENGTH, "big")
        return v

    @field_validator("r", "s")
    @classmethod
    def validate_length(cls, v: bytes) -> bytes:
        if len(v) != DIGEST_LENGTH:
            msg = f"Length must be 32 bytes, got {len(v)} bytes"
            raise ValueError(msg)
        return v

    @field_validator("v")
    @classmethod
    def validate_v(cls, v: int) -> int:
        if v < 0:
            msg = "v must be non-negative"
            raise ValueError(msg)
        if v >= MAX_V:
            msg = "v must fit in 64 bits"
            raise ValueError(msg)
        return v

    @field_serializer("r", "s")
    def serialize_scalar(self, v: bytes) -> str:
        return "0x" + v.hex()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Signature":
        """
        Parse a raw 65-byte signature.

        The first 32 bytes are ``r``, the next 32 bytes ``s`` and the final
        byte is ``v`` in 'Electrum' notation.

        Raises:
            InvalidLengthError: If ``data`` is not 65 bytes long
            TypeError: If ``data`` is not bytes-like
        """
        if not isinstance(data, bytes | bytearray | memoryview):
            raise TypeError(f"Expected bytes, got {type(data).__name__}")
        data = bytes(data)
        if len(data) != SIGNATURE_LENGTH:
            raise InvalidLengthError(len(data))
        return cls(v=data[64], r=data[0:32], s=data[32:64])

    @classmethod
    def from_hex(cls, hex_str: str) -> "Signature":
        """Create signature from hex string, with or without 0x prefix."""
        try:
            sig_bytes = decode_hex(hex_str)
        except ValueError as e:
            raise DecodingError(str(e)) from e
        return cls.from_bytes(sig_bytes)

    def to_bytes(self, electrum_v: bool = False) -> bytes:
        """
        Serialize to the 65-byte ``r || s || v`` wire layout.

        Only the low byte of ``v`` is written, so an EIP-155 ``v`` loses its
        chain id and may stop being recoverable. Pass ``electrum_v=True`` to
        write such a ``v`` as 27/28 instead.
        """
        v = self.v
        if electrum_v and v >= EIP155_V_OFFSET:
            v = self.to_electrum().v
        return self.r + self.s + bytes([v & 0xFF])

    def to_bytearray(self) -> bytearray:
        return bytearray(self.to_bytes())

    def to_hex(self) -> str:
        """Convert signature to lowercase hex string, without 0x prefix."""
        return self.to_bytes().hex()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_hex()

    @property
    def recovery_id(self) -> int:
        """Normalized recovery id, 0 or 1 (4 if ``v`` is not a valid value)."""
        return normalize_recovery_id(self.v)

    @property
    def vrs(self) -> tuple[int, int, int]:
        """The ``(v, r, s)`` triple as accepted by ``Account.recover_message``."""
        return self.v, int.from_bytes(self.r, "big"), int.from_bytes(self.s, "big")

    def to_electrum(self) -> "Signature":
        """Copy of this signature with ``v`` in 'Electrum' notation (27/28)."""
        recovery_id = self.recovery_id
        if recovery_id == INVALID_RECOVERY_ID:
            msg = f"v={self.v} does not encode a recovery id"
            raise CurveError(msg)
        return self.model_copy(update={"v": ELECTRUM_V_OFFSET + recovery_id})

    def recover_public_key(self, message: MessageLike) -> bytes:
        """Recover the 65-byte uncompressed public key of the signer."""
        return recover_public_key(self.r, self.s, self.v, message)

    def recover(self, message: MessageLike) -> ChecksumAddress:
        """
        Recover the Ethereum address which was used to sign the given message.

        Args:
            message: Message bytes or text (hashed following EIP-191), or a
                ``MessageHash`` holding a precomputed digest

        Returns:
            ChecksumAddress: The signer's address

        Raises:
            CurveError: If r, s or v are rejected by the curve backend
            RecoveryError: If the recovered key is not a valid curve point

        Example:
            >>> signature = Signature.from_hex(signature_hex)
            >>> signer = signature.recover("Some data")
        """
        return recover_address(self.r, self.s, self.v, message)

    def verify(self, message: MessageLike, address: str | bytes) -> None:
        """
        Verify that this signature on ``message`` was produced by ``address``.

        Raises:
            VerificationError: If the recovered signer doesn't match ``address``
        """
        verify_address(self.r, self.s, self.v, message, address)
