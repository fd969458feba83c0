from functools import singledispatch
from typing import TypeAlias

from eth_account.messages import SignableMessage, _hash_eip191_message  # noqa: PLC2701
from eth_utils import decode_hex
from pydantic import BaseModel, ConfigDict, Field, field_validator

from eth_signature.exceptions import DecodingError
from eth_signature.utils import DIGEST_LENGTH, hash_message


class MessageData(BaseModel):
    """Message bytes that are hashed according to EIP-191 before recovery."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Raw message bytes")

    @classmethod
    def from_text(cls, text: str) -> "MessageData":
        return cls(data=text.encode("utf-8"))


class MessageHash(BaseModel):
    """A precomputed 32-byte digest, used for recovery as-is."""

    model_config = ConfigDict(frozen=True)

    digest: bytes = Field(..., description="Message hash")

    @field_validator("digest")
    @classmethod
    def validate_length(cls, v: bytes) -> bytes:
        if len(v) != DIGEST_LENGTH:
            msg = f"Length must be 32 bytes, got {len(v)} bytes"
            raise ValueError(msg)
        return v

    @classmethod
    def from_hex(cls, hex_str: str) -> "MessageHash":
        """Create a message hash from hex text, with or without 0x prefix."""
        try:
            digest = decode_hex(hex_str)
        except ValueError as e:
            raise DecodingError(str(e)) from e
        return cls(digest=digest)


RecoveryMessage: TypeAlias = MessageData | MessageHash
MessageLike: TypeAlias = RecoveryMessage | bytes | bytearray | memoryview | str | SignableMessage


@singledispatch
def to_recovery_message(message: MessageLike) -> RecoveryMessage:
    """
    Convert a supported value into a recovery message.

    Byte sequences and text become ``MessageData``; an ``eth_account``
    ``SignableMessage`` becomes the ``MessageHash`` of its EIP-191 hash.
    Plain bytes are always treated as data, so a precomputed digest has to be
    wrapped in ``MessageHash`` explicitly: a 32-byte ``keccak(...)`` result
    passed as bytes is hashed again, it does not select the hash variant.

    Raises:
        TypeError: If the value has no conversion
    """
    raise TypeError(f"Unsupported message type: {type(message)}")


@to_recovery_message.register
def _(message: MessageData) -> RecoveryMessage:
    return message


@to_recovery_message.register
def _(message: MessageHash) -> RecoveryMessage:
    return message


@to_recovery_message.register(bytes)
@to_recovery_message.register(bytearray)
@to_recovery_message.register(memoryview)
def _(message: bytes | bytearray | memoryview) -> RecoveryMessage:
    return MessageData(data=bytes(message))


@to_recovery_message.register
def _(message: str) -> RecoveryMessage:
    return MessageData.from_text(message)


@to_recovery_message.register
def _(message: SignableMessage) -> RecoveryMessage:
    return MessageHash(digest=bytes(_hash_eip191_message(message)))


def resolve_digest(message: RecoveryMessage) -> bytes:
    """Get the 32-byte digest that is fed to public key recovery."""
    match message:
        case MessageData(data=data):
            return hash_message(data)
        case MessageHash(digest=digest):
            return digest
        case _:
            raise TypeError(f"Unsupported message type: {type(message)}")
