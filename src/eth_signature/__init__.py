from eth_signature.exceptions import (
    CurveError,
    DecodingError,
    InvalidLengthError,
    RecoveryError,
    SignatureError,
    SignatureErrorKind,
    VerificationError,
)
from eth_signature.types.ethereum_types import Signature
from eth_signature.types.messages import MessageData, MessageHash, RecoveryMessage, to_recovery_message

__all__ = [
    "CurveError",
    "DecodingError",
    "InvalidLengthError",
    "MessageData",
    "MessageHash",
    "RecoveryError",
    "RecoveryMessage",
    "Signature",
    "SignatureError",
    "SignatureErrorKind",
    "VerificationError",
    "to_recovery_message",
]
