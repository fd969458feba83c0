from enum import Enum

from eth_typing import ChecksumAddress


class SignatureErrorKind(str, Enum):
    """Closed set of signature failure kinds."""

    INVALID_LENGTH = "invalid_length"
    DECODING = "decoding"
    VERIFICATION = "verification"
    CURVE = "curve"
    RECOVERY = "recovery"


class SignatureError(Exception):
    """Base exception for signature operations."""

    kind: SignatureErrorKind


class InvalidLengthError(SignatureError):
    """Raw signature is not 65 bytes long."""

    kind = SignatureErrorKind.INVALID_LENGTH

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"invalid signature length, got {length}, expected 65")


class DecodingError(SignatureError):
    """Signature text is not valid hex."""

    kind = SignatureErrorKind.DECODING


class VerificationError(SignatureError):
    """Recovered signer doesn't match the expected address."""

    kind = SignatureErrorKind.VERIFICATION

    def __init__(self, expected: ChecksumAddress, recovered: ChecksumAddress):
        self.expected = expected
        self.recovered = recovered
        super().__init__(f"Signature verification failed. Expected {expected}, got {recovered}")


class CurveError(SignatureError):
    """The secp256k1 backend rejected the signature (bad scalar or recovery id)."""

    kind = SignatureErrorKind.CURVE


class RecoveryError(SignatureError):
    """Recovered public key is not a valid curve point."""

    kind = SignatureErrorKind.RECOVERY

    def __init__(self, msg: str = "Public key recovery error"):
        super().__init__(msg)
