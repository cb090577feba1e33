# okamoto_uchiyama/errors.py

class OkamotoUchiyamaError(ValueError):
    """Base class for every error raised by this package."""

class RandomSourceFailure(OkamotoUchiyamaError):
    """The random byte source failed or returned too few bytes."""

class MessageTooLarge(OkamotoUchiyamaError):
    def __init__(self, msg: str = "okamoto-uchiyama: message is larger than the public key modulus"):
        super().__init__(msg)

class CipherTooLarge(OkamotoUchiyamaError):
    def __init__(self, msg: str = "okamoto-uchiyama: ciphertext is larger than the public key modulus"):
        super().__init__(msg)

class InvalidKeyState(OkamotoUchiyamaError):
    """Raised when key material is internally inconsistent, e.g. L(gd) has no inverse mod p."""
