"""
Exceptions for encbox
Everything derives from EncboxError so callers have one general error catcher
"""


class EncboxError(Exception):
    # general container for errors
    pass


class RandomSourceError(EncboxError):
    # raised when the OS entropy read fails or comes back short
    pass


class KeyDerivationError(EncboxError):
    # raised when scrypt rejects its parameters or the salt cannot be generated
    pass


class CipherInitError(EncboxError):
    # raised on a bad key/nonce length or when the cipher cannot be built
    pass


class AuthenticationError(EncboxError):
    # raised when the GCM tag does not verify (tampering, wrong key or nonce)
    pass


class EncodingError(EncboxError):
    # raised on malformed base64 or undecodable text
    pass


class FormatError(EncboxError):
    # raised when a value is not in the ENC(...) form
    pass


class NonceReuseError(EncboxError):
    # raised by NonceTracker when a (key, nonce) pair is used twice
    pass


class ConfigurationError(EncboxError):
    # raised when an ENCBOX_* setting is missing or malformed
    pass


class ClipboardError(EncboxError):
    # raised when no clipboard mechanism is available
    pass
