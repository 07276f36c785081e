"""src/divan/exceptions.py

Divan Exceptions hierarchy.
"""


class DivanError(Exception):
    """Base exception for all Divan errors."""


class EncodingError(DivanError):
    """General exception for JSON encoding and decoding errors."""


class InvalidJSONError(EncodingError):
    """
    Payload could not be decoded as JSON.
    The offending payload is kept on ``payload``.
    """

    def __init__(self, payload, message: str = "Invalid JSON"):
        super().__init__(message)
        self.payload = payload


class JSONEncodeError(EncodingError):
    """A value has no JSON representation."""

    def __init__(self, value):
        super().__init__(f"Cannot encode {value!r} as JSON")
        self.value = value


class CoercionError(DivanError, TypeError):
    """Value shape is not accepted by a non-total coercion."""


class OAuthError(DivanError):
    """
    Base exception for OAuth header construction errors.
    No partial header is ever returned once one is raised.
    """


class InvalidURLError(OAuthError, ValueError):
    """URL could not be split into its components."""


class MissingCredentialError(OAuthError):
    """A required OAuth credential is absent."""


class UnknownSignatureMethodError(OAuthError):
    """Signature method name is not PLAINTEXT, HMAC-SHA1 or RSA-SHA1."""


class UnknownActionError(OAuthError):
    """HTTP action has no method name."""


class SigningError(OAuthError):
    """The signature could not be computed."""
