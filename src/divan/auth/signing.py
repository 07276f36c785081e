"""src/divan/auth/signing.py

OAuth 1.0a request signing.

The signer builds the protocol parameters of a request (consumer key, nonce,
timestamp, signature method, token, version) and signs them together with
the request parameters, following the OAuth Core 1.0a signature base string
rules.
"""

import base64
import hashlib
import hmac
import secrets
import time
import urllib.parse
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple

from divan.exceptions import SigningError, UnknownSignatureMethodError
from divan.http.url import URL
from divan.utils.coercion import to_text

__all__ = [
    "SignatureMethod",
    "DEFAULT_SIGNATURE_METHOD",
    "OAUTH_VERSION",
    "Consumer",
    "Signer",
    "percent_encode",
    "normalize_url",
    "normalize_parameters",
    "signature_base_string",
    "params_to_header_string",
]

OAUTH_VERSION = "1.0"

Param = Tuple[str, str]
RsaSign = Callable[[bytes, str], bytes]


class SignatureMethod(Enum):
    """OAuth signature methods."""

    PLAINTEXT = "PLAINTEXT"
    HMAC_SHA1 = "HMAC-SHA1"
    RSA_SHA1 = "RSA-SHA1"

    @classmethod
    def from_name(cls, name: Any) -> "SignatureMethod":
        """
        Resolve a signature method from its protocol name.

        Raises:
            UnknownSignatureMethodError: If the name is not a known method.
        """
        if isinstance(name, SignatureMethod):
            return name
        try:
            return cls(to_text(name))
        except ValueError:
            raise UnknownSignatureMethodError(
                f"Unknown OAuth signature method: {to_text(name)!r}"
            ) from None


DEFAULT_SIGNATURE_METHOD = SignatureMethod.HMAC_SHA1


@dataclass(frozen=True)
class Consumer:
    """
    OAuth consumer.

    Attributes:
        key: Consumer key.
        secret: Consumer secret. For RSA-SHA1 this is handed to the RSA
            signing callable, which usually treats it as a key reference.
        signature_method: Method used to sign requests.
    """

    key: str
    secret: str
    signature_method: SignatureMethod = DEFAULT_SIGNATURE_METHOD


def percent_encode(value: Any) -> str:
    """RFC 3986 percent-encoding; only ``A-Za-z0-9-._~`` stay bare."""
    return urllib.parse.quote(to_text(value), safe="~")


def normalize_url(url: str) -> str:
    """Base string URI: lowercase scheme and host, no default port, no query."""
    return URL(url).base


def normalize_parameters(params: Iterable[Param]) -> str:
    """Encoded and sorted request parameters, ``oauth_signature`` excluded."""
    encoded = sorted(
        (percent_encode(k), percent_encode(v))
        for k, v in params
        if k != "oauth_signature"
    )
    return "&".join(f"{k}={v}" for k, v in encoded)


def signature_base_string(method: str, url: str, params: Iterable[Param]) -> str:
    """Signature base string for a request."""
    return "&".join(
        percent_encode(part)
        for part in (method.upper(), normalize_url(url), normalize_parameters(params))
    )


def params_to_header_string(params: Iterable[Param]) -> str:
    """Render parameters as ``key="value"`` items joined by ``", "``."""
    return ", ".join(f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in params)


class Signer:
    """
    OAuth 1.0a signer.

    Each call to ``signed_params`` draws a new nonce and reads the clock,
    so no two requests share a nonce and timestamp.

    Args:
        nonce_factory: Returns a fresh nonce. Defaults to 32 random hex digits.
        clock: Returns the current time in seconds. Defaults to ``time.time``.
        rsa_sign: Signs a base string with RSA-SHA1. Receives the base string
            bytes and the consumer secret and returns the raw signature.
    """

    __slots__ = ("_nonce_factory", "_clock", "_rsa_sign")

    def __init__(
        self,
        nonce_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], float]] = None,
        rsa_sign: Optional[RsaSign] = None,
    ):
        self._nonce_factory = nonce_factory or (lambda: secrets.token_hex(16))
        self._clock = clock or time.time
        self._rsa_sign = rsa_sign

    def oauth_params(self, consumer: Consumer, token: str = "") -> List[Param]:
        """Protocol parameters of a new request, without the signature."""
        params = [
            ("oauth_consumer_key", consumer.key),
            ("oauth_nonce", self._nonce_factory()),
            ("oauth_signature_method", consumer.signature_method.value),
            ("oauth_timestamp", str(int(self._clock()))),
        ]
        if token:
            params.append(("oauth_token", token))
        params.append(("oauth_version", OAUTH_VERSION))
        return params

    def signature(
        self,
        method: str,
        url: str,
        params: Iterable[Param],
        consumer: Consumer,
        token_secret: str = "",
    ) -> str:
        """
        Sign a request.

        Raises:
            SigningError: If RSA-SHA1 is requested without an RSA signer.
        """
        key = f"{percent_encode(consumer.secret)}&{percent_encode(token_secret)}"
        if consumer.signature_method is SignatureMethod.PLAINTEXT:
            return key

        base_string = signature_base_string(method, url, params).encode("ascii")
        if consumer.signature_method is SignatureMethod.HMAC_SHA1:
            digest = hmac.new(key.encode("ascii"), base_string, hashlib.sha1).digest()
        else:
            if self._rsa_sign is None:
                raise SigningError("RSA-SHA1 signing requires an rsa_sign callable")
            digest = self._rsa_sign(base_string, consumer.secret)
        return base64.b64encode(digest).decode("ascii")

    def signed_params(
        self,
        method: str,
        url: str,
        params: Iterable[Param],
        consumer: Consumer,
        token: str = "",
        token_secret: str = "",
    ) -> List[Param]:
        """
        Request parameters followed by the signed OAuth protocol parameters.

        Args:
            method: Uppercase HTTP method.
            url: Request URL. Its query string is ignored; pass the query
                parameters in ``params``.
            params: Request parameters.
            consumer: OAuth consumer.
            token: Access token; omitted from the parameters when empty.
            token_secret: Token secret.
        """
        params = list(params)
        signed = params + self.oauth_params(consumer, token)
        signed.append(
            (
                "oauth_signature",
                self.signature(method, url, signed, consumer, token_secret),
            )
        )
        return signed
