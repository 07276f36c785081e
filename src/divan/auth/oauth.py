"""src/divan/auth/oauth.py

OAuth ``Authorization`` header construction.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from divan.auth.signing import (
    DEFAULT_SIGNATURE_METHOD,
    Consumer,
    SignatureMethod,
    Signer,
    params_to_header_string,
)
from divan.exceptions import MissingCredentialError, UnknownActionError
from divan.http.url import URL, parse_query_string
from divan.utils.coercion import to_text
from divan.utils.proplist import get_value

__all__ = ["AUTHORIZATION", "HTTP_METHODS", "OAuthCredentials", "oauth_header"]

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"

HTTP_METHODS = {
    "delete": "DELETE",
    "get": "GET",
    "post": "POST",
    "put": "PUT",
    "head": "HEAD",
}

_DEFAULT_SIGNER = Signer()


@dataclass(frozen=True)
class OAuthCredentials:
    """
    Credentials used to sign one request.

    Attributes:
        consumer_key: Consumer key.
        consumer_secret: Consumer secret.
        token: Access token, empty for two-legged requests.
        token_secret: Access token secret.
        signature_method: Signature method, HMAC-SHA1 by default.
    """

    consumer_key: str
    consumer_secret: str
    token: str = ""
    token_secret: str = ""
    signature_method: SignatureMethod = DEFAULT_SIGNATURE_METHOD

    @classmethod
    def from_options(
        cls, options: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]
    ) -> "OAuthCredentials":
        """
        Build credentials from a proplist or mapping of OAuth options.

        Keys may be text, bytes or symbols. ``consumer_key`` and
        ``consumer_secret`` are required; ``token`` and ``token_secret``
        default to empty strings and ``signature_method`` to HMAC-SHA1.

        Raises:
            MissingCredentialError: If a required credential is absent.
            UnknownSignatureMethodError: If the signature method is unknown.
        """
        if isinstance(options, Mapping):
            options = options.items()
        props = [(to_text(k), v) for k, v in options]

        required = {}
        for name in ("consumer_key", "consumer_secret"):
            value = get_value(name, props)
            if value is None:
                raise MissingCredentialError(f"OAuth option {name!r} is required")
            required[name] = to_text(value)

        method = get_value("signature_method", props)
        return cls(
            consumer_key=required["consumer_key"],
            consumer_secret=required["consumer_secret"],
            token=_optional_text(get_value("token", props)),
            token_secret=_optional_text(get_value("token_secret", props)),
            signature_method=(
                DEFAULT_SIGNATURE_METHOD
                if method is None
                else SignatureMethod.from_name(method)
            ),
        )

    @property
    def consumer(self) -> Consumer:
        """The OAuth consumer of these credentials."""
        return Consumer(self.consumer_key, self.consumer_secret, self.signature_method)


def _optional_text(value: Any) -> str:
    return "" if value is None else to_text(value)


def _subtract(params: List[Tuple[str, str]], removed: List[Tuple[str, str]]):
    remaining = list(params)
    for pair in removed:
        if pair in remaining:
            remaining.remove(pair)
    return remaining


def oauth_header(
    url: str,
    action: Any,
    credentials: Union[OAuthCredentials, Mapping[Any, Any], Iterable[Tuple[Any, Any]]],
    signer: Optional[Signer] = None,
) -> Tuple[str, str]:
    """
    Build the OAuth ``Authorization`` header of a request.

    The query string of ``url`` is signed with the request but left out of
    the header, which only carries the OAuth protocol parameters.

    Args:
        url: Full request URL, query string included.
        action: HTTP action name (``get``, ``put``, ``post``, ``delete``,
            ``head``) as text, bytes or symbol.
        credentials: OAuthCredentials, or OAuth options as a proplist or
            mapping (see ``OAuthCredentials.from_options``).
        signer: Signer to use. Defaults to a signer with random nonces and
            the system clock.

    Returns:
        Header name and value.

    Raises:
        InvalidURLError: If the URL cannot be parsed.
        MissingCredentialError: If a required credential is absent.
        UnknownSignatureMethodError: If the signature method is unknown.
        UnknownActionError: If the action is not a known HTTP method.
    """
    parsed = URL(url)
    query_params = parse_query_string(parsed.query)

    if not isinstance(credentials, OAuthCredentials):
        credentials = OAuthCredentials.from_options(credentials)

    method = HTTP_METHODS.get(to_text(action))
    if method is None:
        raise UnknownActionError(f"Unknown HTTP action: {to_text(action)!r}")

    logger.debug(
        "Signing %s %s://%s%s with %s",
        method,
        parsed.scheme,
        parsed.host,
        parsed.path,
        credentials.signature_method.value,
    )
    signed = (signer or _DEFAULT_SIGNER).signed_params(
        method,
        url,
        query_params,
        credentials.consumer,
        credentials.token,
        credentials.token_secret,
    )
    params = _subtract(signed, query_params)
    return AUTHORIZATION, "OAuth " + params_to_header_string(params)
