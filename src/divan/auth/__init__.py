"""src/divan/auth/__init__.py"""

from .oauth import OAuthCredentials, oauth_header
from .signing import Consumer, SignatureMethod, Signer

__all__ = [
    "Consumer",
    "OAuthCredentials",
    "SignatureMethod",
    "Signer",
    "oauth_header",
]
