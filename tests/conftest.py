import pytest

from divan.auth.signing import Consumer, Signer

# OAuth Core 1.0, Appendix A example request.
EXAMPLE_NONCE = "kllo9940pd9333jh"
EXAMPLE_TIMESTAMP = 1191242096
EXAMPLE_CONSUMER_KEY = "dpf43f3p2l4k3l03"
EXAMPLE_CONSUMER_SECRET = "kd94hf93k423kf44"
EXAMPLE_TOKEN = "nnch734d00sl2jdk"
EXAMPLE_TOKEN_SECRET = "pfkkdhi9sl3r4s00"
EXAMPLE_URL = "http://photos.example.net/photos?file=vacation.jpg&size=original"


@pytest.fixture
def frozen_signer():
    """Fixture providing a signer with a fixed nonce and clock."""
    return Signer(
        nonce_factory=lambda: EXAMPLE_NONCE,
        clock=lambda: float(EXAMPLE_TIMESTAMP),
    )


@pytest.fixture
def example_consumer():
    """Fixture providing the example HMAC-SHA1 consumer."""
    return Consumer(EXAMPLE_CONSUMER_KEY, EXAMPLE_CONSUMER_SECRET)


@pytest.fixture
def example_options():
    """Fixture providing the example credentials as OAuth options."""
    return {
        "consumer_key": EXAMPLE_CONSUMER_KEY,
        "consumer_secret": EXAMPLE_CONSUMER_SECRET,
        "token": EXAMPLE_TOKEN,
        "token_secret": EXAMPLE_TOKEN_SECRET,
    }
