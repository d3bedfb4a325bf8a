import pytest

CANONICAL_URIS = [
    "https://example.com/",
    "https://example.com:443/path/to?q1=10&q2=20#fragment",
    "http://localhost:8080/",
    "ftp://files.example.org/pub/file.txt",
    "https://example.com/path/to#section",
]


@pytest.fixture(params=CANONICAL_URIS)
def canonical_uri(request):
    """Fixture yielding URIs that serialize back to themselves."""
    return request.param
