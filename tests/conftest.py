import pytest

from typedurl import Host, Path, Query, Scheme, Url


@pytest.fixture
def example_host():
    """Fixture providing the ``example.com`` host."""
    return Host.parse("example.com")


@pytest.fixture
def make_url(example_host):
    """Fixture building Urls on ``example.com`` with overridable fields."""

    def _make_url(**fields):
        defaults = {
            "scheme": Scheme.HTTPS,
            "host": example_host,
            "port": None,
            "path": Path(),
            "query": Query(),
            "fragment": None,
        }
        defaults.update(fields)
        return Url(**defaults)

    return _make_url
