import pytest

from urlcraft import UrlBuilder

HOST = "google.com"


@pytest.fixture
def builder():
    """Fixture providing a fresh builder with default state."""
    return UrlBuilder()


@pytest.fixture
def full_builder():
    """Fixture providing a builder with every component set."""
    return (
        UrlBuilder()
        .set_scheme("http")
        .set_userinfo("user:password")
        .add_subdomain("api")
        .add_subdomain("v2")
        .set_host(HOST)
        .set_port(400)
        .add_subdir("s1")
        .add_subdir("s2")
        .set_param("k1", "v1")
        .set_param("k2", "v2")
        .set_param("k3", "v4")
        .set_fragment("foo")
    )
