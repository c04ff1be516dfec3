"""tests/unit/test_version.py"""

import urlcraft


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(urlcraft.__version__, str)
    assert len(urlcraft.__version__) > 0
    # Basic semver-ish check
    assert urlcraft.__version__.count(".") >= 1


def test_public_api():
    """Verify the package exports its public names."""
    for name in urlcraft.__all__:
        assert hasattr(urlcraft, name)
