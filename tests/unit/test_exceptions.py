"""tests/unit/test_exceptions.py"""

import pytest

from urlcraft.exceptions import InvalidPortError, UrlcraftError


def test_exception_hierarchy():
    """Verify the inheritance structure of Urlcraft exceptions."""
    assert issubclass(InvalidPortError, UrlcraftError)
    assert issubclass(InvalidPortError, ValueError)
    assert issubclass(InvalidPortError, TypeError)


def test_invalid_port_message():
    """Verify that InvalidPortError reports the rejected value."""
    with pytest.raises(UrlcraftError) as exc_info:
        raise InvalidPortError(70000)
    assert "70000" in str(exc_info.value)
    assert exc_info.value.port == 70000
