"""src/urlcraft/builder.py

Fluent URL builder for Urlcraft.
"""

import logging
from typing import Any, Dict, List, Optional

from urlcraft.exceptions import InvalidPortError

__all__ = ["UrlBuilder", "DEFAULT_SCHEME", "MAX_PORT"]

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https"
MAX_PORT = 65535


class UrlBuilder:
    """
    Accumulates URL components and renders them into a single string.

    Components are never validated or escaped. Every mutator returns the
    builder itself so calls can be chained::

        url = (
            UrlBuilder()
            .set_host("example.com")
            .add_subdir("v2")
            .set_param("q", "python")
            .build()
        )
        # "https://example.com/v2?q=python"

    Rendering is a pure read of the current state and can be repeated
    any number of times, with or without mutation in between.
    """

    __slots__ = (
        "scheme",
        "subdomains",
        "userinfo",
        "host",
        "port",
        "subdirs",
        "params",
        "fragment",
    )

    def __init__(self) -> None:
        self.scheme: str = DEFAULT_SCHEME
        self.subdomains: List[str] = []
        self.userinfo: Optional[str] = None
        self.host: str = ""
        self.port: Optional[int] = None
        self.subdirs: List[str] = []
        self.params: Dict[str, str] = {}
        self.fragment: Optional[str] = None

    def set_scheme(self, scheme: str) -> "UrlBuilder":
        """Set the scheme. An empty string renders no scheme at all."""
        self.scheme = scheme
        return self

    def set_userinfo(self, userinfo: str) -> "UrlBuilder":
        """Set the userinfo rendered before the host, e.g. ``user:pass``."""
        self.userinfo = userinfo
        return self

    def set_host(self, host: str) -> "UrlBuilder":
        self.host = host
        return self

    def add_subdomain(self, subdomain: str) -> "UrlBuilder":
        """
        Append a subdomain label.

        Subdomains appear left-to-right in calling order, regardless of
        when the host is set: ``.set_host("google.com").add_subdomain("api")
        .add_subdomain("v2")`` renders as ``api.v2.google.com``.
        """
        self.subdomains.append(subdomain)
        return self

    def set_port(self, port: int) -> "UrlBuilder":
        """
        Set the port.

        Args:
            port: Port number in range 0-65535.

        Raises:
            InvalidPortError: If port is not an int or is out of range.
        """
        # bool is an int subclass but never a port
        if isinstance(port, bool) or not isinstance(port, int):
            raise InvalidPortError(port)
        if not 0 <= port <= MAX_PORT:
            raise InvalidPortError(port)

        self.port = port
        return self

    def add_subdir(self, subdir: str) -> "UrlBuilder":
        """Append a path segment."""
        self.subdirs.append(subdir)
        return self

    def set_param(self, key: str, value: str) -> "UrlBuilder":
        """Set a query parameter, replacing any previous value for key."""
        self.params[key] = value
        return self

    def set_fragment(self, fragment: str) -> "UrlBuilder":
        self.fragment = fragment
        return self

    def build(self) -> str:
        """
        Render the URL.

        Segments are concatenated in fixed order: scheme, userinfo,
        subdomains, host, port, subdirs, params, fragment. Empty or absent
        components contribute nothing and no separator is stripped from
        their neighbours, so a builder with only subdirs renders as
        ``https:///a/b``.

        Returns:
            The assembled URL string.
        """
        scheme_s = f"{self.scheme}://" if self.scheme else ""
        userinfo_s = f"{self.userinfo}@" if self.userinfo is not None else ""

        subdomains_s = ".".join(self.subdomains)
        if self.subdomains and self.host:
            subdomains_s += "."

        port_s = f":{self.port}" if self.port is not None else ""
        subdirs_s = "/" + "/".join(self.subdirs) if self.subdirs else ""

        # Keys render in ascending order for reproducible output
        params_s = "&".join(f"{k}={v}" for k, v in sorted(self.params.items()))
        if params_s:
            params_s = "?" + params_s

        fragment_s = f"#{self.fragment}" if self.fragment is not None else ""

        url = (
            scheme_s
            + userinfo_s
            + subdomains_s
            + self.host
            + port_s
            + subdirs_s
            + params_s
            + fragment_s
        )
        logger.debug("Built URL %r", url)
        return url

    def copy(self) -> "UrlBuilder":
        """Return an independent builder with the same state."""
        clone = UrlBuilder()
        clone.scheme = self.scheme
        clone.subdomains = list(self.subdomains)
        clone.userinfo = self.userinfo
        clone.host = self.host
        clone.port = self.port
        clone.subdirs = list(self.subdirs)
        clone.params = dict(self.params)
        clone.fragment = self.fragment
        return clone

    def _state(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.__slots__}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlBuilder):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._state().items())
        return f"UrlBuilder({fields})"
