"""
URI construction for links in generated markup.

Paths are percent-encoded outside the RFC 3986 pchar set; fragments, query
keys and values are percent-encoded outside the unreserved set. Parameters
may be nested mappings and lists, encoded as key[sub]=value and key[]=value.
"""

from collections.abc import Mapping
from urllib.parse import quote

from .html import append, escape

__all__ = ["URI", "build_nested_query", "escape_component", "escape_path", "uri"]

# sub-delims, ":", "@" and the segment separator; unreserved is always safe.
PATH_SAFE = "!$&'()*+,;=:@/"


def escape_path(path):
    return quote(path, safe=PATH_SAFE)


def escape_component(string):
    return quote(string, safe="")


def build_nested_query(value, prefix=None):
    if isinstance(value, Mapping):
        pairs = []
        for key, item in value.items():
            key = escape_component(str(key))
            if prefix is not None:
                key = "%s[%s]" % (prefix, key)
            pair = build_nested_query(item, key)
            if pair:
                pairs.append(pair)
        return "&".join(pairs)
    if isinstance(value, (list, tuple)):
        prefix = prefix if prefix is not None else ""
        return "&".join(build_nested_query(item, "%s[]" % prefix) for item in value)
    if value is None:
        return prefix if prefix is not None else ""
    if prefix is None:
        raise ValueError("value must be a mapping, not %s" % type(value).__name__)
    return "%s=%s" % (prefix, escape_component(str(value)))


class URI:
    """A path with optional query string, fragment and extra parameters."""

    __slots__ = ("path", "query_string", "fragment", "parameters")

    def __init__(self, path, query_string=None, fragment=None, parameters=None):
        self.path = path
        self.query_string = query_string
        self.fragment = fragment
        self.parameters = parameters

    def query_parameters(self):
        if not self.parameters:
            return ""
        return build_nested_query(self.parameters)

    def __str__(self):
        parts = [escape_path(self.path)]
        query = self.query_parameters()
        if self.query_string is not None:
            parts.append("?")
            parts.append(self.query_string)
            if query:
                parts.append("&")
                parts.append(query)
        elif query:
            parts.append("?")
            parts.append(query)
        if self.fragment is not None:
            parts.append("#")
            parts.append(escape_component(self.fragment))
        return "".join(parts)

    def append(self, buffer):
        """Escape this URI into a markup buffer and return the buffer."""
        return append(buffer, str(self))

    def __html__(self):
        return escape(str(self))

    def __eq__(self, other):
        if not isinstance(other, URI):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))

    def __repr__(self):
        return "<URI: %s>" % self


def uri(path="", parameters=None):
    """Build a URI from 'path?query#fragment' plus extra parameters."""
    base, _, fragment = path.partition("#")
    path, _, query_string = base.partition("?")
    return URI(
        path,
        query_string or None,
        fragment or None,
        parameters,
    )
