"""String helpers for generating markup and identifiers."""

import cython
import re

from .conf import strict_attributes
from .html import escape_string

__all__ = [
    "to_attribute",
    "to_html",
    "to_quoted_string",
    "to_simple_attribute",
    "to_snake",
    "to_title",
]

_title_re = re.compile(r"(^|[ \-_])(.)", re.MULTILINE)
_upper_run_re = re.compile(r"([A-Z]+)")
_leading_underscores_re = re.compile(r"^_+")


@cython.ccall
def to_html(string):
    return escape_string(string)


@cython.ccall
def to_quoted_string(string):
    """Double-quote string, escaping embedded quotes and line breaks."""
    string = string.replace('"', '\\"')
    string = string.replace("\r", "\\r")
    string = string.replace("\n", "\\n")
    return '"%s"' % string


def to_attribute(key, value):
    """Render key="value". value must already be escaped."""
    return '%s="%s"' % (key, value)


def to_simple_attribute(key, strict=None):
    """
    Render a boolean attribute: key="key" in strict (XHTML) mode, otherwise
    the bare key. strict=None uses the MARKUP_STRICT_ATTRIBUTES setting.
    """
    if strict is None:
        strict = strict_attributes()
    if strict:
        return to_attribute(key, key)
    return str(key)


def to_title(string):
    """'foo_bar-baz' -> 'Foo Bar Baz'."""
    string = _title_re.sub(lambda m: " " + m.group(2).upper(), string)
    return string.strip()


def to_snake(string):
    """'Markup.FooBar' -> 'markup_foo_bar'."""
    string = string.replace(".", "")
    string = _upper_run_re.sub(lambda m: "_" + m.group(1).lower(), string)
    return _leading_underscores_re.sub("", string, count=1)
