"""
Cython-accelerated HTML escaping.

escape() and append() scan the text once with a run-start cursor: literal
runs between reserved characters are copied into the output buffer in one
piece, and each reserved character is replaced by its entity sequence.
Scanning works on decoded code points (Py_UCS4), never on encoded bytes.
"""

import cython
import warnings
from types import MappingProxyType

from django.utils.safestring import SafeData, SafeString

from .buffer import Buffer
from .conf import debug_enabled

__all__ = [
    "ESCAPE_TABLE",
    "append",
    "conditional_append",
    "conditional_escape",
    "escape",
    "escape_string",
    "format_html",
]

ESCAPE_TABLE = MappingProxyType({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


@cython.cfunc
def _next_reserved(s: str, pos: cython.Py_ssize_t) -> cython.Py_ssize_t:
    """Index of the first reserved character at or after pos, or -1."""
    n: cython.Py_ssize_t = len(s)
    c: cython.Py_UCS4
    while pos < n:
        c = s[pos]
        if c == "&" or c == "<" or c == ">" or c == '"' or c == "'":
            return pos
        pos += 1
    return -1


@cython.cfunc
def _replacement(c: cython.Py_UCS4) -> str:
    # Must agree with ESCAPE_TABLE.
    if c == "&":
        return "&amp;"
    if c == "<":
        return "&lt;"
    if c == ">":
        return "&gt;"
    if c == '"':
        return "&quot;"
    return "&#39;"


@cython.cfunc
def _escape_into(buffer, s: str, pos: cython.Py_ssize_t):
    """
    Write s into buffer with reserved characters replaced, starting from the
    already located reserved character at pos.
    """
    start: cython.Py_ssize_t = 0
    n: cython.Py_ssize_t = len(s)
    while pos >= 0:
        if pos > start:
            buffer.append_literal(s, start, pos)
        buffer.append_sequence(_replacement(s[pos]))
        start = pos + 1
        pos = _next_reserved(s, start)
    if start < n:
        buffer.append_literal(s, start, n)


@cython.cfunc
def _fast_escape_str(s: str):
    """Escape s, returning s itself when it holds no reserved characters."""
    pos: cython.Py_ssize_t = _next_reserved(s, 0)
    if pos < 0:
        return s
    buffer = Buffer()
    _escape_into(buffer, s, pos)
    return buffer.finalize()


@cython.cfunc
def _to_text(value) -> str:
    """Exact str for value; str subclasses such as SafeString are copied."""
    if type(value) is str:
        return value
    if isinstance(value, bytes) and debug_enabled():
        warnings.warn(
            "escape() received bytes; decode text before escaping it, "
            "otherwise the bytes repr is escaped.",
            stacklevel=3,
        )
    return str.__str__(str(value))


class _WriterAdapter:
    """Present a list or a writable object through the Buffer append API."""

    __slots__ = ("_write",)

    def __init__(self, buffer):
        if isinstance(buffer, list):
            self._write = buffer.append
        elif callable(getattr(buffer, "write", None)):
            self._write = buffer.write
        else:
            raise TypeError(
                "append() needs a Buffer, a list or an object with write(), "
                "not %s" % type(buffer).__name__
            )

    def append_literal(self, text, start=0, stop=None):
        self._write(text[start:stop])

    def append_sequence(self, sequence):
        self._write(sequence)


@cython.cfunc
def _writer(buffer):
    if isinstance(buffer, Buffer):
        return buffer
    return _WriterAdapter(buffer)


@cython.cfunc
def _append_str(buffer, s: str):
    pos: cython.Py_ssize_t = _next_reserved(s, 0)
    if pos < 0:
        if s:
            buffer.append_literal(s, 0, len(s))
    else:
        _escape_into(buffer, s, pos)


@cython.ccall
def escape(text):
    """
    Return the given text with ampersands, quotes and angle brackets encoded
    for use in HTML. Always escape input, even if already marked safe.
    """
    return SafeString(_fast_escape_str(_to_text(text)))


@cython.ccall
def escape_string(string):
    """Like escape(), but only accepts str."""
    if not isinstance(string, str):
        raise TypeError(
            "escape_string() argument must be str, not %s" % type(string).__name__
        )
    return SafeString(_fast_escape_str(_to_text(string)))


@cython.ccall
def append(buffer, text):
    """
    Escape text into buffer and return buffer, so calls can be chained.

    buffer is a Buffer, a list of chunks, or any object with write(). Like
    escape(), text is always escaped.
    """
    _append_str(_writer(buffer), _to_text(text))
    return buffer


@cython.ccall
def conditional_escape(text):
    """
    Similar to escape(), except that it doesn't operate on pre-escaped strings.

    Uses C-level character scanning to return the input unchanged when it
    contains no HTML-special characters (the common case for names, numbers,
    etc.).

    The result is a SafeString when anything was escaped; otherwise it is the
    plain str form of text, which is already safe to emit as is. Callers that
    need the safe marker should wrap the result with mark_safe().
    """
    if isinstance(text, SafeData):
        return text
    if hasattr(text, "__html__"):
        return text.__html__()
    return _fast_escape_str(_to_text(text))


@cython.ccall
def conditional_append(buffer, value):
    """
    Append value to buffer, escaping it unless it is already markup.

    None appends nothing.
    """
    if value is None:
        return buffer
    writer = _writer(buffer)
    if isinstance(value, SafeData):
        s = str(value)
        writer.append_literal(s, 0, len(s))
    elif hasattr(value, "__html__"):
        s = str(value.__html__())
        writer.append_literal(s, 0, len(s))
    else:
        _append_str(writer, _to_text(value))
    return buffer


def format_html(format_string, *args, **kwargs):
    """
    Similar to str.format, but pass all arguments through conditional_escape(),
    and call mark_safe() on the result. This function should be used instead
    of str.format or % interpolation to build up small HTML fragments.
    """
    args_safe = [conditional_escape(arg) for arg in args]
    kwargs_safe = {k: conditional_escape(v) for k, v in kwargs.items()}
    return SafeString(format_string.format(*args_safe, **kwargs_safe))
