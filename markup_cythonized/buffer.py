"""
Growable output buffer for escaped markup.

Text is accumulated as a list of chunks and joined once on finalize(), so
appends are amortized O(1) and total copying stays linear in output size.
"""

import cython

from django.utils.safestring import SafeString

__all__ = ["Buffer"]


@cython.cclass
class Buffer:
    """
    Single-writer accumulator for one document.

    Everything appended is taken to be markup already; the escaper is
    responsible for what goes in. finalize() may be called any number of
    times and appends may continue afterwards.
    """

    _parts = cython.declare(list)
    _length = cython.declare(cython.Py_ssize_t)

    def __init__(self, initial=""):
        self._parts = []
        self._length = 0
        if initial:
            self.append_literal(initial)

    @cython.ccall
    def append_literal(self, text, start: cython.Py_ssize_t = 0, stop=None):
        """Append text[start:stop] verbatim."""
        n: cython.Py_ssize_t = len(text)
        if start == 0 and (stop is None or stop >= n):
            chunk = text
        else:
            chunk = text[start:stop]
        # Slicing clamps and wraps indices; count what was actually taken.
        size: cython.Py_ssize_t = len(chunk)
        if size:
            self._parts.append(chunk)
            self._length += size

    @cython.ccall
    def append_sequence(self, sequence):
        """Append a short fixed literal such as an entity reference."""
        if sequence:
            self._parts.append(sequence)
            self._length += len(sequence)

    def write(self, text):
        self.append_literal(text)
        return len(text)

    @cython.ccall
    def finalize(self):
        """Return everything appended so far, in order, as safe markup."""
        parts: list = self._parts
        if not parts:
            return SafeString()
        if len(parts) > 1:
            self._parts = ["".join(parts)]
        return SafeString(self._parts[0])

    def __len__(self):
        return self._length

    def __str__(self):
        return self.finalize()

    def __html__(self):
        return self.finalize()

    def __repr__(self):
        return "<Buffer: %d characters>" % self._length
