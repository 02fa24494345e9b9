from .buffer import Buffer
from .html import (
    ESCAPE_TABLE,
    append,
    conditional_append,
    conditional_escape,
    escape,
    escape_string,
    format_html,
)

__all__ = [
    "Buffer",
    "ESCAPE_TABLE",
    "append",
    "conditional_append",
    "conditional_escape",
    "escape",
    "escape_string",
    "format_html",
]
