"""
Template library exposing the markup utilities to Django templates.

Register it through the template backend options:

    "OPTIONS": {"libraries": {"markup": "markup_cythonized.templatetags"}}

and load it with {% load markup %}.
"""

from django import template
from django.utils.safestring import mark_safe

from .buffer import Buffer
from .html import conditional_append, escape
from .strings import to_attribute, to_quoted_string, to_snake, to_title
from .uri import uri as build_uri

register = template.Library()


@register.filter(is_safe=True)
def markup(value):
    """Escape value even if it is already marked safe."""
    return escape(value)


@register.filter
def quoted(value):
    return to_quoted_string(str(value))


@register.filter
def titleize(value):
    return to_title(str(value))


@register.filter
def snakeize(value):
    return to_snake(str(value))


@register.simple_tag
def attribute(key, value):
    return mark_safe(to_attribute(escape(key), escape(value)))


@register.simple_tag
def markup_append(buffer, value):
    """Append value to a Buffer held in the context; renders nothing."""
    if not isinstance(buffer, Buffer):
        raise TypeError(
            "markup_append expects a Buffer, got %s" % type(buffer).__name__
        )
    conditional_append(buffer, value)
    return ""


@register.simple_tag
def uri(path, **parameters):
    return str(build_uri(path, parameters or None))
