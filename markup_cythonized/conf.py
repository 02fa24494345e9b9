"""
Settings lookup for the markup utilities.

Values come from django.conf.settings, which configures itself lazily from
DJANGO_SETTINGS_MODULE on first access. When Django is not set up at all,
the defaults below apply, so the escaper also works outside a Django
project.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

__all__ = ["DEFAULTS", "debug_enabled", "get_setting", "strict_attributes"]

logger = logging.getLogger(__name__)

DEFAULTS = {
    "DEBUG": False,
    "MARKUP_STRICT_ATTRIBUTES": False,
}


def get_setting(name):
    default = DEFAULTS[name]
    try:
        value = getattr(settings, name, default)
    except ImproperlyConfigured:
        return default
    logger.debug("Resolved %s=%r", name, value)
    return value


def debug_enabled():
    return bool(get_setting("DEBUG"))


def strict_attributes():
    """Whether boolean attributes are written as key="key" (XHTML style)."""
    return bool(get_setting("MARKUP_STRICT_ATTRIBUTES"))
