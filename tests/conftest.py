import pytest
from django.template import engines

from markup_cythonized.buffer import Buffer


@pytest.fixture
def buffer():
    return Buffer()


@pytest.fixture
def render():
    """Render a template string with the markup library loaded."""

    def _render(template_string, context=None):
        template = engines["django"].from_string("{% load markup %}" + template_string)
        return template.render(context or {})

    return _render
