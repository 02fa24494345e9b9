import pytest


@pytest.fixture
def plain_text():
    """Names and sentences with no reserved characters: the common case."""
    return "The Great Book of Everything, Vol. 42 by Alice Smith. " * 200


@pytest.fixture
def markup_text():
    return '<td class="title">Tom & Jerry\'s "Best" <b>Episodes</b></td>' * 200
