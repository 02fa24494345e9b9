import pytest

from markup_cythonized.buffer import Buffer
from markup_cythonized.uri import URI, build_nested_query, escape_path, uri


class TestEscaping:
    def test_path_keeps_pchar(self):
        assert escape_path("/a/b:c@d;e=f,g!h$i&j'k(l)m*n+o~p") == (
            "/a/b:c@d;e=f,g!h$i&j'k(l)m*n+o~p"
        )

    def test_path_encodes_space_and_unicode(self):
        assert escape_path("/hello world/ü") == "/hello%20world/%C3%BC"

    def test_path_encodes_reserved(self):
        assert escape_path("/a?b#c") == "/a%3Fb%23c"


class TestNestedQuery:
    def test_flat(self):
        assert build_nested_query({"x": 10, "y": "a b"}) == "x=10&y=a%20b"

    def test_nested_mapping(self):
        assert build_nested_query({"user": {"name": "bob", "id": 3}}) == (
            "user[name]=bob&user[id]=3"
        )

    def test_list(self):
        assert build_nested_query({"tags": ["a", "b"]}) == "tags[]=a&tags[]=b"

    def test_none_gives_bare_key(self):
        assert build_nested_query({"flag": None, "x": 1}) == "flag&x=1"

    def test_empty_parts_dropped(self):
        assert build_nested_query({"empty": {}, "x": 1}) == "x=1"

    def test_keys_escaped(self):
        assert build_nested_query({"a&b": "c=d"}) == "a%26b=c%3Dd"

    def test_list_without_prefix(self):
        assert build_nested_query(["a", "b"]) == "[]=a&[]=b"

    def test_scalar_without_prefix(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            build_nested_query("x")


class TestURI:
    def test_path_only(self):
        assert str(URI("/index.html")) == "/index.html"

    def test_parameters(self):
        assert str(URI("/search", parameters={"q": "tom & jerry"})) == (
            "/search?q=tom%20%26%20jerry"
        )

    def test_query_string_and_parameters(self):
        assert str(URI("/list", "page=2", parameters={"sort": "name"})) == (
            "/list?page=2&sort=name"
        )

    def test_empty_parameters_ignored(self):
        assert str(URI("/list", parameters={})) == "/list"

    def test_fragment(self):
        assert str(URI("/doc", fragment="section 2")) == "/doc#section%202"

    def test_append_escapes_into_buffer(self):
        buffer = Buffer('<a href="')
        result = URI("/p", "a=1&b=2").append(buffer)
        assert result is buffer
        assert buffer.finalize() == '<a href="/p?a=1&amp;b=2'

    def test_html(self):
        assert URI("/p", "a=1&b=2").__html__() == "/p?a=1&amp;b=2"

    def test_equality(self):
        assert URI("/a", "x=1") == uri("/a?x=1")
        assert hash(URI("/a")) == hash(uri("/a"))


class TestUriConstructor:
    def test_split(self):
        value = uri("/path/to?x=10&y=20#top")
        assert value.path == "/path/to"
        assert value.query_string == "x=10&y=20"
        assert value.fragment == "top"

    def test_no_query_or_fragment(self):
        value = uri("/path")
        assert value.query_string is None
        assert value.fragment is None

    def test_parameters_combined(self):
        assert str(uri("/p?a=1#f", {"b": 2})) == "/p?a=1&b=2#f"

    def test_default(self):
        assert str(uri()) == ""

    def test_empty_fragment_and_query_dropped(self):
        value = uri("/a?#")
        assert value.query_string is None
        assert value.fragment is None
        assert str(value) == "/a"
        assert str(uri("/a#")) == "/a"
