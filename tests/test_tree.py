"""Tests for routemap.tree — frozen route trees and flattening."""

import pytest

from routemap.errors import ConfigurationError
from routemap.tree import RouteTree, define_routes, flatten_routes


@pytest.fixture
def routes() -> RouteTree:
    return define_routes(
        {
            "home": "/",
            "blog": {
                "root": "/blog",
                "posts": {
                    "list": "/blog/posts",
                    "byId": "/blog/posts/:id",
                },
            },
        }
    )


class TestDefineRoutes:
    def test_item_access(self, routes: RouteTree) -> None:
        assert routes["home"] == "/"
        assert routes["blog"]["posts"]["byId"] == "/blog/posts/:id"

    def test_attribute_access(self, routes: RouteTree) -> None:
        assert routes.blog.posts.byId == "/blog/posts/:id"

    def test_nested_are_route_trees(self, routes: RouteTree) -> None:
        assert isinstance(routes.blog, RouteTree)
        assert isinstance(routes.blog.posts, RouteTree)

    def test_definition_order(self, routes: RouteTree) -> None:
        assert list(routes) == ["home", "blog"]

    def test_equal_to_plain_mapping(self) -> None:
        assert define_routes({"a": "/a"}) == {"a": "/a"}

    def test_source_mutation_does_not_leak(self) -> None:
        source = {"a": "/a", "sub": {"b": "/b"}}
        tree = define_routes(source)
        source["a"] = "/changed"
        source["sub"]["b"] = "/changed"
        assert tree.a == "/a"
        assert tree.sub.b == "/b"

    def test_existing_tree_returned_as_is(self, routes: RouteTree) -> None:
        assert define_routes(routes) is routes

    def test_missing_attribute(self, routes: RouteTree) -> None:
        with pytest.raises(AttributeError, match="'blog'.*'nope'"):
            routes.blog.nope  # noqa: B018

    def test_missing_item(self, routes: RouteTree) -> None:
        with pytest.raises(KeyError):
            routes["nope"]

    def test_patterns(self, routes: RouteTree) -> None:
        assert list(routes.patterns()) == [
            ("home", "/"),
            ("blog.root", "/blog"),
            ("blog.posts.list", "/blog/posts"),
            ("blog.posts.byId", "/blog/posts/:id"),
        ]


class TestImmutability:
    def test_setattr(self, routes: RouteTree) -> None:
        with pytest.raises(TypeError, match="immutable"):
            routes.home = "/other"  # type: ignore[misc]

    def test_setitem(self, routes: RouteTree) -> None:
        with pytest.raises(TypeError, match="immutable"):
            routes["home"] = "/other"  # type: ignore[index]

    def test_delitem(self, routes: RouteTree) -> None:
        with pytest.raises(TypeError, match="immutable"):
            del routes["home"]  # type: ignore[attr-defined]

    def test_nested_setattr(self, routes: RouteTree) -> None:
        with pytest.raises(TypeError):
            routes.blog.root = "/x"  # type: ignore[misc]
        assert routes.blog.root == "/blog"


class TestDefineRoutesValidation:
    def test_non_string_leaf(self) -> None:
        with pytest.raises(ConfigurationError, match=r"'blog\.count'"):
            define_routes({"blog": {"count": 3}})

    def test_non_string_key(self) -> None:
        with pytest.raises(ConfigurationError, match="non-empty strings"):
            define_routes({1: "/one"})  # type: ignore[dict-item]

    def test_empty_key(self) -> None:
        with pytest.raises(ConfigurationError):
            define_routes({"": "/"})

    def test_separator_in_key(self) -> None:
        with pytest.raises(ConfigurationError, match="separator"):
            define_routes({"a.b": "/ab"})

    def test_custom_separator(self) -> None:
        tree = define_routes({"a.b": "/ab"}, separator="/")
        assert tree["a.b"] == "/ab"

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            define_routes(["/a"])  # type: ignore[arg-type]

    def test_empty_tree(self) -> None:
        assert len(define_routes({})) == 0

    @pytest.mark.parametrize("name", ["items", "keys", "values", "get", "patterns"])
    def test_method_names_rejected(self, name: str) -> None:
        with pytest.raises(ConfigurationError, match=rf"'shop\.{name}' is reserved"):
            define_routes({"shop": {name: f"/shop/{name}"}})

    def test_underscore_names_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="reserved"):
            define_routes({"_data": "/data"})

    def test_existing_tree_rechecked_for_separator(self) -> None:
        tree = define_routes({"a": {"b/c": "/bc"}})
        with pytest.raises(ConfigurationError, match="separator"):
            define_routes(tree, separator="/")

    def test_existing_tree_same_separator(self) -> None:
        tree = define_routes({"a": {"b": "/b"}}, separator="/")
        assert define_routes(tree, separator="/") is tree


class TestFlattenRoutes:
    def test_nested(self, routes: RouteTree) -> None:
        assert flatten_routes(routes) == {
            "home": "/",
            "blog.root": "/blog",
            "blog.posts.list": "/blog/posts",
            "blog.posts.byId": "/blog/posts/:id",
        }

    def test_order(self, routes: RouteTree) -> None:
        assert list(flatten_routes(routes)) == ["home", "blog.root", "blog.posts.list", "blog.posts.byId"]

    def test_plain_dict(self) -> None:
        assert flatten_routes({"a": {"b": "/a/b"}}) == {"a.b": "/a/b"}

    def test_prefix(self) -> None:
        assert flatten_routes({"b": "/b"}, prefix="a") == {"a.b": "/b"}

    def test_separator(self) -> None:
        assert flatten_routes({"a": {"b": "/a/b"}}, separator=":") == {"a:b": "/a/b"}

    def test_non_pattern_values_skipped(self) -> None:
        assert flatten_routes({"a": "/a", "n": 3, "x": None}) == {"a": "/a"}

    def test_empty(self) -> None:
        assert flatten_routes({}) == {}
