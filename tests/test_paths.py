import pytest

from reel_resolver.core.scraping.paths import (
    PathExpression,
    PathSegment,
    resolve,
    resolve_first,
)


def test_parse_path_expression():
    path = PathExpression.parse("items[0].video_versions[0].url")
    assert path.segments == (
        PathSegment("items", 0),
        PathSegment("video_versions", 0),
        PathSegment("url"),
    )
    assert str(path) == "items[0].video_versions[0].url"


@pytest.mark.parametrize("bad", ["", "a..b", "a[x]", "a[-1]", "[0]", "a[0]b"])
def test_parse_rejects_malformed_paths(bad):
    with pytest.raises(ValueError):
        PathExpression.parse(bad)


def test_resolve_nested_arrays():
    data = {"items": [{"video_versions": [{"url": "https://cdn.example/a.mp4"}]}]}
    path = PathExpression.parse("items[0].video_versions[0].url")
    assert resolve(data, path) == "https://cdn.example/a.mp4"


@pytest.mark.parametrize(
    "data",
    [
        None,
        42,
        "string",
        [],
        {},
        {"items": None},
        {"items": {"0": "x"}},
        {"items": []},
        {"items": [1]},
        {"items": [{"video_versions": "nope"}]},
        {"items": [{"video_versions": [{}]}]},
    ],
)
def test_resolve_is_total(data):
    path = PathExpression.parse("items[0].video_versions[0].url")
    assert resolve(data, path) is None


def test_resolve_first_skips_values_rejected_by_predicate():
    data = {
        "graphql": {"shortcode_media": {"display_url": "https://cdn.example/pic.jpg"}},
        "video_url": "https://cdn.example/v.mp4",
    }
    assert resolve_first(data) == "https://cdn.example/v.mp4"


def test_resolve_first_custom_predicate():
    data = {"contentUrl": "https://cdn.example/pic.jpg"}
    assert resolve_first(data) is None
    assert resolve_first(data, predicate=lambda v: v.endswith(".jpg")) == (
        "https://cdn.example/pic.jpg"
    )


def test_resolve_first_sidecar_edges():
    data = {
        "edge_sidecar_to_children": {
            "edges": [{"node": {"video_url": "https://cdn.example/side.mp4"}}]
        }
    }
    assert resolve_first(data) == "https://cdn.example/side.mp4"
