import pytest

from sizing.breakpoints import resolve_breakpoints
from sizing.media import (
    UnknownSizeError,
    build_media_queries,
    build_responsive_stylesheet,
    media_query_max_width,
)
from sizing.sizes import SIZE_NAMES


def test_media_query_canonical():
    assert media_query_max_width("xsmall") == "@media (max-width: 320px)"
    assert media_query_max_width("medium") == "@media (max-width: 991px)"
    assert media_query_max_width("xxlarge") == "@media (max-width: 9999px)"


@pytest.mark.parametrize(
    "overrides",
    [
        None,
        {"small": 500, "medium": 800},
        {"xsmall": 300, "small": 600, "medium": 900, "xlarge": 1300, "xxlarge": 2000},
    ],
)
def test_media_query_embeds_table_max(overrides):
    table = resolve_breakpoints(overrides)
    for name in SIZE_NAMES:
        assert media_query_max_width(name, table) == f"@media (max-width: {table[name].max}px)"


def test_build_media_queries_ordered():
    queries = build_media_queries()
    assert list(queries) == list(SIZE_NAMES)
    assert queries["small"] == "@media (max-width: 640px)"


def test_responsive_stylesheet_widest_first():
    css, meta = build_responsive_stylesheet(
        {
            "small": ".nav { display: none; }",
            "large": ".aside {\n  width: 30%;\n}",
        }
    )
    assert meta.blocks == 2
    assert meta.sizes == ("large", "small")
    assert css.index("max-width: 1200px") < css.index("max-width: 640px")
    assert "@media (max-width: 640px) {\n  .nav { display: none; }\n}" in css
    assert css.endswith("}\n")


def test_responsive_stylesheet_uses_given_table():
    table = resolve_breakpoints({"small": 500, "medium": 800})
    css, _ = build_responsive_stylesheet({"small": "p { margin: 0; }"}, table)
    assert "@media (max-width: 500px)" in css


def test_responsive_stylesheet_skips_blank_and_is_deterministic():
    rules = {"medium": "  ", "xsmall": "a { color: red; }"}
    first = build_responsive_stylesheet(rules)
    second = build_responsive_stylesheet(dict(reversed(list(rules.items()))))
    assert first == second
    assert first[1].sizes == ("xsmall",)


def test_responsive_stylesheet_empty():
    css, meta = build_responsive_stylesheet({})
    assert css == ""
    assert meta.blocks == 0


def test_responsive_stylesheet_unknown_size():
    with pytest.raises(UnknownSizeError):
        build_responsive_stylesheet({"tablet": "a {}"})
