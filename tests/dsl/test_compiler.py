"""End-to-end tests for selector compilation."""

from __future__ import annotations

import pytest

from systemcss.config import build_config
from systemcss.dsl import SelectorCompiler, compile_selectors, split_selector_list, transform_selector


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        ("component(card)", ".card"),
        ("component(card) has(title)", ".card--title"),
        ("component(card) has(title) has(icon)", ".card--title--icon"),
        ("component(card) when(active)", r".card.\+active"),
        ("component(card) when(active) has(title)", r".card.\+active .card--title"),
        ("component(button) is(hovered)", ".button:hover"),
        ("component(button) is(disabled)", ".button:disabled"),
        ("component(button) is(hovered:focused)", ".button:hover:focus"),
        ("component(card) is(hovered) has(icon)", ".card:hover .card--icon"),
        ("component(nav) inside(header)", r"#system .\@header .nav"),
        ("util(hidden)", r"#system .\~hidden"),
        ("container(sidebar) component(card)", r".\@sidebar.card"),
        ("component(tweet):hover", ".tweet:hover"),
        ("component(tweet) has(title):hover", ".tweet--title:hover"),
        (".foo > component(bar)", ".foo > .bar"),
        (".page component(nav) inside(header)", r".page #system .\@header .nav"),
        ("component(a) is(hovered):not(.x) has(t)", ".a:hover:not(.x) .a--t"),
    ],
    ids=[
        "block",
        "element",
        "nested_element",
        "modifier",
        "element_in_modifier",
        "state",
        "protected_state",
        "chained_state",
        "element_in_parent_state",
        "context",
        "util",
        "parent",
        "pseudo",
        "element_pseudo",
        "literal_passthrough",
        "context_after_literal",
        "element_after_pseudo_state",
    ],
)
def test_transform_selector(selector: str, expected: str) -> None:
    assert transform_selector(selector) == expected


def test_multiple_arguments_expand_to_every_combination(compiler: SelectorCompiler) -> None:
    assert compiler.transform("component(a, b) has(c, d)") == ".a--c,\n.a--d,\n.b--c,\n.b--d"


def test_expansion_keeps_source_order(compiler: SelectorCompiler) -> None:
    assert compiler.transform("component(a,b) has(c)") == ".a--c,\n.b--c"


def test_expansion_with_modifier_reanchors_each_clause(compiler: SelectorCompiler) -> None:
    assert compiler.transform("component(a, b) when(x) has(t)") == "\n".join(
        [
            r".a.\+x .a--t,",
            r".b.\+x .b--t",
        ]
    )


def test_pseudo_applies_to_every_expanded_call(compiler: SelectorCompiler) -> None:
    assert compiler.transform("component(a, b):hover") == ".a:hover,\n.b:hover"


@pytest.mark.parametrize(
    "selector",
    [
        ".test",
        ".foo  >  .bar",
        "a:not(.b, .c)",
        "ul li:nth-child(2n+1)",
        "h1,\nh2",
        "input[type='text'], textarea",
        "",
        "component(a",
        "component()",
        "nothing(here)",
    ],
)
def test_plain_css_is_unchanged(compiler: SelectorCompiler, selector: str) -> None:
    assert compiler.transform(selector) == selector


def test_selector_lists_compile_each_selector(compiler: SelectorCompiler) -> None:
    assert compiler.transform("component(a), component(b) has(c)") == ".a,\n.b--c"


def test_plain_selectors_in_a_mixed_list_are_kept(compiler: SelectorCompiler) -> None:
    assert compiler.transform(".x  .y, component(b)") == ".x  .y,\n.b"


def test_malformed_call_degrades_to_literal(compiler: SelectorCompiler) -> None:
    assert compiler.transform("component(card) has(") == ".card has("


def test_contains_dsl(compiler: SelectorCompiler) -> None:
    assert compiler.contains_dsl("component(a, b)")
    assert not compiler.contains_dsl(".component")


def test_compiler_is_callable(compiler: SelectorCompiler) -> None:
    assert compiler("component(card)") == ".card"


def test_custom_keywords() -> None:
    config = build_config(
        {
            "mixins": {
                "block": "new",
                "element": "part",
                "modifier": "option",
                "state": "state",
                "context": "area",
                "util": "tweak",
            }
        }
    )

    assert transform_selector("new(card) option(big) part(title)", config) == r".card.\+big .card--title"
    assert transform_selector("new(nav) area(header)", config) == r"#system .\@header .nav"
    assert transform_selector("component(card)", config) == "component(card)"


def test_custom_prefixes_and_root() -> None:
    config = build_config({"root": "#app", "prefixes": {"element": "__", "modifier": "--"}})

    assert transform_selector("component(card) when(big) has(title)", config) == ".card--big .card__title"
    assert transform_selector("util(hidden)", config) == r"#app .\~hidden"


def test_compile_selectors_maps_over_inputs() -> None:
    assert compile_selectors(["component(a)", ".plain"]) == [".a", ".plain"]


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        ("a, b", ["a", " b"]),
        ("component(a, b), has(c)", ["component(a, b)", " has(c)"]),
        ("a:not(.b, .c), d", ["a:not(.b, .c)", " d"]),
        ("[data-x='1,2'], e", ["[data-x='1,2']", " e"]),
        ("single", ["single"]),
    ],
)
def test_split_selector_list(selector: str, expected: list[str]) -> None:
    assert split_selector_list(selector) == expected
