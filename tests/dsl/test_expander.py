"""Tests for multi-argument call expansion."""

from __future__ import annotations

import pytest

from systemcss.config import SystemConfig
from systemcss.dsl.expander import expand_selector, fold_expansions, join_clauses, split_fragments


def test_split_fragments_keeps_argument_lists_together() -> None:
    assert split_fragments("component(a, b)  has(c,\td)") == ["component(a,b)", "has(c,d)"]


def test_cartesian_product_of_two_calls(config: SystemConfig) -> None:
    assert expand_selector("component(a, b) has(c, d)", config) == [
        "component(a) has(c)",
        "component(a) has(d)",
        "component(b) has(c)",
        "component(b) has(d)",
    ]


def test_left_arguments_vary_slowest(config: SystemConfig) -> None:
    assert expand_selector("component(a,b) has(c)", config) == [
        "component(a) has(c)",
        "component(b) has(c)",
    ]


def test_three_expanding_fragments(config: SystemConfig) -> None:
    clauses = expand_selector("component(a,b) when(x,y) has(t,u)", config)

    assert len(clauses) == 8
    assert clauses[0] == "component(a) when(x) has(t)"
    assert clauses[1] == "component(a) when(x) has(u)"
    assert clauses[2] == "component(a) when(y) has(t)"
    assert clauses[-1] == "component(b) when(y) has(u)"


def test_single_fragment_returns_its_own_expansion(config: SystemConfig) -> None:
    assert expand_selector("component(a, b):hover", config) == ["component(a):hover", "component(b):hover"]


def test_literals_keep_their_position(config: SystemConfig) -> None:
    assert expand_selector(".foo > component(a, b) span", config) == [
        ".foo > component(a) span",
        ".foo > component(b) span",
    ]


@pytest.mark.parametrize(
    "selector",
    [".foo  >  .bar", "a:not(.b, .c)", "ul li:nth-child(2n+1)", "", "is(hovered:focused)"],
    ids=["spacing", "not_list", "nth_child", "empty", "colon_in_args"],
)
def test_selector_without_calls_is_returned_verbatim(config: SystemConfig, selector: str) -> None:
    assert expand_selector(selector, config) == [selector]


def test_fold_expansions_preserves_source_order() -> None:
    assert fold_expansions([["a", "b"], ["c"], ["d", "e"]]) == ["a c d", "a c e", "b c d", "b c e"]


def test_join_clauses_uses_comma_newline() -> None:
    assert join_clauses([".a", ".b"]) == ".a,\n.b"
