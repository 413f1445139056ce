"""Tests for pair grouping."""

from urlform_core.grouper import group, group_shapes, normalize_key
from urlform_core.model import Multiple, Single


def test_group_empty():
    assert group([]) == {}

def test_group_first_seen_key_order():
    pairs = [("b", "1"), ("a", "2"), ("b", "3")]
    assert list(group(pairs)) == ["b", "a"]

def test_group_value_order_with_interleaving():
    pairs = [("ys", "3"), ("xs", "true"), ("ys", "2"), ("xs", "false"), ("ys", "1")]
    assert group(pairs) == {"ys": ["3", "2", "1"], "xs": ["true", "false"]}

def test_group_keeps_every_value():
    pairs = [("a", "x"), ("a", "x"), ("a", "x")]
    assert group(pairs) == {"a": ["x", "x", "x"]}

def test_group_is_deterministic():
    pairs = [("k", "1"), ("j", "2"), ("k", "3")]
    first = group(pairs)
    second = group(pairs)
    assert first == second
    assert list(first) == list(second)

def test_group_merges_bracket_suffix():
    pairs = [("list", "hello"), ("list[]", "world")]
    assert group(pairs) == {"list": ["hello", "world"]}

def test_normalize_key():
    assert normalize_key("a[]") == "a"
    assert normalize_key("a") == "a"
    assert normalize_key("a[][]") == "a[][]"
    assert normalize_key("a[0]") == "a[0]"


# ---------------------------------------------------------------------------
# group_shapes
# ---------------------------------------------------------------------------

def test_group_shapes_single_and_multiple():
    shapes = group_shapes([("a", "1"), ("b", "2"), ("b", "3")])
    assert shapes == {"a": Single("1"), "b": Multiple(("2", "3"))}

def test_group_shapes_bracketed_single_stays_single():
    assert group_shapes([("list[]", "test")]) == {"list": Single("test")}
