"""Tests for the data model."""

from urlform_core.model import Kind, Multiple, Request, Single, shape_of


def test_shape_of_single():
    assert shape_of(["a"]) == Single("a")

def test_shape_of_multiple():
    assert shape_of(["a", "b"]) == Multiple(("a", "b"))

def test_request_defaults():
    request = Request(Kind.STR)
    assert request.variants == ()
    assert request.fields == ()
    assert request.length is None

def test_request_describe():
    assert Request(Kind.TUPLE, length=2).describe() == "a tuple of size 2"
    assert Request(Kind.STRUCT, name="Params").describe() == "struct Params"
    assert Request(Kind.BOOL).describe() == "bool"
