"""Unit tests for base64 and ENC(...) marker handling."""

import pytest

from encbox.core.exceptions import EncodingError, FormatError
from encbox.security import codec


def test_base64_standard_alphabet_with_padding():
    assert codec.base64_encode(b"\xfb\xff") == "+/8="
    assert codec.base64_decode("+/8=") == b"\xfb\xff"
    assert codec.base64_encode(b"") == ""


@pytest.mark.parametrize("bad", ["abc", "ab$=", "-_8=", "é", "YQ==YQ=="])
def test_base64_decode_malformed(bad):
    with pytest.raises(EncodingError, match="malformed base64"):
        codec.base64_decode(bad)


@pytest.mark.parametrize(
    "value",
    [
        "ENC(abc=)",
        "ENC(cLqUafMcfzJOt3FyOLmIAqwVJJAoXj3o3h3cZrM4EIo=)",
        "ENC(lalala)",
        "  ENC(abc=)\n",
        "ENC()",
    ],
)
def test_is_marked_true(value):
    assert codec.is_marked(value)


@pytest.mark.parametrize(
    "value",
    ["plain text", "", "   ", "ENC(", "ENC)", "ENC(abc", "enc(abc)", "xENC(abc)", None, b"ENC(abc)"],
)
def test_is_marked_false(value):
    assert not codec.is_marked(value)


def test_is_marked_trims_unicode_whitespace():
    assert codec.is_marked("\x1cENC(abc=)\u3000")
    assert codec.unmark("\x1fENC(abc=)\x1c") == "abc="


def test_unmark():
    es = "ENC(cLqUafMcfzJOt3FyOLmIAqwVJJAoXj3o3h3cZrM4EIo=)"
    assert codec.unmark(es) == "cLqUafMcfzJOt3FyOLmIAqwVJJAoXj3o3h3cZrM4EIo="
    assert codec.unmark("ENC(lalala)") == "lalala"


def test_unmark_ignores_outer_whitespace_only():
    assert codec.unmark("  ENC(abc=)  ") == "abc="
    assert codec.unmark("ENC( ab )") == " ab "


@pytest.mark.parametrize("value", ["plain text", "", "ENC(", "ENC(abc"])
def test_unmark_requires_marked_value(value):
    with pytest.raises(FormatError):
        codec.unmark(value)


def test_mark():
    assert codec.mark("abc=") == "ENC(abc=)"


def test_encode_and_decode_marked():
    marked = codec.encode_marked(b"\x00\x01binary\xff")
    assert marked.startswith("ENC(") and marked.endswith(")")
    assert codec.decode_marked(marked) == b"\x00\x01binary\xff"


def test_decode_marked_errors():
    with pytest.raises(FormatError):
        codec.decode_marked("abc=")
    with pytest.raises(EncodingError):
        codec.decode_marked("ENC(not base64!)")
