"""Tests for the decoder."""

import logging

import pytest

from frontmatter_core import decode, DecodeError
from frontmatter_core.decoder import DecodeState, SourceLine, scan_lines, split_pair, step
from frontmatter_core.values import Null, VBool, VList, VMapping, VNumber, VText


SAMPLE = """
  title: Trivial
  video_img: preview.jpg
  performers:
    - name: Yann Andre
      image: yann.webp
"""


# ---------------------------------------------------------------------------
# scan_lines / split_pair
# ---------------------------------------------------------------------------

def test_scan_lines_indent_and_content():
    lines = scan_lines("a: 1\n    - x")
    assert [(l.number, l.indent, l.content) for l in lines] == [(1, 0, "a: 1"), (2, 4, "- x")]

def test_scan_lines_crlf():
    lines = scan_lines("a: 1\r\nb: 2")
    assert [l.content for l in lines] == ["a: 1", "b: 2"]

def test_scan_lines_whitespace_only_line():
    line = scan_lines("   ")[0]
    assert line.indent == 3
    assert line.skippable

def test_comment_is_skippable():
    assert scan_lines("  # note")[0].skippable

def test_split_pair_first_colon():
    assert split_pair("url: https://x.io:8080") == ("url", "https://x.io:8080")

def test_split_pair_no_colon():
    assert split_pair("plain") is None


# ---------------------------------------------------------------------------
# step / DecodeState transitions
# ---------------------------------------------------------------------------

def test_step_header_opens_list():
    state = DecodeState()
    assert step(state, scan_lines("tags:"), 0) == 1
    assert state.current_key == "tags"
    assert state.entries["tags"] == VList([])

def test_step_scalar_clears_current_key():
    state = DecodeState(current_key="tags")
    step(state, scan_lines("title: x"), 0)
    assert state.current_key is None
    assert state.entries["title"] == VText("x")

def test_step_inline_object_consumes_continuation():
    state = DecodeState()
    state.open_list("people")
    lines = scan_lines("  - name: A\n    image: a.png\n  - name: B")
    assert step(state, lines, 0) == 2

def test_step_skips_blank_line():
    state = DecodeState(current_key="tags")
    assert step(state, [SourceLine(1, 0, "", "")], 0) == 1
    assert state.current_key == "tags"

def test_append_item_without_header():
    assert DecodeState().append_item(VText("x")) is False


# ---------------------------------------------------------------------------
# decode
# ---------------------------------------------------------------------------

def test_empty_input():
    assert len(decode("")) == 0

def test_single_scalar():
    doc = decode("title: Trivial")
    assert doc["title"] == VText("Trivial")

def test_sample_document():
    doc = decode(SAMPLE)
    assert doc["title"] == VText("Trivial")
    assert doc["video_img"] == VText("preview.jpg")
    assert doc["performers"] == VList([
        VMapping({"name": VText("Yann Andre"), "image": VText("yann.webp")}),
    ])

def test_typed_scalars():
    doc = decode("a: true\nb: false\nc: null\nd: 12\ne: 1.5")
    assert doc["a"] == VBool(True)
    assert doc["b"] == VBool(False)
    assert doc["c"] is Null
    assert doc["d"] == VNumber(12)
    assert doc["e"] == VNumber(1.5)

def test_primitive_list():
    doc = decode("tags:\n  - one\n  - 2\n  - true")
    assert doc["tags"] == VList([VText("one"), VNumber(2), VBool(True)])

def test_header_with_no_items_is_empty_list():
    doc = decode("tags:\ntitle: x")
    assert doc["tags"] == VList([])

def test_consecutive_inline_objects():
    text = (
        "performers:\n"
        "  - name: A\n"
        "    image: a.webp\n"
        "  - name: B\n"
        "    image: b.webp\n"
    )
    doc = decode(text)
    assert doc["performers"] == VList([
        VMapping({"name": VText("A"), "image": VText("a.webp")}),
        VMapping({"name": VText("B"), "image": VText("b.webp")}),
    ])

def test_repeated_header_replaces_list():
    doc = decode("tags:\n  - a\ntags:\n  - b")
    assert doc["tags"] == VList([VText("b")])

def test_repeated_scalar_key_overwrites():
    doc = decode("title: a\ntitle: b")
    assert doc["title"] == VText("b")

def test_values_keep_colons():
    doc = decode("time: 12:30:00\nurl: https://example.com/a")
    assert doc["time"] == VText("12:30:00")
    assert doc["url"] == VText("https://example.com/a")

def test_comments_and_blank_lines_skipped():
    doc = decode("# header comment\n\ntags:\n  # inside\n  - a\n\n  - b")
    assert doc["tags"] == VList([VText("a"), VText("b")])

def test_orphan_list_item_dropped():
    doc = decode("- lonely\ntitle: x")
    assert list(doc) == ["title"]

def test_item_after_scalar_key_dropped():
    doc = decode("tags:\n  - a\ntitle: x\n  - b")
    assert doc["tags"] == VList([VText("a")])

def test_item_with_bracket_is_primitive():
    doc = decode("items:\n  - key: [a, b]\n  - {k: v}")
    assert doc["items"] == VList([VText("key: [a, b]"), VText("{k: v}")])

@pytest.mark.parametrize("body", [":x", ": value", "a:"])
def test_item_not_simple_key_is_primitive(body):
    doc = decode(f"items:\n  - {body}")
    assert doc["items"] == VList([VText(body)])

def test_item_key_without_space_after_colon():
    doc = decode("items:\n  - name:Joe")
    assert doc["items"] == VList([VMapping({"name": VText("Joe")})])

def test_continuation_value_coerced():
    doc = decode("p:\n  - name: A\n    age: 30\n    active: true")
    assert doc["p"].items[0] == VMapping({"name": VText("A"), "age": VNumber(30), "active": VBool(True)})

def test_blank_line_ends_inline_object():
    doc = decode("p:\n  - name: A\n\n    image: a.png")
    assert doc["p"] == VList([VMapping({"name": VText("A")})])
    assert doc["image"] == VText("a.png")

def test_comment_inside_inline_object():
    doc = decode("p:\n  - name: A\n    # photo\n    image: a.png")
    assert doc["p"] == VList([VMapping({"name": VText("A"), "image": VText("a.png")})])

def test_malformed_line_skipped():
    doc = decode("title: x\njust some words\ntags:\n  - a")
    assert doc.to_python() == {"title": "x", "tags": ["a"]}

def test_malformed_line_keeps_current_key():
    doc = decode("tags:\nnot a pair\n  - a")
    assert doc["tags"] == VList([VText("a")])

def test_empty_key_skipped():
    doc = decode(": value\ntitle: x")
    assert list(doc) == ["title"]

def test_keys_are_trimmed():
    doc = decode("   title   :   spaced out   ")
    assert doc["title"] == VText("spaced out")

def test_skipped_lines_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="frontmatter_core.decoder"):
        decode("- orphan")
    assert "list item without a list header" in caplog.text

def test_decodes_are_independent():
    first = decode("tags:\n  - a")
    second = decode("tags:\n  - a")
    first["tags"].items.append(VText("b"))
    assert second["tags"] == VList([VText("a")])


# ---------------------------------------------------------------------------
# Strict mode
# ---------------------------------------------------------------------------

class TestStrict:
    def test_valid_input_same_as_lenient(self):
        assert decode(SAMPLE, strict=True) == decode(SAMPLE)

    def test_orphan_item(self):
        with pytest.raises(DecodeError) as exc_info:
            decode("title: x\n- lonely", strict=True)
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "- lonely"

    def test_line_without_colon(self):
        with pytest.raises(DecodeError, match="line 1"):
            decode("nonsense", strict=True)

    def test_empty_key(self):
        with pytest.raises(DecodeError):
            decode(": x", strict=True)

    def test_bad_continuation(self):
        with pytest.raises(DecodeError) as exc_info:
            decode("p:\n  - name: A\n    broken", strict=True)
        assert exc_info.value.line_number == 3


# ---------------------------------------------------------------------------
# Oversized numbers
# ---------------------------------------------------------------------------

def test_long_integer_value():
    doc = decode("serial: " + "1" * 5000)
    assert doc["serial"].value == int("1" * 4000) * 10 ** 1000 + int("1" * 1000)

def test_long_integer_list_item():
    doc = decode("tags:\n  - " + "9" * 5000)
    assert doc["tags"].items[0].value == 10 ** 5000 - 1
