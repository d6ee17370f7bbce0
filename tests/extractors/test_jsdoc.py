"""Tests for the doc comment locator."""

from __future__ import annotations

from wfcdocs.extractors.jsdoc import find_doc_comment


def test_multiline_block_directly_above_is_attached() -> None:
    lines = ["    /**", "     * Gets the user id.", "     */", "    getUserId() {"]

    assert find_doc_comment(lines, 3) == "/**\n     * Gets the user id.\n     */"


def test_single_line_block_is_attached() -> None:
    lines = ["/** Gets the user id. */", "getUserId(userId) {"]

    assert find_doc_comment(lines, 1) == "/** Gets the user id. */"


def test_blank_line_breaks_attachment() -> None:
    lines = ["/** Gets the user id. */", "", "getUserId(userId) {"]

    assert find_doc_comment(lines, 2) is None


def test_line_comment_is_not_a_doc_block() -> None:
    lines = ["// Gets the user id.", "getUserId(userId) {"]

    assert find_doc_comment(lines, 1) is None


def test_plain_block_comment_without_opening_marker_is_ignored() -> None:
    lines = ["/* not jsdoc */", "getUserId(userId) {"]

    assert find_doc_comment(lines, 1) is None


def test_unterminated_walk_returns_none() -> None:
    lines = ["   still a comment tail */", "getUserId(userId) {"]

    assert find_doc_comment(lines, 1) is None


def test_first_line_has_no_comment() -> None:
    assert find_doc_comment(["getUserId(userId) {"], 0) is None
