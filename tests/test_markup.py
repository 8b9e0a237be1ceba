"""Tests for gmldocs.utils.markup."""

import pytest

from gmldocs.utils.markup import (
    PageStructureError,
    children_of,
    clear_line_terminators,
    content_following,
    first_text,
    is_text,
    load_page,
    text_of,
)


class TestFirstText:
    def test_descends_through_inline_tags(self) -> None:
        soup = load_page("<h3><b><i>Syntax</i></b>:</h3>")
        assert text_of(soup.h3) == "Syntax"

    def test_text_node_is_returned_as_is(self) -> None:
        soup = load_page("<p>plain</p>")
        node = soup.p.contents[0]
        assert first_text(node) is node

    def test_empty_element_is_not_found(self) -> None:
        soup = load_page("<p><br/>after</p>")
        assert first_text(soup.p) is None
        assert text_of(soup.p) == ""

    def test_comments_are_not_text(self) -> None:
        soup = load_page("<p><!-- hidden --></p>")
        assert not is_text(soup.p.contents[0])
        assert first_text(soup.p) is None

    def test_none_is_not_found(self) -> None:
        assert first_text(None) is None


class TestLoadPage:
    def test_collapses_whitespace_runs(self) -> None:
        soup = load_page("<p>draw_sprite(\n     sprite,\tsubimg)</p>")
        assert text_of(soup.p) == "draw_sprite( sprite, subimg)"

    def test_keeps_whitespace_nodes_between_blocks(self) -> None:
        soup = load_page("<h3>Syntax</h3>\n\n<p>x</p>")
        assert str(soup.h3.next_sibling) == " "


class TestContentFollowing:
    def test_two_hops_skip_the_whitespace_node(self) -> None:
        soup = load_page("<h3>Syntax</h3>\n<p>x</p>\n<p>y</p>")
        assert content_following(soup.h3, 2).name == "p"
        assert text_of(content_following(soup.h3, 4)) == "y"

    def test_running_off_the_page_raises(self) -> None:
        soup = load_page("<div><h3>Example</h3>\n<p>x</p></div>")
        with pytest.raises(PageStructureError):
            content_following(soup.h3, 4)


class TestChildrenOf:
    def test_lists_element_children(self) -> None:
        soup = load_page("<p>a<b>b</b></p>")
        assert len(children_of(soup.p)) == 2

    def test_text_node_has_no_children(self) -> None:
        soup = load_page("<p>a</p>")
        with pytest.raises(PageStructureError):
            children_of(soup.p.contents[0])


class TestClearLineTerminators:
    def test_each_terminator_becomes_one_space(self) -> None:
        assert clear_line_terminators("a\r\nb\nc\rd") == "a b c d"

    def test_idempotent(self) -> None:
        once = clear_line_terminators("a\nb")
        assert clear_line_terminators(once) == once
