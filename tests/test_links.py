"""Tests for wiki link parsing."""

from notomattic.core.links import iter_wiki_links, parse_wiki_links


def test_parse_plain_and_piped():
    """Test target extraction for both link forms."""
    assert parse_wiki_links("[[A]] and [[B|c-d]]") == ["A", "c-d"]


def test_parse_empty_links_ignored():
    """Test that empty and unterminated links yield nothing."""
    assert parse_wiki_links("[[]]") == []
    assert parse_wiki_links("[[|]]") == []
    assert parse_wiki_links("[[|target]]") == []
    assert parse_wiki_links("[[display|]]") == []
    assert parse_wiki_links("unterminated [[foo") == []
    assert parse_wiki_links("[[foo]") == []


def test_parse_keeps_order_and_duplicates():
    """Test left-to-right order with no deduplication."""
    text = "[[b]] then [[a]] then [[b]]"
    assert parse_wiki_links(text) == ["b", "a", "b"]


def test_parse_preserves_whitespace():
    """Test that link text is returned as written."""
    assert parse_wiki_links("[[ Spaced Out ]]") == [" Spaced Out "]


def test_parse_second_pipe_belongs_to_target():
    """Test that only the first pipe separates display text."""
    assert parse_wiki_links("[[a|b|c]]") == ["b|c"]


def test_parse_no_closing_bracket_inside():
    """Test that a stray ] stops a link."""
    assert parse_wiki_links("[[a]b]] [[ok]]") == ["ok"]


def test_parse_multiline():
    """Test links spread across lines."""
    text = "# Title\n\nSee [[Meeting Notes]].\n- [[2024-01-01]]\n"
    assert parse_wiki_links(text) == ["Meeting Notes", "2024-01-01"]


def test_iter_is_lazy():
    """Test the generator form yields the same targets."""
    it = iter_wiki_links("[[x]] [[y|z]]")
    assert next(it) == "x"
    assert list(it) == ["z"]


def test_parse_result_is_reusable():
    """Test that the list result can be iterated more than once."""
    links = parse_wiki_links("[[x]] [[y]]")
    assert list(links) == list(links) == ["x", "y"]
