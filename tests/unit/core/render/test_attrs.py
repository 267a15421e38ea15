"""Unit tests for core/render/attrs.py"""

import pytest
from markdown_it import MarkdownIt

from mdrender.core.render.attrs import attrs_plugin, parse_attributes


@pytest.fixture(name="md")
def md_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False}).use(attrs_plugin)


@pytest.mark.parametrize("body,expected", [
    ('.a .b #x', [("class", "a"), ("class", "b"), ("id", "x")]),
    ('k=v t="hello world" flag', [("k", "v"), ("t", "hello world"), ("flag", "")]),
    ('color "red"', [("color", "red")]),
    ('.a,.b, data-x=1', [("class", "a"), ("class", "b"), ("data-x", "1")]),
    ('', []),
])
def test_parse_attributes(body, expected):
    """Attribute entries parse into ordered (name, value) pairs."""
    assert parse_attributes(body) == expected


def test_heading_attributes(md):
    """A trailing block on a heading sets id and class on the <h> tag."""
    html = md.render("# Title {:#intro .lead}\n")
    assert 'id="intro"' in html
    assert 'class="lead"' in html
    assert ">Title</h1>" in html


def test_paragraph_attributes(md):
    """A trailing block on a paragraph annotates the <p>."""
    assert md.render("Para text {:.note}\n") == '<p class="note">Para text</p>\n'


def test_paragraph_attributes_on_own_line(md):
    """A block on the last line of a paragraph annotates that paragraph."""
    assert md.render("Para text\n{:.note}\n") == '<p class="note">Para text</p>\n'


def test_table_attributes_from_following_paragraph(md):
    """A standalone block after a table annotates the table and is dropped."""
    html = md.render("| a | b |\n|---|---|\n| 1 | 2 |\n\n{:.data}\n")
    assert '<table class="data">' in html
    assert "{:" not in html


def test_blockquote_attributes(md):
    """A standalone block after a blockquote annotates the blockquote."""
    html = md.render("> quoted\n\n{:.q}\n")
    assert html.startswith('<blockquote class="q">')
    assert "{:" not in html


def test_fence_attributes(md):
    """A standalone block after a fence annotates the code element."""
    html = md.render("```\ncode\n```\n\n{:.c}\n")
    assert '<code class="c">' in html


def test_tight_list_item_attributes(md):
    """In a tight list the block annotates the list item."""
    html = md.render("- one {:.x}\n- two\n")
    assert '<li class="x">one</li>' in html


def test_leading_block_stays_literal(md):
    """A block with nothing before it to annotate renders as text."""
    assert md.render("{:.x}\n") == "<p>{:.x}</p>\n"


@pytest.mark.parametrize("md_text,expected", [
    ("Para {:.a} text {:.b}\n", '<p class="a">Para text {:.b}</p>\n'),
    ("Para {:.a} {:.b}\n", '<p class="a">Para {:.b}</p>\n'),
])
def test_only_first_block_on_line_is_applied(md, md_text, expected):
    """Of several blocks on the final line, only the first is honored."""
    assert md.render(md_text) == expected


def test_mid_line_block_without_trailing_block_is_text(md):
    """A block followed by text, with none ending the line, stays literal."""
    assert md.render("Para {:.a} text\n") == "<p>Para {:.a} text</p>\n"


def test_inline_element_attributes(md):
    """A block right after emphasis or a link annotates that element, not the paragraph."""
    html = md.render("Some *em*{:.c} and [link](http://x){:.d}\n")
    assert html == '<p>Some <em class="c">em</em> and <a href="http://x" class="d">link</a></p>\n'


def test_inline_code_and_image_attributes(md):
    """Code spans and images take a directly following block."""
    html = md.render("Run `ls`{:.cmd} ![logo](logo.png){:width=20}\n")
    assert '<code class="cmd">ls</code>' in html
    assert 'width="20"' in html
    assert "{:" not in html


def test_strong_attributes_mid_paragraph_keep_paragraph_plain(md):
    """An inline block does not also annotate the enclosing paragraph."""
    html = md.render("**bold**{:#b} rest of line\n")
    assert html == '<p><strong id="b">bold</strong> rest of line</p>\n'


def test_table_cell_attributes(md):
    """A block ending a header or body cell annotates that cell."""
    html = md.render("| a {:.x} | b |\n|---|---|\n| 1 | 2 {:.y} |\n")
    assert '<th class="x">a</th>' in html
    assert '<td class="y">2</td>' in html
    assert "{:" not in html
