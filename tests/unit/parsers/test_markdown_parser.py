#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_markdown_parser.py
"""Unit tests for the Markdown to AST parser."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from markrun.ast import (
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    InlineCode,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    UnorderedList,
    extract_text,
    list_depth,
)
from markrun.exceptions import ParsingError
from markrun.options import MarkdownParserOptions
from markrun.parsers.markdown import MarkdownToAstConverter


def _parse(markdown, options=None):
    return MarkdownToAstConverter(options).parse(markdown)


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level tokens."""

    def test_heading_and_paragraph(self):
        """Test a heading followed by a paragraph with strong text."""
        doc = _parse("## Title\n\nHello **world**")

        assert isinstance(doc, Document)
        heading, para = doc.children
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert extract_text(heading) == "Title"
        assert isinstance(para, Paragraph)
        assert isinstance(para.children[0], Text)
        assert para.children[0].content == "Hello "
        assert isinstance(para.children[1], Strong)
        assert para.parent is doc
        assert para.index_in_parent == 1

    def test_blank_lines_are_dropped(self):
        """Test blank lines between blocks do not become nodes."""
        doc = _parse("first\n\n\n\nsecond\n")
        assert [type(child) for child in doc.children] == [Paragraph, Paragraph]

    def test_fenced_code_block(self):
        """Test code text and language come from the fence."""
        doc = _parse("```python extra\nprint(1)\n```\n")
        block = doc.children[0]
        assert isinstance(block, CodeBlock)
        assert block.code == "print(1)\n"
        assert block.language == "python"

    def test_code_block_without_language(self):
        """Test a fence without an info string has no language."""
        block = _parse("```\nx\n```\n").children[0]
        assert isinstance(block, CodeBlock)
        assert block.language is None

    def test_block_quote(self):
        """Test block quotes contain block children."""
        quote = _parse("> quoted *text*").children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)
        assert isinstance(quote.children[0].children[1], Emphasis)

    def test_thematic_break(self):
        """Test horizontal rules."""
        doc = _parse("a\n\n***\n\nb")
        assert [type(child) for child in doc.children] == [Paragraph, ThematicBreak, Paragraph]

    def test_html_block(self):
        """Test raw HTML blocks keep their source."""
        block = _parse("<div>hi</div>\n").children[0]
        assert isinstance(block, HTMLBlock)
        assert "<div>" in block.html


@pytest.mark.unit
class TestLists:
    """Tests for list tokens."""

    def test_unordered_list(self):
        """Test bullet items become ListItems holding paragraphs."""
        lst = _parse("- one\n- two\n").children[0]
        assert isinstance(lst, UnorderedList)
        assert len(lst.list_items) == 2
        assert all(isinstance(item.children[0], Paragraph) for item in lst.list_items)
        assert [extract_text(item) for item in lst.list_items] == ["one", "two"]

    def test_ordered_list_start(self):
        """Test ordered lists keep their start number."""
        lst = _parse("3. a\n4. b\n").children[0]
        assert isinstance(lst, OrderedList)
        assert lst.start == 3
        assert lst.child_count == 2

    def test_ordered_list_default_start(self):
        """Test an ordered list starting at one."""
        lst = _parse("1. a\n2. b\n").children[0]
        assert isinstance(lst, OrderedList)
        assert lst.start == 1

    def test_nested_list(self):
        """Test a nested list sits inside the item and one level deeper."""
        doc = _parse("- outer\n  - inner\n")
        outer = doc.children[0]
        item = outer.list_items[0]
        nested = item.children[1]

        assert isinstance(nested, UnorderedList)
        assert list_depth(outer) == 0
        assert list_depth(nested) == 1
        assert extract_text(nested) == "inner"

    def test_task_list(self):
        """Test task list items record their checkbox state."""
        lst = _parse("- [x] done\n- [ ] todo\n- plain\n").children[0]
        assert [item.checkbox for item in lst.list_items] == ["checked", "unchecked", None]
        assert extract_text(lst.list_items[0]) == "done"

    def test_task_lists_disabled(self):
        """Test task list markers stay literal when the plugin is off."""
        lst = _parse("- [x] done\n", MarkdownParserOptions(parse_task_lists=False)).children[0]
        item = lst.list_items[0]
        assert isinstance(item, ListItem)
        assert item.checkbox is None
        assert "done" in extract_text(item)
        assert extract_text(item) != "done"


@pytest.mark.unit
class TestInline:
    """Tests for inline tokens."""

    def test_emphasis_strong_code(self):
        """Test emphasis, strong and code spans."""
        para = _parse("*a* **b** `c`").children[0]
        kinds = [type(child) for child in para.children]
        assert Emphasis in kinds
        assert Strong in kinds
        code = next(child for child in para.children if isinstance(child, InlineCode))
        assert code.code == "c"

    def test_link(self):
        """Test link destination, title and text."""
        para = _parse('[site](https://example.com "Example")').children[0]
        link = para.children[0]
        assert isinstance(link, Link)
        assert link.destination == "https://example.com"
        assert link.title == "Example"
        assert extract_text(link) == "site"

    def test_image(self):
        """Test images keep alt text as children."""
        para = _parse("![alt text](img.png)").children[0]
        image = para.children[0]
        assert isinstance(image, Image)
        assert image.source == "img.png"
        assert extract_text(image) == "alt text"

    def test_strikethrough(self):
        """Test strikethrough spans."""
        para = _parse("~~gone~~").children[0]
        assert isinstance(para.children[0], Strikethrough)
        assert extract_text(para) == "gone"

    def test_strikethrough_disabled(self):
        """Test tildes stay literal when the plugin is off."""
        para = _parse("~~gone~~", MarkdownParserOptions(parse_strikethrough=False)).children[0]
        assert not any(isinstance(child, Strikethrough) for child in para.children)
        assert "~~" in extract_text(para)

    def test_soft_break_becomes_space(self):
        """Test a soft line break keeps the words on either side apart."""
        para = _parse("Hello\nworld").children[0]
        assert [child.content for child in para.children] == ["Hello", " ", "world"]
        assert all(isinstance(child, Text) for child in para.children)

    def test_hard_break_becomes_newline(self):
        """Test a hard line break becomes a literal newline."""
        para = _parse("a  \nb").children[0]
        assert extract_text(para) == "a\nb"


@pytest.mark.unit
class TestInputs:
    """Tests for the accepted input types and decoding."""

    def test_str_is_content_not_path(self, tmp_path):
        """Test a string is parsed as Markdown even if it names a file."""
        path = tmp_path / "doc.md"
        path.write_text("# From file", encoding="utf-8")
        doc = _parse(str(path))
        assert isinstance(doc.children[0], Paragraph)

    def test_path(self, tmp_path):
        """Test reading from a Path."""
        path = tmp_path / "doc.md"
        path.write_text("# From file", encoding="utf-8")
        doc = _parse(path)
        assert isinstance(doc.children[0], Heading)

    def test_bytes_and_streams(self):
        """Test bytes, binary streams and text streams."""
        for source in (b"# T", BytesIO(b"# T"), StringIO("# T")):
            doc = _parse(source)
            assert extract_text(doc.children[0]) == "T"

    def test_custom_encoding(self):
        """Test the encoding option is used for bytes."""
        doc = _parse("café".encode("latin-1"), MarkdownParserOptions(encoding="latin-1"))
        assert extract_text(doc) == "café"

    def test_undecodable_bytes(self):
        """Test invalid bytes raise ParsingError at the decoding stage."""
        with pytest.raises(ParsingError) as exc_info:
            _parse(b"\xff\xfe\xfa")
        assert exc_info.value.parsing_stage == "decoding"

    def test_missing_file(self, tmp_path):
        """Test a missing path raises ParsingError at the input stage."""
        with pytest.raises(ParsingError) as exc_info:
            _parse(Path(tmp_path / "missing.md"))
        assert exc_info.value.parsing_stage == "input"

    def test_empty_input(self):
        """Test empty input yields an empty document."""
        assert _parse("").children == []
