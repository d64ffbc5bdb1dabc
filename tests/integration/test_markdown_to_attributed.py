#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_markdown_to_attributed.py
"""Integration tests for Markdown text to attributed runs."""

import pytest

from markrun import markdown_to_attributed, parse_markdown, render_attributed
from markrun.attributed import AttributeKey
from markrun.options import AttributedRendererOptions, MarkdownParserOptions
from markrun.styling.fonts import NamedColor

README_SAMPLE = """\
# markrun

Render **Markdown** into *attributed* runs.

- Parse with `mistune`
- Lay out lists
  1. numbered
  2. aligned

> Quotes link to [docs](https://example.com/docs) in gray.

```python
print("hi")
```

Done.
"""


@pytest.mark.integration
class TestMarkdownToAttributed:
    """Tests that run the parser and renderer together."""

    def test_heading_and_paragraph(self, fake_backend):
        """Test the heading and paragraph example end to end."""
        result = markdown_to_attributed("## Title\n\nHello **world**", backend=fake_backend)

        assert [run.text for run in result] == ["Title", "\n\n", "Hello ", "world"]
        assert result.runs[0].font.size == 24.0
        assert result.runs[0].font.bold
        assert result.runs[3].font.bold
        assert result.runs[3].font.size == 15.0

    def test_nested_lists(self, fake_backend):
        """Test nested bullets from Markdown source get deeper margins."""
        result = markdown_to_attributed("- first\n- second\n  - inner\n\nafter\n", backend=fake_backend)

        assert result.text == "\t•\tfirst\n\t•\tsecond\n\t•\tinner\n\nafter"
        markers = [run for run in result if run.text == "\t•\t"]
        assert [run.get(AttributeKey.NESTING_DEPTH) for run in markers] == [0, 0, 1]
        head_indents = [run.get(AttributeKey.PARAGRAPH_STYLE).head_indent for run in markers]
        assert head_indents == [31.0, 31.0, 51.0]

    def test_ordered_list_alignment(self, fake_backend):
        """Test a ten-item list sizes every marker column for "10."."""
        source = "".join(f"{i}. item {i}\n" for i in range(1, 11))
        result = markdown_to_attributed(source, backend=fake_backend)

        markers = [run for run in result if run.get(AttributeKey.PARAGRAPH_STYLE) is not None]
        assert [run.text for run in markers] == [f"\t{i}.\t" for i in range(1, 11)]
        assert len({run.get(AttributeKey.PARAGRAPH_STYLE) for run in markers}) == 1

    def test_full_document(self, fake_backend):
        """Test a document mixing every styled block kind."""
        result = markdown_to_attributed(README_SAMPLE, backend=fake_backend)

        assert result.text.startswith("markrun\n\nRender Markdown into attributed runs.\n\n")
        assert result.text.endswith('print("hi")\n\nDone.')
        assert "\t1.\tnumbered\n\t2.\taligned" in result.text

        link_runs = [run for run in result if run.get(AttributeKey.LINK)]
        assert [run.text for run in link_runs] == ["docs"]
        assert link_runs[0].get(AttributeKey.FOREGROUND_COLOR) is NamedColor.GRAY

        code_runs = [run for run in result if run.font is not None and run.font.monospaced]
        assert [run.text for run in code_runs] == ["mistune", 'print("hi")\n']

    def test_line_breaks_keep_words_apart(self, fake_backend):
        """Test soft and hard breaks render as a space and a newline."""
        assert markdown_to_attributed("Hello\nworld", backend=fake_backend).text == "Hello world"
        assert markdown_to_attributed("Hello  \nworld", backend=fake_backend).text == "Hello\nworld"

    def test_parse_then_render(self, fake_backend):
        """Test the two-step API matches the one-step API."""
        doc = parse_markdown("Some *text* with ~~strike~~")
        assert render_attributed(doc, backend=fake_backend) == markdown_to_attributed(
            "Some *text* with ~~strike~~", backend=fake_backend
        )

    def test_options_flow_through(self, fake_backend):
        """Test parser and renderer options are both applied."""
        result = markdown_to_attributed(
            "[x](javascript:alert(1)) ~~y~~",
            parser_options=MarkdownParserOptions(parse_strikethrough=False),
            renderer_options=AttributedRendererOptions(drop_unsafe_links=True),
            backend=fake_backend,
        )
        assert not any(run.get(AttributeKey.LINK) for run in result)
        assert not any(run.get(AttributeKey.STRIKETHROUGH) for run in result)
        assert "~~y~~" in result.text

    def test_reportlab_backend(self):
        """Test the default backend resolves real font faces."""
        result = markdown_to_attributed("# Big\n\n*it* **bold** `code`")

        faces = {run.text: run.font.face for run in result}
        assert faces["Big"] == "Helvetica-Bold"
        assert faces["it"] == "Helvetica-Oblique"
        assert faces["bold"] == "Helvetica-Bold"
        assert faces["code"] == "Courier"
        assert result.runs[0].font.size == 26.0

    def test_reportlab_list_geometry(self):
        """Test list tab stops with real measurements are whole points past the margin."""
        result = markdown_to_attributed("- a\n- b")
        style = result.runs[0].get(AttributeKey.PARAGRAPH_STYLE)
        first, second = style.tab_stops

        assert first.location > 15.0
        assert float(first.location - 15.0).is_integer()
        assert second.location == first.location + 8.0
        assert style.head_indent == second.location
