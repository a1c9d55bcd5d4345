"""Tests for converter/block_builder.py: node to block mapping and warnings."""

import pytest

from feishuify.blocks import (
    BulletBlock,
    CodeBlock,
    DividerBlock,
    HeadingBlock,
    Link,
    OrderedBlock,
    QuoteBlock,
    TextBlock,
    TextRun,
    TextStyle,
)
from feishuify.converter.block_builder import build_blocks
from feishuify.converter.nodes import (
    Code,
    Divider,
    Heading,
    List,
    ListItem,
    Paragraph,
    Quote,
    Table,
)


def _codes(warnings):
    return [w.code for w in warnings]


class TestHeadings:
    @pytest.mark.parametrize("level, block_type", [(1, 3), (2, 4), (3, 5)])
    def test_levels_one_to_three(self, level, block_type):
        blocks, warnings = build_blocks([Heading(level=level, content="Title")])
        assert len(blocks) == 1
        assert isinstance(blocks[0], HeadingBlock)
        assert blocks[0].block_type == block_type
        assert blocks[0].to_dict() == {
            "block_type": block_type,
            f"heading{level}": {"elements": [{"text_run": {"content": "Title"}}]},
        }
        assert warnings == []

    def test_heading_inline_styled(self):
        blocks, _ = build_blocks([Heading(level=1, content="A **b**")])
        assert blocks[0].elements == [TextRun("A "), TextRun("b", style=TextStyle(bold=True))]

    @pytest.mark.parametrize("level", [4, 5, 6])
    def test_deep_heading_becomes_bold_text(self, level):
        blocks, warnings = build_blocks([Heading(level=level, content="Deep [x](u)")])
        assert blocks == [
            TextBlock(elements=[TextRun("Deep [x](u)", style=TextStyle(bold=True))]),
        ]
        assert _codes(warnings) == ["HEADING_DEGRADED"]
        assert warnings[0].context == {"level": level}


class TestParagraphAndQuote:
    def test_paragraph(self):
        blocks, warnings = build_blocks([Paragraph(content="hello")])
        assert blocks == [TextBlock(elements=[TextRun("hello")])]
        assert warnings == []

    def test_quote_with_link(self):
        blocks, _ = build_blocks([Quote(content="see\n[docs](https://d)")])
        assert blocks == [
            QuoteBlock(elements=[TextRun("see\n"), Link(url="https://d", content="docs")]),
        ]
        assert blocks[0].to_dict()["block_type"] == 15


class TestCode:
    def test_known_language(self):
        blocks, warnings = build_blocks([Code(language="python", content="x = 1")])
        assert blocks == [CodeBlock(elements=[TextRun("x = 1")], language=76)]
        assert warnings == []

    def test_no_language(self):
        blocks, warnings = build_blocks([Code(language=None, content="x")])
        assert blocks[0].to_dict() == {
            "block_type": 14,
            "code": {
                "elements": [{"text_run": {"content": "x"}}],
                "style": {"language": 0},
            },
        }
        assert warnings == []

    def test_unknown_language_warns(self):
        blocks, warnings = build_blocks([Code(language="zzzzz", content="x")])
        assert blocks[0].language == 0
        assert _codes(warnings) == ["UNKNOWN_LANGUAGE"]
        assert warnings[0].context == {"language": "zzzzz"}

    def test_content_verbatim(self):
        content = "**not bold** [not](link)\n  indented"
        blocks, _ = build_blocks([Code(language="md", content=content)])
        assert blocks[0].elements == [TextRun(content)]


class TestDividerAndList:
    def test_divider(self):
        blocks, _ = build_blocks([Divider()])
        assert blocks == [DividerBlock()]
        assert blocks[0].to_dict() == {"block_type": 22, "divider": {}}

    def test_bullet_list_one_block(self):
        node = List(ordered=False, items=[ListItem("a"), ListItem("b")])
        blocks, _ = build_blocks([node])
        assert blocks == [BulletBlock(elements=[TextRun("a"), TextRun("b")])]

    def test_ordered_list(self):
        node = List(ordered=True, items=[ListItem("one")])
        blocks, _ = build_blocks([node])
        assert blocks == [OrderedBlock(elements=[TextRun("one")])]
        assert blocks[0].block_type == 13

    def test_list_items_not_styled(self):
        node = List(ordered=False, items=[ListItem("**b** [l](u)")])
        blocks, _ = build_blocks([node])
        assert blocks[0].elements == [TextRun("**b** [l](u)")]


class TestTables:
    def test_table_rendered_as_plaintext_code(self):
        blocks, warnings = build_blocks([Table(rows=[["A", "BB"], ["1", "22"]])])
        assert blocks == [
            CodeBlock(
                elements=[TextRun("+---+----+\n| A | BB |\n+---+----+\n| 1 | 22 |\n+---+----+")],
                language=0,
            ),
        ]
        assert _codes(warnings) == ["TABLE_AS_CODE"]
        assert warnings[0].context == {"rows": 2, "columns": 2}

    @pytest.mark.parametrize("rows", [[], [["only"]]])
    def test_short_table_dropped(self, rows):
        blocks, warnings = build_blocks([Table(rows=rows)])
        assert blocks == []
        assert _codes(warnings) == ["TABLE_DROPPED"]
        assert warnings[0].context == {"rows": len(rows)}


class TestOrdering:
    def test_one_block_per_node_in_order(self):
        nodes = [
            Heading(level=1, content="T"),
            Paragraph(content="p"),
            Divider(),
            Quote(content="q"),
            Code(language="js", content="c"),
            List(ordered=True, items=[ListItem("i")]),
        ]
        blocks, _ = build_blocks(nodes)
        assert [b.block_type for b in blocks] == [3, 2, 22, 15, 14, 13]

    def test_unknown_node_skipped_with_warning(self):
        blocks, warnings = build_blocks([object(), Paragraph(content="p")])
        assert blocks == [TextBlock(elements=[TextRun("p")])]
        assert _codes(warnings) == ["UNKNOWN_NODE"]
        assert warnings[0].context == {"node_index": 0}

    def test_empty(self):
        assert build_blocks([]) == ([], [])
