"""Property-based tests for feishuify using Hypothesis.

These tests verify invariant properties of the conversion pipeline.  They
complement the example-based unit tests by exercising the code with a wide
range of randomly generated inputs.
"""

from __future__ import annotations

import json

from hypothesis import given, settings
from hypothesis import strategies as st

from feishuify.blocks import CodeBlock, TextRun
from feishuify.config import FeishuifyConfig
from feishuify.converter.block_parser import parse_blocks
from feishuify.converter.languages import LANGUAGE_MAP, resolve_language
from feishuify.converter.md_to_feishu import MarkdownToFeishuConverter, convert
from feishuify.converter.preprocess import preprocess
from feishuify.converter.rich_text import style_inline
from feishuify.converter.tables import render_table
from feishuify.utils.chunk import chunk_blocks

# ---------------------------------------------------------------------------
# Reusable strategies
# ---------------------------------------------------------------------------

# Lines biased towards the constructs the parser recognises.
_line_st = st.one_of(
    st.sampled_from([
        "",
        "   ",
        "# Heading",
        "#### Deep",
        "```",
        "```python",
        "```zzzzz",
        "---",
        "***",
        "> quoted **bold**",
        "| a | b |",
        "|---|---|",
        "- item",
        "  - nested",
        "1. first",
        "   continuation",
        "see [link](https://x) and **bold**",
        "*emphasis*",
    ]),
    st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=40),
)

_markdown_st = st.lists(_line_st, max_size=30).map("\n".join)

_cell_st = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc"), blacklist_characters="|"),
    min_size=1,
    max_size=12,
)


# ---------------------------------------------------------------------------
# Preprocess
# ---------------------------------------------------------------------------


class TestPreprocessProperties:
    @given(_markdown_st)
    @settings(max_examples=300)
    def test_idempotent(self, text):
        once = preprocess(text)
        assert preprocess(once) == once

    @given(_markdown_st)
    def test_no_carriage_returns(self, text):
        assert "\r" not in preprocess(text)

    @given(_markdown_st)
    def test_no_triple_newlines_outside_fences(self, text):
        if "```" not in text:
            assert "\n\n\n" not in preprocess(text)


# ---------------------------------------------------------------------------
# Convert
# ---------------------------------------------------------------------------


class TestConvertProperties:
    @given(_markdown_st)
    @settings(max_examples=300)
    def test_total(self, text):
        blocks = convert(preprocess(text))
        payload = [b.to_dict() for b in blocks]
        assert json.loads(json.dumps(payload)) == payload

    @given(_markdown_st)
    def test_at_most_one_block_per_node(self, text):
        normalized = preprocess(text)
        assert len(convert(normalized)) <= len(parse_blocks(normalized))

    @given(_markdown_st)
    def test_code_blocks_carry_language(self, text):
        for block in convert(preprocess(text)):
            if isinstance(block, CodeBlock):
                assert block.to_dict()["code"]["style"]["language"] in LANGUAGE_MAP.values()

    @given(_markdown_st)
    def test_converter_result_matches_convert(self, text):
        converter = MarkdownToFeishuConverter(FeishuifyConfig())
        assert converter.convert(text).blocks == convert(preprocess(text))

    @given(st.text(alphabet=" \t\n\r", max_size=20))
    def test_blank_input_gives_nothing(self, text):
        assert convert(preprocess(text)) == []


# ---------------------------------------------------------------------------
# Inline styling, languages, tables, chunking
# ---------------------------------------------------------------------------


class TestInlineProperties:
    @given(st.text(max_size=80))
    def test_never_empty(self, text):
        assert style_inline(text)

    @given(st.text(alphabet=st.characters(blacklist_characters="[]()*"), max_size=80))
    def test_markup_free_text_is_one_run(self, text):
        assert style_inline(text) == [TextRun(text)]


class TestLanguageProperties:
    @given(st.one_of(st.none(), st.text(max_size=30)))
    def test_total(self, tag):
        code = resolve_language(tag)
        assert isinstance(code, int)
        assert code in LANGUAGE_MAP.values()

    @given(st.sampled_from(sorted(LANGUAGE_MAP)))
    def test_case_insensitive(self, tag):
        assert resolve_language(tag.upper()) == LANGUAGE_MAP[tag]


class TestTableProperties:
    @given(
        st.integers(min_value=1, max_value=5).flatmap(
            lambda cols: st.lists(
                st.lists(_cell_st, min_size=cols, max_size=cols),
                min_size=1,
                max_size=6,
            )
        )
    )
    def test_rectangular_rows_render_equal_width_lines(self, rows):
        lines = render_table(rows).split("\n")
        assert len({len(line) for line in lines}) == 1
        assert len(lines) == len(rows) + 3


class TestChunkProperties:
    @given(
        st.lists(st.fixed_dictionaries({"block_type": st.integers(1, 31)}), max_size=200),
        st.integers(min_value=1, max_value=60),
    )
    def test_concatenation_restores_input(self, blocks, size):
        batches = chunk_blocks(blocks, size)
        assert [b for batch in batches for b in batch] == blocks
        assert all(1 <= len(batch) <= size for batch in batches)
