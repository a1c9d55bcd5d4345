"""Tests for converter/languages.py."""

import pytest

from feishuify.converter.languages import (
    LANGUAGE_MAP,
    PLAINTEXT,
    is_known_language,
    resolve_language,
)


class TestResolveLanguage:
    @pytest.mark.parametrize(
        "tag, code",
        [
            ("python", 76),
            ("py", 76),
            ("javascript", 52),
            ("js", 52),
            ("typescript", 90),
            ("ts", 90),
            ("bash", 13),
            ("sh", 13),
            ("shell", 13),
            ("go", 40),
            ("json", 53),
            ("yaml", 96),
            ("yml", 96),
        ],
    )
    def test_known(self, tag, code):
        assert resolve_language(tag) == code

    def test_aliases_agree(self):
        assert resolve_language("js") == resolve_language("javascript")

    @pytest.mark.parametrize("tag", [None, "", "   ", "zzzzz", "text", "plaintext"])
    def test_plaintext(self, tag):
        assert resolve_language(tag) == PLAINTEXT == 0

    def test_case_insensitive(self):
        assert resolve_language("Python") == resolve_language("PYTHON") == 76

    def test_first_word_only(self):
        # Attributes after the language (`title=...`, `{1,3}`) do not affect
        # the lookup; a whole-tag lookup would return plain text here.
        assert resolve_language("python title=example.py") == 76
        assert resolve_language("  js  {1,3}") == 52

    def test_every_code_is_non_negative(self):
        assert all(isinstance(v, int) and v >= 0 for v in LANGUAGE_MAP.values())

    def test_map_is_read_only(self):
        with pytest.raises(TypeError):
            LANGUAGE_MAP["new"] = 1  # type: ignore[index]


class TestIsKnownLanguage:
    def test_known(self):
        assert is_known_language("js")
        assert is_known_language("Python extra")

    @pytest.mark.parametrize("tag", [None, "", "  ", "zzzzz"])
    def test_unknown(self, tag):
        assert not is_known_language(tag)
