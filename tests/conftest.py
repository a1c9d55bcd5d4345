"""Shared test fixtures for the feishuify test suite."""

from __future__ import annotations

import pytest

from feishuify.config import FeishuifyConfig
from feishuify.converter.md_to_feishu import MarkdownToFeishuConverter


@pytest.fixture
def config() -> FeishuifyConfig:
    """Default test configuration."""
    return FeishuifyConfig()


@pytest.fixture
def converter(config: FeishuifyConfig) -> MarkdownToFeishuConverter:
    """Markdown-to-Docx converter using the default test config."""
    return MarkdownToFeishuConverter(config)
