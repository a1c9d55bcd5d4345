"""Result types returned by the conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from feishuify.blocks import OutputBlock


@dataclass
class ConversionWarning:
    """Record of one degrade applied during conversion.

    Attributes
    ----------
    code:
        Upper-case identifier such as ``"TABLE_DROPPED"`` or
        ``"HEADING_DEGRADED"``.
    message:
        One-line explanation for humans.
    context:
        Details for the specific code, e.g. ``{"rows": 1}``.
    """

    code: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class ConversionResult:
    """Blocks produced from one Markdown document.

    ``blocks`` are in document order.  ``warnings`` lists every degrade;
    an empty list means the document converted without loss.
    """

    blocks: list[OutputBlock] = field(default_factory=list)
    warnings: list[ConversionWarning] = field(default_factory=list)

    def to_payload(self) -> list[dict[str, Any]]:
        """Serialise :attr:`blocks` for the ``children`` field of the API."""
        return [block.to_dict() for block in self.blocks]
