"""Pluggable metrics for the conversion pipeline.

:class:`MarkdownToFeishuConverter` reports through whatever object is set
as ``FeishuifyConfig.metrics``.  Anything with ``increment`` and ``timing``
methods of the shape below works; with no hook configured the converter
uses :class:`NoopMetricsHook`.

Names reported per conversion:

* ``feishuify.conversions_total`` (counter)
* ``feishuify.blocks_built_total`` (counter, incremented by the block count)
* ``feishuify.conversion_warnings_total`` (counter, tagged with ``code``)
* ``feishuify.conversion_duration_ms`` (timing)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Structural interface of a metrics backend."""

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Add *value* to the counter *name*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record one duration sample, in milliseconds."""
        ...


class NoopMetricsHook:
    """Accepts every call and records nothing."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        return None

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        return None
