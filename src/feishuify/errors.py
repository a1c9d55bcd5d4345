"""Exceptions raised by feishuify.

Converting Markdown never raises.  Content the Docx format cannot express
is degraded and reported as a
:class:`~feishuify.models.ConversionWarning` instead.  The classes below
cover the strict paths: preparing payloads for the insert endpoint with
``unsupported_block_policy="raise"``.

Every error carries:

* ``code`` -- an :class:`ErrorCode` value, stable across releases.
* ``message`` -- text meant for a developer reading a traceback.
* ``context`` -- structured details, documented per subclass.
* ``cause`` -- the wrapped exception, also set as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable identifiers for :class:`FeishuifyError` subclasses."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    UNSUPPORTED_BLOCK = "UNSUPPORTED_BLOCK"


class FeishuifyError(Exception):
    """Root of the feishuify exception tree.

    Parameters
    ----------
    code:
        An :class:`ErrorCode` member or a plain string.
    message:
        What went wrong.
    context:
        Diagnostic details.  Defaults to an empty dict.
    cause:
        Exception that triggered this one, if any.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        parts = [f"code={self.code!r}", f"message={self.message!r}"]
        if self.context:
            parts.append(f"context={self.context!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


class FeishuifyConversionError(FeishuifyError):
    """Raised while turning converted blocks into an insert payload."""

    def __init__(
        self,
        code: str = ErrorCode.CONVERSION_ERROR,
        message: str = "Conversion error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(code, message, context=context, cause=cause)


class FeishuifyUnsupportedBlockError(FeishuifyConversionError):
    """A payload holds a block type the children-create endpoint rejects.

    Only raised when ``unsupported_block_policy`` is ``"raise"``.

    Context keys: ``block_type`` (int), ``block_type_name`` (str),
    ``index`` (position in the payload list).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(ErrorCode.UNSUPPORTED_BLOCK, message, context=context, cause=cause)
