"""Strict JSON decoding with readable diagnostics."""
from __future__ import annotations

import json
import logging
from typing import Any

from .exceptions import JsonValidationError

logger = logging.getLogger(__name__)


def _error_excerpt(text: str, lineno: int, colno: int) -> str:
    lines = text.splitlines() or ['']
    line = lines[lineno - 1] if 0 < lineno <= len(lines) else ''
    return f"{line}\n{' ' * max(colno - 1, 0)}^"


def validate(text: str) -> None:
    """Raise JsonValidationError describing the first syntax problem in `text`."""
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        message = (
            f"Parse error on line {e.lineno}, column {e.colno}: {e.msg}\n"
            f"{_error_excerpt(text, e.lineno, e.colno)}"
        )
        raise JsonValidationError(message, line=e.lineno, column=e.colno, pos=e.pos) from e


def parse(text: str) -> Any:
    """Decode strict JSON text.

    On failure the text is validated again to raise a more detailed
    JsonValidationError; the original decode error is kept as its cause.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        logger.info("JSON decode failed", extra={"extra": {"line": err.lineno, "column": err.colno}})
        try:
            validate(text)
        except JsonValidationError as detailed:
            raise detailed from err
        raise


def escape_unicode_chars(text: str) -> str:
    """Escape every non-ASCII character as \\uXXXX.

    Characters outside the BMP are written as two escaped UTF-16 surrogates,
    the form JSON uses for them.
    """
    out = []
    for ch in text:
        code = ord(ch)
        if code < 0x7F:
            out.append(ch)
        elif code <= 0xFFFF:
            out.append(f'\\u{code:04x}')
        else:
            code -= 0x10000
            out.append(f'\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}')
    return ''.join(out)
