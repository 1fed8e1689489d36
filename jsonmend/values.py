from __future__ import annotations

import math
import re
from typing import Any

_RADIX_INTEGER = re.compile(r'0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)')
_DECIMAL_INTEGER = re.compile(r'[+-]?[0-9]+')
_DECIMAL_NUMBER = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')


def parse_string_value(text: str) -> Any:
    """Cast text typed by a user to a JSON scalar.

    '' stays '', 'null'/'true'/'false' (any case) become None/True/False and
    numbers become int or float; anything else is returned unchanged.
    Numbers follow the browser's `Number()` rules: surrounding whitespace is
    ignored, '5.', '.5' and '+5' are numbers, and unsigned '0x', '0o' and '0b'
    prefixes select base 16, 8 or 2. Unlike `Number()`, 'Infinity', 'NaN'
    and values that overflow a float stay text since JSON cannot hold them.
    """
    if text == '':
        return ''
    lower = text.lower()
    if lower == 'null':
        return None
    if lower == 'true':
        return True
    if lower == 'false':
        return False

    stripped = text.strip()
    if _RADIX_INTEGER.fullmatch(stripped):
        return int(stripped, 0)
    if _DECIMAL_INTEGER.fullmatch(stripped):
        return int(stripped)
    if not _DECIMAL_NUMBER.fullmatch(stripped):
        return text
    number = float(stripped)
    if math.isinf(number):
        return text
    return number


def limit_characters(text: str, max_count: int) -> str:
    """Cut `text` to `max_count` characters, ending with '...' when cut."""
    if len(text) <= max_count:
        return text
    return text[:max_count] + '...'
