"""Repair JSON-like text into strict JSON.

Turns JavaScript object notation, JSONP responses, MongoDB shell output and
text pasted from word processors into something `json.loads` accepts, e.g.
"{a: 2, 'b': {c: 'd'},}" becomes '{"a": 2, "b": {"c": "d"}}'.

The repair is a single left-to-right pass. Constructs that cannot be
repaired safely are left as they are so that the strict decoder reports
them; `repair` itself never raises.
"""
from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# /* some comment */ callback_123 ( [{"a":"b"}] ); -> [{"a":"b"}]
_JSONP_WRAPPER = re.compile(r'^\s*(/\*.*?\*/)?\s*[\da-zA-Z_$]+\s*\((.*)\)\s*;?\s*$', re.DOTALL)

_IDENTIFIER_START = re.compile(r'[a-zA-Z_$]')
_IDENTIFIER_CHAR = re.compile(r'[a-zA-Z0-9_$]')

CONTROL_CHARS = {
    '\b': '\\b',
    '\f': '\\f',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}

# opening quote -> closing quote
QUOTE_PAIRS = {
    '\'': '\'',
    '"': '"',
    '\u0060': '\u00b4',  # grave accent closed by acute accent
    '\u2018': '\u2019',
    '\u201c': '\u201d',
}

BARE_LITERALS = ('null', 'true', 'false')

_WHITESPACE = (' ', '\n', '\r', '\t')


def is_special_whitespace(ch: str) -> bool:
    return (
        ch == '\u00a0'
        or '\u2000' <= ch <= '\u200a'
        or ch == '\u202f'
        or ch == '\u205f'
        or ch == '\u3000'
    )


def strip_jsonp_wrapper(text: str) -> str:
    """Return the body of 'callback(...)' when the whole text is such a call."""
    match = _JSONP_WRAPPER.match(text)
    if match:
        logger.debug("Stripped JSONP wrapper", extra={"extra": {"length": len(text)}})
        return match.group(2)
    return text


class JsonRepairer:
    """Cursor and output buffer for one repair pass.

    The output is a list of chunks; a chunk is a single copied character or a
    whole normalized token (a string, a key). Whether an identifier is an
    object key is decided by looking back at the emitted chunks, never at
    the remaining input.
    """

    def __init__(self, text: str):
        self.text = text
        self.i = 0
        self.chunks: List[str] = []

    def curr(self) -> str:
        return self.text[self.i] if self.i < len(self.text) else ''

    def next(self) -> str:
        return self.text[self.i + 1] if self.i + 1 < len(self.text) else ''

    def prev(self) -> str:
        return self.text[self.i - 1] if 0 < self.i <= len(self.text) else ''

    def last_non_whitespace(self) -> str:
        for chunk in reversed(self.chunks):
            if chunk not in _WHITESPACE:
                return chunk
        return ''

    def next_non_whitespace(self) -> str:
        j = self.i + 1
        while j < len(self.text) and self.text[j] in _WHITESPACE:
            j += 1
        return self.text[j] if j < len(self.text) else ''

    def skip_block_comment(self) -> None:
        self.i += 2
        while self.i < len(self.text) and (self.curr() != '*' or self.next() != '/'):
            self.i += 1
        self.i += 2

    def skip_line_comment(self) -> None:
        self.i += 2
        while self.i < len(self.text) and self.curr() != '\n':
            self.i += 1

    def parse_string(self, end_quote: str) -> str:
        """Read a quoted string starting at the opening quote, return it double quoted."""
        out = ['"']
        self.i += 1
        c = self.curr()
        while self.i < len(self.text) and c != end_quote:
            if c == '"' and self.prev() != '\\':
                out.append('\\"')
            elif c in CONTROL_CHARS:
                out.append(CONTROL_CHARS[c])
            elif c == '\\':
                self.i += 1
                c = self.curr()
                # \' needs no escape inside a double quoted string
                if c != '\'':
                    out.append('\\')
                out.append(c)
            else:
                out.append(c)
            self.i += 1
            c = self.curr()

        if c == end_quote:
            out.append('"')
            self.i += 1
        else:
            logger.debug("Unterminated string left open", extra={"extra": {"index": self.i}})
        return ''.join(out)

    def parse_key(self) -> str:
        start = self.i
        while self.i < len(self.text) and _IDENTIFIER_CHAR.match(self.text[self.i]):
            self.i += 1
        key = self.text[start:self.i]
        if key in BARE_LITERALS:
            return key
        return f'"{key}"'

    def parse_vendor_type(self) -> str:
        """Unwrap a value like ObjectId("123") or NumberLong(2)."""
        start = self.i
        while self.i < len(self.text) and _IDENTIFIER_START.match(self.text[self.i]):
            self.i += 1
        data_type = self.text[start:self.i]

        if not data_type or self.curr() != '(':
            return data_type

        self.i += 1
        c = self.curr()
        if c in QUOTE_PAIRS:
            value = self.parse_string(QUOTE_PAIRS[c])
        else:
            value_start = self.i
            while self.i < len(self.text) and self.text[self.i] != ')':
                self.i += 1
            value = self.text[value_start:self.i]

        c = self.curr()
        if c == ')':
            self.i += 1
            return value

        logger.debug(
            "Unclosed extended type left as is",
            extra={"extra": {"type": data_type, "index": self.i}},
        )
        return f'{data_type}({value}{c}'

    def run(self) -> str:
        while self.i < len(self.text):
            c = self.curr()

            if c == '/' and self.next() == '*':
                self.skip_block_comment()
            elif c == '/' and self.next() == '/':
                self.skip_line_comment()
            elif is_special_whitespace(c):
                self.chunks.append(' ')
                self.i += 1
            elif c in QUOTE_PAIRS:
                self.chunks.append(self.parse_string(QUOTE_PAIRS[c]))
            elif c == ',' and self.next_non_whitespace() in (']', '}'):
                # trailing comma
                self.i += 1
            elif _IDENTIFIER_START.match(c) and self.last_non_whitespace() in ('{', ','):
                self.chunks.append(self.parse_key())
            elif _IDENTIFIER_START.match(c):
                self.chunks.append(self.parse_vendor_type())
            else:
                self.chunks.append(c)
                self.i += 1

        return ''.join(self.chunks)


def repair(text: str) -> str:
    """Repair a JSON-like string into JSON text.

    The result is not guaranteed to be valid JSON: unbalanced brackets,
    unterminated strings and similar problems are passed through for the
    decoder to report.
    """
    return JsonRepairer(strip_jsonp_wrapper(text)).run()
