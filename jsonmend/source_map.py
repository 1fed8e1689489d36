"""Map JSON pointers to their locations in a JSON text.

`build_map` returns, for every value in a strictly valid JSON document, the
position where the value starts and ends and, for object members, where the
key starts and ends. Lines and columns are 0-based; `pos` is the character
offset into the text.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import SourceMapError
from .paths import escape_pointer_segment

logger = logging.getLogger(__name__)

_JSON_WHITESPACE = ' \t\n\r'
_SCALAR_END = ',]}' + _JSON_WHITESPACE


@dataclass(frozen=True)
class Location:
    line: int
    column: int
    pos: int


@dataclass
class PointerRecord:
    value: Optional[Location] = None
    value_end: Optional[Location] = None
    key: Optional[Location] = None
    key_end: Optional[Location] = None


@dataclass
class SourceMap:
    data: Any
    pointers: Dict[str, PointerRecord] = field(default_factory=dict)


@dataclass
class _Container:
    kind: str
    pointer: str
    record: PointerRecord
    count: int = 0


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


class _MapBuilder:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 0
        self.column = 0
        self.pointers: Dict[str, PointerRecord] = {}

    def location(self) -> Location:
        return Location(self.line, self.column, self.pos)

    def advance(self, count: int = 1) -> None:
        for ch in self.text[self.pos:self.pos + count]:
            if ch == '\n':
                self.line += 1
                self.column = 0
            else:
                self.column += 1
        self.pos += count

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _JSON_WHITESPACE:
            self.advance()

    def skip_string(self) -> str:
        start = self.pos
        self.advance()
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch == '\\':
                self.advance(2)
            elif ch == '"':
                self.advance()
                break
            else:
                self.advance()
        return self.text[start:self.pos]

    def skip_scalar(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] not in _SCALAR_END:
            self.advance()

    def start_value(self, pointer: str) -> Optional[_Container]:
        """Record where the value at `pointer` starts.

        Scalars are skipped and closed right away; an opened object or array
        is returned so the caller can walk its members.
        """
        self.skip_whitespace()
        record = self.pointers.setdefault(pointer, PointerRecord())
        record.value = self.location()
        ch = self.text[self.pos]
        if ch in '{[':
            self.advance()
            return _Container(kind=ch, pointer=pointer, record=record)
        if ch == '"':
            self.skip_string()
        else:
            self.skip_scalar()
        record.value_end = self.location()
        return None

    def read_key(self, parent: str) -> str:
        key_start = self.location()
        key = json.loads(self.skip_string())
        pointer = f"{parent}/{escape_pointer_segment(key)}"
        self.pointers[pointer] = PointerRecord(key=key_start, key_end=self.location())
        self.skip_whitespace()
        self.advance()  # ':'
        return pointer

    def run(self) -> None:
        # Nested containers live on an explicit stack so that nesting depth
        # is bounded by memory, not by the interpreter's recursion limit.
        stack: List[_Container] = []
        root = self.start_value('')
        if root is not None:
            stack.append(root)

        while stack:
            container = stack[-1]
            self.skip_whitespace()
            if self.text[self.pos] in '}]':
                self.advance()
                container.record.value_end = self.location()
                stack.pop()
                continue

            if container.count:
                self.advance()  # ','
                self.skip_whitespace()
            if container.kind == '{':
                pointer = self.read_key(container.pointer)
            else:
                pointer = f"{container.pointer}/{container.count}"
            container.count += 1

            child = self.start_value(pointer)
            if child is not None:
                stack.append(child)


def build_map(text: str) -> SourceMap:
    """Build a SourceMap for `text`.

    Raises SourceMapError when `text` is not strictly valid JSON (NaN and
    Infinity are rejected as well).
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise SourceMapError(f"Cannot map invalid JSON: {e}") from e
    except RecursionError as e:
        raise SourceMapError("Cannot map JSON: document is nested too deeply") from e

    builder = _MapBuilder(text)
    builder.run()
    logger.debug("Built source map", extra={"extra": {"pointers": len(builder.pointers)}})
    return SourceMap(data=data, pointers=builder.pointers)
