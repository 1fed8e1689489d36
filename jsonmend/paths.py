from __future__ import annotations

import json
import re
from typing import List, Sequence, Tuple, Union

from .exceptions import PathSyntaxError

Segment = Union[str, int]
JsonPath = Tuple[Segment, ...]

WILDCARD = '*'

_PROPERTY_CHAR = re.compile(r'[A-Za-z0-9_$]')
_PLAIN_PROPERTY = re.compile(r'^[A-Za-z0-9_$]+$')


def parse_path(expression: str) -> JsonPath:
    """Parse a JSON path like '.items[3].name' into a tuple of segments.

    Property names become strings, array indices become ints and '[*]'
    becomes the wildcard segment '*'. Raises PathSyntaxError at the first
    malformed construct.
    """
    path: List[Segment] = []
    length = len(expression)
    i = 0

    def parse_property() -> str:
        nonlocal i
        start = i
        while i < length and _PROPERTY_CHAR.match(expression[i]):
            i += 1
        if i == start:
            raise PathSyntaxError(i, 'property name expected')
        return expression[start:i]

    def read_until(end: str) -> str:
        nonlocal i
        start = i
        while i < length and expression[i] != end:
            i += 1
        if i >= length:
            raise PathSyntaxError(i, f'unexpected end, character {end} expected')
        return expression[start:i]

    def decode_index(text: str, at: int) -> int:
        try:
            value = json.loads(text)
        except ValueError:
            raise PathSyntaxError(at, f'array index expected, got "{text}"') from None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise PathSyntaxError(at, f'array index expected, got "{text}"')
        return value

    while i < length:
        ch = expression[i]
        if ch == '.':
            i += 1
            path.append(parse_property())
        elif ch == '[':
            i += 1
            if i < length and expression[i] in ('\'', '"'):
                end = expression[i]
                i += 1
                path.append(read_until(end))
                # Skip the closing quote found by read_until.
                i += 1
            else:
                start = i
                index = read_until(']').strip()
                if not index:
                    raise PathSyntaxError(i, 'array value expected')
                path.append(WILDCARD if index == WILDCARD else decode_index(index, start))

            if i >= length or expression[i] != ']':
                raise PathSyntaxError(i, 'closing bracket ] expected')
            i += 1
        else:
            raise PathSyntaxError(i, f'unexpected character "{ch}"')

    return tuple(path)


def stringify_path(path: Sequence[Segment]) -> str:
    """Render a path as '.items[3].name'.

    Names outside [A-Za-z0-9_$] are written as '["name"]' without escaping,
    so a name containing a double quote does not survive a round trip.
    """
    parts: List[str] = []
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            parts.append(f'[{segment}]')
        elif isinstance(segment, str) and _PLAIN_PROPERTY.match(segment):
            parts.append(f'.{segment}')
        else:
            parts.append(f'["{segment}"]')
    return ''.join(parts)


def escape_pointer_segment(segment: Segment) -> str:
    return str(segment).replace('~', '~0').replace('/', '~1')


def compile_json_pointer(path: Sequence[Segment]) -> str:
    """Compile a path into a JSON Pointer like '/items/3/name'.

    Only the forward direction is implemented; the empty path compiles to ''
    (the document root).
    """
    return ''.join('/' + escape_pointer_segment(segment) for segment in path)
