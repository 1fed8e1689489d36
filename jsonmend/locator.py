from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .exceptions import PathSyntaxError, SourceMapError
from .paths import compile_json_pointer, parse_path
from .source_map import Location, build_map

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatedPath:
    """Where a path expression points to in a JSON text (1-based line/column)."""

    path: str
    line: int
    column: int


def _one_based(location: Optional[Location]):
    if location is None:
        return 0, 0
    return location.line + 1, location.column + 1


def locate(text: str, expressions: Iterable[str]) -> List[LocatedPath]:
    """Find the line and column of each path expression in `text`.

    The location of a member is the location of its key, for array items and
    the root it is the location of the value. Expressions that do not parse
    or that point to nothing are left out of the result, and when `text` is
    not valid JSON the result is empty.
    """
    expressions = list(expressions or [])
    result: List[LocatedPath] = []
    if not expressions:
        return result

    try:
        source_map = build_map(text)
    except SourceMapError as e:
        logger.debug("No source map for text", extra={"extra": {"error": str(e)}})
        return result

    for expression in expressions:
        try:
            pointer = compile_json_pointer(parse_path(expression))
        except PathSyntaxError as e:
            logger.debug("Skipping invalid path", extra={"extra": {"path": expression, "error": str(e)}})
            continue

        record = source_map.pointers.get(pointer)
        if record is None:
            continue

        line, column = _one_based(record.key if record.key is not None else record.value)
        result.append(LocatedPath(path=expression, line=line, column=column))

    return result
