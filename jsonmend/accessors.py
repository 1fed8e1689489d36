from __future__ import annotations

import copy
import json
from typing import Any, List, Sequence, Tuple, Union

from .paths import JsonPath, Segment, parse_path, stringify_path
from .structure import find_unique_name


def _as_path(path: Union[str, Sequence[Segment], None]) -> JsonPath:
    if path in (None, '', '.'):
        return ()
    if isinstance(path, str):
        return parse_path(path)
    return tuple(path)


def _step(value: Any, segment: Segment) -> Any:
    if isinstance(value, dict):
        return value.get(segment) if isinstance(segment, str) else value.get(str(segment))
    if isinstance(value, list):
        if isinstance(segment, bool):
            return None
        if isinstance(segment, str) and segment.isdigit():
            segment = int(segment)
        if isinstance(segment, int) and 0 <= segment < len(value):
            return value[segment]
    return None


def get_value(data: Any, path: Union[str, Sequence[Segment], None]) -> Any:
    """Retrieve a nested value by path ('.items[3].name' or a segment tuple).

    Returns None when any step along the path does not exist.
    """
    value = data
    for segment in _as_path(path):
        if value is None:
            return None
        value = _step(value, segment)
    return value


def _sort_key(value: Any):
    # None first, then booleans, numbers, strings and finally containers.
    if value is None:
        return (0, 0)
    if isinstance(value, bool):
        return (1, value)
    if isinstance(value, (int, float)):
        return (2, value)
    if isinstance(value, str):
        return (3, value)
    return (4, json.dumps(value, sort_keys=True, default=str))


def sort_by_path(
    items: List[Any],
    path: Union[str, Sequence[Segment], None] = None,
    direction: str = 'asc',
) -> List[Any]:
    """Return a sorted copy of `items`, ordered by the value each has at `path`.

    The sort is stable. Without a path (or with '.') the items themselves are
    compared.
    """
    parsed = _as_path(path)
    return sorted(
        items,
        key=lambda item: _sort_key(get_value(item, parsed)),
        reverse=(direction == 'desc'),
    )


def set_value(data: Any, path: Union[str, Sequence[Segment], None], value: Any) -> Any:
    """Set a nested value by path, creating missing objects along the way.

    Returns the updated document (`value` itself for the root path). Array
    indices must exist already, except one past the end which appends.
    """
    parts = _as_path(path)
    if not parts:
        return value

    current = data
    for position, segment in enumerate(parts):
        last = position == len(parts) - 1
        if isinstance(current, dict) and isinstance(segment, str):
            if last:
                current[segment] = value
            else:
                nxt = current.get(segment)
                if not isinstance(nxt, (dict, list)):
                    nxt = {}
                    current[segment] = nxt
                current = nxt
        elif isinstance(current, list) and isinstance(segment, int) and not isinstance(segment, bool):
            if segment == len(current):
                current.append(value if last else {})
            elif not 0 <= segment < len(current):
                raise IndexError(f"Index {segment} out of range at {stringify_path(parts[:position + 1])}")
            elif last:
                current[segment] = value
            if not last:
                current = current[segment]
        else:
            raise ValueError(f"Cannot set {stringify_path(parts)}: no container at {stringify_path(parts[:position + 1])}")
    return data


def duplicate_value(data: Any, path: Union[str, Sequence[Segment], None]) -> Tuple[Any, JsonPath]:
    """Insert a copy of the value at `path` right after it.

    An object member is copied under the first free name of 'name (copy)',
    'name (copy 2)', ...; an array item is copied to the next index. Returns
    the updated document and the path of the copy.
    """
    parts = _as_path(path)
    if not parts:
        raise ValueError("Cannot duplicate the root value")

    parent = get_value(data, parts[:-1])
    segment = parts[-1]
    if isinstance(parent, dict) and isinstance(segment, str) and segment in parent:
        name = find_unique_name(segment, list(parent))
        members = list(parent.items())
        parent.clear()
        for key, value in members:
            parent[key] = value
            if key == segment:
                parent[name] = copy.deepcopy(value)
        return data, parts[:-1] + (name,)

    if (
        isinstance(parent, list)
        and isinstance(segment, int)
        and not isinstance(segment, bool)
        and 0 <= segment < len(parent)
    ):
        parent.insert(segment + 1, copy.deepcopy(parent[segment]))
        return data, parts[:-1] + (segment + 1,)

    raise ValueError(f"Nothing to duplicate at {stringify_path(parts)}")
