from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence

from .paths import stringify_path
from .settings import get_settings

_DIGITS = re.compile(r'(\d+)')
_COPY_SUFFIX = re.compile(r' \(copy( \d+)?\)$')


def natural_key(text: str):
    """Sort key comparing digit runs by value, 'item2' < 'item10'."""
    return [
        (0, int(part), '') if part.isdigit() else (1, 0, part.lower())
        for part in _DIGITS.split(text)
        if part
    ]


def sort_object_keys(obj: Dict[str, Any], direction: str = 'asc') -> Dict[str, Any]:
    """Return a copy of `obj` with its keys in natural order."""
    keys = sorted(obj.keys(), key=natural_key, reverse=(direction == 'desc'))
    return {key: obj[key] for key in keys}


def _collect_child_paths(data: Any, paths: Dict[str, bool], root: str, include_objects: bool) -> None:
    is_value = not isinstance(data, (dict, list))
    if is_value or include_objects:
        paths[root] = True

    if isinstance(data, dict):
        for field, value in data.items():
            _collect_child_paths(value, paths, root + stringify_path([field]), include_objects)


def get_child_paths(data: Any, include_objects: bool = False, max_items: Optional[int] = None) -> List[str]:
    """List the paths of the fields found in the items of an array.

    Only object members are descended into. Objects and nested arrays are
    listed only when `include_objects` is set. A non-array yields ['']
    (the root).
    """
    paths: Dict[str, bool] = {}
    if isinstance(data, list):
        if max_items is None:
            max_items = get_settings().max_child_path_items
        for item in data[:max_items]:
            _collect_child_paths(item, paths, '', include_objects)
    else:
        paths[''] = True
    return sorted(paths)


def find_unique_name(name: str, existing_names: Sequence[str]) -> str:
    """Suffix `name` with ' (copy)', ' (copy 2)', ... until it is not taken."""
    stripped = _COPY_SUFFIX.sub('', name)
    candidate = stripped
    i = 1
    while candidate in existing_names:
        copy = 'copy' + (f' {i}' if i > 1 else '')
        candidate = f'{stripped} ({copy})'
        i += 1
    return candidate
