from __future__ import annotations

import json
import logging
from typing import Any, List

import gradio as gr

from .accessors import duplicate_value, get_value, set_value, sort_by_path
from .decoding import escape_unicode_chars, parse
from .exceptions import JsonMendError
from .io_utils import read_text_content
from .locator import locate
from .paths import stringify_path
from .repair import repair
from .settings import get_settings
from .structure import get_child_paths, sort_object_keys
from .values import limit_characters, parse_string_value

logger = logging.getLogger(__name__)


def _error_status(prefix: str, error: Exception) -> str:
    return limit_characters(f"{prefix}: {error}", get_settings().preview_chars)


def _sort_keys_deep(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _sort_keys_deep(v) for k, v in sort_object_keys(value).items()}
    if isinstance(value, list):
        return [_sort_keys_deep(v) for v in value]
    return value


def dump_json(data: Any, indent: int = 2, sort_keys: bool = False, escape_unicode: bool = False) -> str:
    if sort_keys:
        data = _sort_keys_deep(data)
    if indent and indent > 0:
        text = json.dumps(data, indent=int(indent), ensure_ascii=False)
    else:
        text = json.dumps(data, separators=(',', ':'), ensure_ascii=False)
    return escape_unicode_chars(text) if escape_unicode else text


def load_text_file(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."
    try:
        text, encoding = read_text_content(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        return gr.update(), _error_status("Error reading file", e)
    return text, f"Loaded {len(text)} characters ({encoding})."


def repair_text_handler(text: str):
    """Repair the input and report whether the result decodes."""
    if not text or not text.strip():
        return "", "Nothing to repair."

    repaired = repair(text)
    try:
        parse(repaired)
    except JsonMendError as e:
        logger.info("Repaired text still invalid", extra={"extra": {"length": len(text)}})
        return repaired, _error_status("Repaired text is still not valid JSON", e)

    if repaired == text:
        return repaired, "Input was already valid JSON."
    return repaired, "Repaired. The result is valid JSON."


def format_text_handler(text: str, indent: int, sort_keys: bool, escape_unicode: bool):
    """Validate the input and pretty-print (or compact) it."""
    try:
        data = parse(text or "")
    except JsonMendError as e:
        return gr.update(), _error_status("Invalid JSON", e)
    return dump_json(data, indent=indent, sort_keys=sort_keys, escape_unicode=escape_unicode), "Valid JSON."


def sort_array_handler(text: str, path: str, direction: str):
    """Sort a top-level array by the value found at `path` in each item."""
    try:
        data = parse(text or "")
    except JsonMendError as e:
        return gr.update(), _error_status("Invalid JSON", e)
    if not isinstance(data, list):
        return gr.update(), "Sorting needs a JSON array at the root."

    try:
        ordered = sort_by_path(data, path or None, direction='desc' if direction == 'Descending' else 'asc')
    except JsonMendError as e:
        return gr.update(), _error_status("Invalid path", e)
    return dump_json(ordered), f"Sorted {len(ordered)} items."


def suggest_paths_handler(text: str) -> str:
    """Return candidate path expressions (one per line) for the locate tab."""
    try:
        data = parse(text or "")
    except JsonMendError:
        return ""

    if isinstance(data, list):
        paths = ['[0]' + p for p in get_child_paths(data, include_objects=True)]
    else:
        paths = [p for p in get_child_paths([data], include_objects=True) if p]
    return "\n".join(paths)


def locate_paths_handler(text: str, paths_text: str):
    """Locate each path (one per line) and return table rows."""
    expressions: List[str] = [line.strip() for line in (paths_text or "").splitlines() if line.strip()]
    if not expressions:
        return [], "Enter one path per line, e.g. .items[0].name"

    found = locate(text or "", expressions)
    rows = [[item.path, item.line, item.column] for item in found]
    missing = len(expressions) - len(rows)
    if not rows and missing:
        return rows, "No paths found. Is the document valid JSON?"
    if missing:
        return rows, f"Found {len(rows)} paths, {missing} not found or invalid."
    return rows, f"Found {len(rows)} paths."


def get_value_handler(text: str, path: str):
    try:
        data = parse(text or "")
        value = get_value(data, path)
    except JsonMendError as e:
        return "", _error_status("Error", e)
    return dump_json(value), "OK" if value is not None else "No value at this path."


def set_value_handler(text: str, path: str, raw_value: str):
    """Set the value at `path`; the new value is typed text cast to a scalar."""
    try:
        data = parse(text or "")
        updated = set_value(data, path, parse_string_value(raw_value or ""))
    except (JsonMendError, ValueError, IndexError) as e:
        return gr.update(), _error_status("Error", e)
    return dump_json(updated), "Value updated."


def duplicate_value_handler(text: str, path: str):
    """Copy the member or item at `path` next to itself and select the copy."""
    try:
        data = parse(text or "")
        updated, copy_path = duplicate_value(data, path)
    except (JsonMendError, ValueError) as e:
        return gr.update(), gr.update(), _error_status("Error", e)
    new_path = stringify_path(copy_path)
    return dump_json(updated), new_path, f"Copied to {new_path}."
