from __future__ import annotations

import codecs
from typing import Tuple

# Checked in order; the UTF-32 LE mark starts with the UTF-16 LE one.
_BOMS = (
    (codecs.BOM_UTF8, 'utf-8-sig'),
    (codecs.BOM_UTF32_LE, 'utf-32'),
    (codecs.BOM_UTF32_BE, 'utf-32'),
    (codecs.BOM_UTF16_LE, 'utf-16'),
    (codecs.BOM_UTF16_BE, 'utf-16'),
)


def decode_text(raw: bytes) -> Tuple[str, str]:
    """Decode file bytes, returning the text and the encoding that was used.

    A byte order mark selects UTF-8, UTF-16 or UTF-32 and is dropped. Without
    one the bytes are read as UTF-8, falling back to cp1252 (then latin-1)
    for files saved by Windows editors.
    """
    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return raw.decode(encoding), encoding
    for encoding in ('utf-8', 'cp1252'):
        try:
            return raw.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
    return raw.decode('latin-1'), 'latin-1'


def read_text_content(file_obj) -> Tuple[str, str]:
    """Read an uploaded file object or a file path as (text, encoding)."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, str):
            if content.startswith('\ufeff'):
                content = content[1:]
            return content, 'text'
        return decode_text(content)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'rb') as f:
        return decode_text(f.read())
