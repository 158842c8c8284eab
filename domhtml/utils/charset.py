"""
Charset helpers used by the HTML document wrapper
"""

import codecs
import logging
from functools import lru_cache
from numbers import Number
from typing import Any

from ..errors import CharsetError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def normalize_charset(name: str) -> str:
    """Lower-case and strip a charset name"""
    return name.strip().lower()


def lookup_charset(name: str) -> codecs.CodecInfo:
    """Return codec info for a charset, raising CharsetError if unknown"""
    try:
        return codecs.lookup(normalize_charset(name))
    except LookupError as e:
        raise CharsetError(name) from e


def same_charset(first: str, second: str) -> bool:
    """Whether two charset names refer to the same codec"""
    if normalize_charset(first) == normalize_charset(second):
        return True
    try:
        return lookup_charset(first).name == lookup_charset(second).name
    except CharsetError:
        return False


def convert_charset(data: Any, from_charset: str, to_charset: str,
                    force: bool = False) -> Any:
    """
    Convert data from one charset to another.

    Bytes are re-encoded. Dicts (keys and values), lists and tuples are
    converted recursively. Text (str) is already decoded and is returned
    unchanged, as are numbers and any other objects. If the conversion
    fails the original data is returned.

    Args:
        data: The data to convert
        from_charset: The current charset of the data
        to_charset: The charset to convert to
        force: Convert even if both charsets are the same
    """
    if isinstance(data, Number):
        return data

    if not force and (from_charset == to_charset or
                      normalize_charset(from_charset) == normalize_charset(to_charset)):
        return data

    if isinstance(data, dict):
        return {convert_charset(k, from_charset, to_charset, force):
                convert_charset(v, from_charset, to_charset, force)
                for k, v in data.items()}

    if isinstance(data, (list, tuple)):
        return type(data)(convert_charset(item, from_charset, to_charset, force)
                          for item in data)

    if not isinstance(data, (bytes, bytearray)):
        return data

    return _convert_bytes(bytes(data), from_charset, to_charset)


def _convert_bytes(data: bytes, from_charset: str, to_charset: str) -> bytes:
    source = lookup_charset(from_charset)
    target = lookup_charset(to_charset)
    try:
        return data.decode(source.name).encode(target.name, errors='xmlcharrefreplace')
    except (UnicodeDecodeError, UnicodeEncodeError) as e:
        logger.warning(f"Charset conversion {from_charset} -> {to_charset} failed: {e}")
        return data
