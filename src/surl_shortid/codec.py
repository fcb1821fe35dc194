"""
문자열 <-> short ID 변환

입력 바이트열을 big-endian 정수로 보고 Base62 로 바꾼다.
앞쪽 0x00 바이트는 정수 크기에 영향을 주지 않으므로 복원되지 않는다
(첫 바이트가 0 이 아닌 입력만 왕복 보장).
"""

import logging

from . import base62
from .errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


def shorten(value: str | bytes) -> str:
    """문자열(UTF-8) 또는 바이트열 -> short ID"""
    if isinstance(value, str):
        raw = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    if not raw:
        logger.debug("shorten called with empty input")
        raise EncodeError(value, "input string cannot be empty")
    return base62.encode(int.from_bytes(raw, "big"))


def expand_bytes(short_id: str) -> bytes:
    """short ID -> 최소 길이 big-endian 바이트열 ("" 와 "0" 은 b"")"""
    num = base62.decode(short_id)
    return num.to_bytes((num.bit_length() + 7) // 8, "big")


def expand(short_id: str) -> str:
    """short ID -> 원래 문자열"""
    raw = expand_bytes(short_id)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        reason = f"decoded bytes are not valid UTF-8: {e.reason}"
        logger.debug("expand failed for %r: %s", short_id, reason)
        raise DecodeError(short_id, reason) from e
