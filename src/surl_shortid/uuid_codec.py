"""
UUID <-> short ID 변환

UUID 의 32자리 16진수를 하나의 정수로 보고 Base62 로 바꾼다 (최대 22자).
UUID 는 항상 128비트이므로 디코딩 시 앞자리를 "0" 으로 채워 복원할 수 있다.
버전/variant 비트도 일반 비트로 취급되어 그대로 유지된다.
"""

import logging
import string
import uuid

from . import base62
from .errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

UUID_HEX_LENGTH = 32
_HEX_DIGITS = frozenset(string.hexdigits)


def _fail_encode(value, reason: str) -> EncodeError:
    logger.debug("shorten_uuid failed for %r: %s", value, reason)
    return EncodeError(value, reason)


def _fail_decode(short_id: str, reason: str) -> DecodeError:
    logger.debug("expand_uuid failed for %r: %s", short_id, reason)
    return DecodeError(short_id, reason)


def shorten_uuid(value: uuid.UUID | str) -> str:
    """UUID 객체 또는 UUID 문자열 -> short ID"""
    if isinstance(value, uuid.UUID):
        text = str(value)
    elif isinstance(value, str):
        text = value
    else:
        raise TypeError(f"expected uuid.UUID or str, got {type(value).__name__}")

    if not text:
        raise _fail_encode(text, "UUID string cannot be empty")

    # 하이픈 제거 후 32자리 16진수인지 확인
    hex_str = text.replace("-", "")
    if len(hex_str) != UUID_HEX_LENGTH:
        raise _fail_encode(
            value,
            "invalid UUID format: expected 32 hex characters after removing hyphens, "
            f"got {len(hex_str)}",
        )
    if not _HEX_DIGITS.issuperset(hex_str):
        raise _fail_encode(
            value,
            "invalid UUID format: contains non-hex characters "
            "(valid characters: 0-9, a-f, A-F, hyphens)",
        )

    return base62.encode(int(hex_str, 16))


def expand_uuid(short_id: str) -> uuid.UUID:
    """short ID -> UUID 객체"""
    num = base62.decode(short_id)

    # 128비트 기준으로 앞자리 0 복원
    hex_str = format(num, "x").rjust(UUID_HEX_LENGTH, "0")
    if len(hex_str) != UUID_HEX_LENGTH:
        raise _fail_decode(
            short_id,
            f"decoded to invalid length: expected 32 hex characters, got {len(hex_str)}",
        )

    uuid_str = "-".join(
        (hex_str[0:8], hex_str[8:12], hex_str[12:16], hex_str[16:20], hex_str[20:32])
    )
    try:
        return uuid.UUID(uuid_str)
    except ValueError as e:
        raise _fail_decode(short_id, f"failed to parse UUID: {e}") from e


def new_short_uuid() -> str:
    """랜덤 UUID(v4) 를 만들어 바로 short ID 로 반환"""
    return shorten_uuid(uuid.uuid4())
