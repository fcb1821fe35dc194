"""
Base62 인코딩/디코딩 (short ID 변환 엔진)
문자集: 0-9, A-Z, a-z (62자) - 다른 구현체와 호환되도록 순서 고정
"""

import logging
from types import MappingProxyType

from .errors import DecodeError

logger = logging.getLogger(__name__)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

# 문자 -> 인덱스 (읽기 전용)
_INDEX = MappingProxyType({char: i for i, char in enumerate(ALPHABET)})

if BASE != 62 or len(_INDEX) != BASE:
    raise RuntimeError(f"base62 alphabet is inconsistent: {ALPHABET!r}")


def encode(num: int) -> str:
    """정수 -> Base62 문자열 (0은 "0")"""
    if not isinstance(num, int) or isinstance(num, bool):
        raise TypeError(f"expected int, got {type(num).__name__}")
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")
    if num == 0:
        return ALPHABET[0]
    result = []
    while num > 0:
        num, rem = divmod(num, BASE)
        result.append(ALPHABET[rem])
    return "".join(reversed(result))


def decode(s: str) -> int:
    """Base62 문자열 -> 정수. 빈 문자열은 0."""
    num = 0
    for char in s:
        index = _INDEX.get(char)
        if index is None:
            reason = f"invalid character '{char}' in short ID (valid characters: 0-9, A-Z, a-z)"
            logger.debug("base62 decode failed for %r: %s", s, reason)
            raise DecodeError(s, reason)
        num = num * BASE + index
    return num
