"""
surl_shortid - 문자열/UUID 를 URL 에 안전한 Base62 short ID 로 변환
"""

import logging

from . import base62
from .codec import expand, expand_bytes, shorten
from .errors import DecodeError, EncodeError, ShortIDError
from .uuid_codec import expand_uuid, new_short_uuid, shorten_uuid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "base62",
    "shorten",
    "expand",
    "expand_bytes",
    "shorten_uuid",
    "expand_uuid",
    "new_short_uuid",
    "ShortIDError",
    "EncodeError",
    "DecodeError",
)
