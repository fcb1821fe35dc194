"""
short ID 인코딩/디코딩 에러 타입

실패한 입력값과 사유(reason)를 그대로 들고 호출자에게 전달된다.
ValueError 를 상속하므로 기존 `except ValueError` 코드에서도 잡힌다.
"""


class ShortIDError(ValueError):
    """인코딩/디코딩 에러 공통 부모"""


class EncodeError(ShortIDError):
    """문자열 또는 UUID -> short ID 변환 실패"""

    def __init__(self, input: str | bytes, reason: str) -> None:
        super().__init__(input, reason)

    @property
    def input(self) -> str | bytes:
        return self.args[0]

    @property
    def reason(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f"encode error for input '{self.input}': {self.reason}"


class DecodeError(ShortIDError):
    """short ID -> 문자열 또는 UUID 변환 실패"""

    def __init__(self, short_id: str, reason: str) -> None:
        super().__init__(short_id, reason)

    @property
    def short_id(self) -> str:
        return self.args[0]

    @property
    def reason(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f"decode error for short ID '{self.short_id}': {self.reason}"
