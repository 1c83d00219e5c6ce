from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class TokenType(Enum):
    OPERAND = auto()
    OPERATOR = auto()


OPERATORS = frozenset("+-*/")


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    value: Optional[float] = None  # only set on operands

    @classmethod
    def operand(cls, text: str, value: float) -> "Token":
        return cls(TokenType.OPERAND, text, value)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        return cls(TokenType.OPERATOR, symbol)

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR

    def __repr__(self):
        return f"Token({self.type}, {self.text!r})"
