"""
Reverse Polish Notation toolkit.

Turns postfix arithmetic such as "3 4 + 2 *" into a binary expression tree,
which can be rendered as fully parenthesized infix text or evaluated.
"""

from .tokenizer import Tokenizer
from .parser import Parser
from .evaluator import Evaluator, InfixRenderer, evaluate, render_infix
from .exceptions import (
    RPNError,
    ExpressionArgumentError,
    LexicalError,
    StructuralError,
    DivisionByZeroError,
    InternalError,
)

__all__ = [
    'Tokenizer', 'Parser', 'Evaluator', 'InfixRenderer', 'evaluate', 'render_infix',
    'RPNError', 'ExpressionArgumentError', 'LexicalError', 'StructuralError',
    'DivisionByZeroError', 'InternalError',
]
