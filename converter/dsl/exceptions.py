class RPNError(Exception):
    """Base class for every error raised by the RPN pipeline."""


class ExpressionArgumentError(RPNError, ValueError):
    """Raised when the expression text is missing, empty or whitespace-only."""


class LexicalError(RPNError):
    """Raised when a fragment is neither an operator nor a number literal."""

    def __init__(self, message, fragment=None):
        super().__init__(message)
        self.fragment = fragment


class StructuralError(RPNError):
    """Raised when the tokens do not form a single well-formed RPN expression."""


class DivisionByZeroError(RPNError, ZeroDivisionError):
    """Raised when the right operand of a division is exactly zero."""


class InternalError(RPNError, RuntimeError):
    """Raised when the tree holds something the tokenizer can never produce."""
