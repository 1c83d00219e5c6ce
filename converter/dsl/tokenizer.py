import re

from .exceptions import LexicalError
from .tokens import OPERATORS, Token

# Spaces and tabs only; a newline stays inside its fragment.
SEPARATOR_PATTERN = re.compile(r"[ \t]+")
NUMBER_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


class Tokenizer:
    def __init__(self, text):
        self.text = text

    def fragments(self):
        return [part for part in SEPARATOR_PATTERN.split(self.text) if part]

    def number(self, fragment):
        try:
            value = float(fragment)
        except ValueError:
            raise LexicalError(
                f"'{fragment}' looks like a number but could not be parsed",
                fragment=fragment,
            ) from None
        return Token.operand(fragment, value)

    def generate_tokens(self):
        tokens = []
        for fragment in self.fragments():
            if len(fragment) == 1 and fragment in OPERATORS:
                tokens.append(Token.operator(fragment))
            elif NUMBER_PATTERN.fullmatch(fragment):
                tokens.append(self.number(fragment))
            else:
                raise LexicalError(f"Unrecognized token '{fragment}'", fragment=fragment)
        return tokens
