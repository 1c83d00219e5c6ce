from .ast_nodes import OperandNode, OperatorNode
from .exceptions import StructuralError


class Parser:
    """Builds an expression tree from RPN tokens using an explicit stack."""

    def __init__(self, tokens):
        self.tokens = list(tokens)

    def parse(self):
        if not self.tokens:
            raise StructuralError("Empty expression")

        stack = []
        for token in self.tokens:
            if not token.is_operator:
                stack.append(OperandNode(token.value, token.text))
                continue

            if len(stack) < 2:
                raise StructuralError(
                    f"Not enough operands for '{token.text}': need 2 operands, have {len(stack)}"
                )
            # The operand nearest the operator is the right-hand side.
            right = stack.pop()
            left = stack.pop()
            stack.append(OperatorNode(token.text, left, right))

        if len(stack) != 1:
            raise StructuralError(
                f"Malformed expression: {len(stack)} items left on the stack, expected 1"
            )
        return stack.pop()
