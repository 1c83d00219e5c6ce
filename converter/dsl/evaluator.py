from .ast_nodes import OperandNode, OperatorNode
from .exceptions import DivisionByZeroError, InternalError


class InfixRenderer:
    """Renders a tree as fully parenthesized infix text."""

    def render(self, node):
        # Entries are (False, subtree) still to render or (True, text) ready to emit.
        parts = []
        stack = [(False, node)]
        while stack:
            is_text, item = stack.pop()
            if is_text:
                parts.append(item)
            elif isinstance(item, OperandNode):
                parts.append(item.text)
            elif isinstance(item, OperatorNode):
                stack.append((True, ")"))
                stack.append((False, item.right))
                stack.append((True, f" {item.op} "))
                stack.append((False, item.left))
                stack.append((True, "("))
            else:
                raise InternalError(f"Invalid AST node {item!r}")
        return "".join(parts)


class Evaluator:
    def eval(self, node):
        values = []
        # Post-order walk: an operator is applied once both of its children are on `values`.
        stack = [(node, False)]
        while stack:
            item, children_done = stack.pop()

            if isinstance(item, OperandNode):
                values.append(item.value)
            elif isinstance(item, OperatorNode):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(self.apply(item.op, left, right))
                else:
                    stack.append((item, True))
                    stack.append((item.right, False))
                    stack.append((item.left, False))
            else:
                raise InternalError(f"Invalid AST node {item!r}")

        return values.pop()

    def apply(self, op, left, right):
        if op == "+": return left + right
        if op == "-": return left - right
        if op == "*": return left * right
        if op == "/":
            if right == 0:
                raise DivisionByZeroError(f"Cannot divide {left:g} by zero")
            return left / right

        raise InternalError(f"Unsupported operator '{op}'")


def render_infix(node):
    return InfixRenderer().render(node)


def evaluate(node):
    return Evaluator().eval(node)
