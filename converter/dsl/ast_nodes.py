class OperandNode:
    def __init__(self, value, text):
        self.value = value
        self.text = text

    def __repr__(self):
        return f"OperandNode({self.text!r})"


class OperatorNode:
    def __init__(self, op, left, right):
        if left is None or right is None:
            raise ValueError(f"Operator '{op}' needs both a left and a right operand")
        self.op = op
        self.left = left
        self.right = right

    def __repr__(self):
        return f"OperatorNode({self.op!r})"
