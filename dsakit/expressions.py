"""Stack-based expression conversion, evaluation and bracket checks.

Operands are single characters: lower-case letters when converting and
decimal digits for both conversion and evaluation.
"""

__all__ = [
    "precedence",
    "infix_to_postfix",
    "infix_to_prefix",
    "evaluate_prefix",
    "evaluate_postfix",
    "brackets_balanced",
    "reverse_words",
]

_PAIRS = {")": "(", "}": "{", "]": "["}


def precedence(op: str) -> int:
    """Return the binding strength of an operator, -1 for anything else."""
    if op == "^":
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return -1


def _is_operand(ch: str) -> bool:
    return "a" <= ch <= "z" or "0" <= ch <= "9"


def _shunt(expression: str, opening: str, closing: str) -> str:
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == opening:
            stack.append(ch)
        elif ch == closing:
            while stack and stack[-1] != opening:
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        else:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == opening:
            raise ValueError("unbalanced parentheses")
        output.append(top)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation."""
    return _shunt(expression, "(", ")")


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix notation.

    The expression is reversed, converted with the roles of the brackets
    swapped, and the result reversed again.
    """
    return _shunt(expression[::-1], ")", "(")[::-1]


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        # Integer division truncates toward zero.
        return quotient if (left < 0) == (right < 0) else -quotient
    if op == "^":
        if right < 0:
            raise ValueError("negative exponent")
        return left**right
    raise ValueError(f"unknown operator {op!r}")


def _pop(stack: list[int]) -> int:
    if not stack:
        raise ValueError("malformed expression: missing operand")
    return stack.pop()


def _result(stack: list[int]) -> int:
    if len(stack) != 1:
        raise ValueError("malformed expression")
    return stack[0]


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    stack: list[int] = []
    for ch in reversed(expression):
        if "0" <= ch <= "9":
            stack.append(int(ch))
        else:
            left = _pop(stack)
            right = _pop(stack)
            stack.append(_apply(ch, left, right))
    return _result(stack)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    stack: list[int] = []
    for ch in expression:
        if "0" <= ch <= "9":
            stack.append(int(ch))
        else:
            right = _pop(stack)
            left = _pop(stack)
            stack.append(_apply(ch, left, right))
    return _result(stack)


def brackets_balanced(text: str) -> bool:
    """Tell whether every character of ``text`` closes off as a bracket pair."""
    stack: list[str] = []
    for ch in text:
        if stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def reverse_words(text: str) -> str:
    """Return the words of ``text`` in reverse order, joined by single spaces."""
    return " ".join(reversed(text.split()))