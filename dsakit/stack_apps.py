"""Bracket checking, base conversion and infix-to-postfix using a stack."""

from __future__ import annotations

from dsakit.stack import Stack

_OPENS = "([{"
_CLOSES = ")]}"
_DIGITS = "0123456789ABCDEF"
_PRECEDENCE = {"(": 1, ")": 1, "+": 2, "-": 2, "*": 3, "/": 3}


def par_checker1(par: str) -> bool:
    """Check that round brackets balance; every other character closes one."""
    stack: Stack[str] = Stack()
    for c in par:
        if c == "(":
            stack.push(c)
        elif stack.is_empty():
            return False
        else:
            stack.pop()
    return stack.is_empty()


def _par_match(open_char: str, close_char: str) -> bool:
    return _OPENS.find(open_char) == _CLOSES.find(close_char)


def par_checker2(par: str) -> bool:
    """Check that (), [] and {} balance; every non-opener closes one."""
    stack: Stack[str] = Stack()
    for c in par:
        if c in _OPENS:
            stack.push(c)
        elif stack.is_empty():
            return False
        elif not _par_match(stack.pop(), c):
            return False
    return stack.is_empty()


def par_checker3(par: str) -> bool:
    """Check that (), [] and {} balance, ignoring all other characters."""
    stack: Stack[str] = Stack()
    for c in par:
        if c in _OPENS:
            stack.push(c)
        elif c in _CLOSES:
            if stack.is_empty():
                return False
            if not _par_match(stack.pop(), c):
                return False
    return stack.is_empty()


def base_converter_2(dec_num: int) -> str:
    """Return the binary digits of a non-negative integer ('' for zero)."""
    rem_stack: Stack[int] = Stack()
    while dec_num > 0:
        rem_stack.push(dec_num % 2)
        dec_num //= 2
    parts = []
    while not rem_stack.is_empty():
        parts.append(str(rem_stack.pop()))
    return "".join(parts)


def base_converter(dec_num: int, base: int) -> str:
    """Return the digits of a non-negative integer in ``base`` (2 to 16)."""
    rem_stack: Stack[int] = Stack()
    while dec_num > 0:
        rem_stack.push(dec_num % base)
        dec_num //= base
    parts = []
    while not rem_stack.is_empty():
        parts.append(_DIGITS[rem_stack.pop()])
    return "".join(parts)


def _is_operand(token: str) -> bool:
    return "A" <= token <= "Z" or "0" <= token <= "9"


def infix_to_postfix(infix: str) -> str | None:
    """Convert a whitespace-separated infix expression to postfix.

    Returns None when the brackets do not balance.  Each output token is
    followed by a single space.
    """
    if not par_checker3(infix):
        return None

    op_stack: Stack[str] = Stack()
    postfix: list[str] = []

    for token in infix.split():
        if _is_operand(token):
            postfix.append(token)
        elif token == "(":
            op_stack.push(token)
        elif token == ")":
            top = op_stack.pop()
            while top != "(":
                if top is None:
                    raise ValueError("unbalanced parentheses")
                postfix.append(top)
                top = op_stack.pop()
        else:
            if token not in _PRECEDENCE:
                raise ValueError(f"unknown operator: {token!r}")
            while not op_stack.is_empty() and _PRECEDENCE[op_stack.peek()] >= _PRECEDENCE[token]:
                postfix.append(op_stack.pop())
            op_stack.push(token)

    while not op_stack.is_empty():
        postfix.append(op_stack.pop())

    return "".join(f"{token} " for token in postfix)