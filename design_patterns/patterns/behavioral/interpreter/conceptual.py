"""Interpreter - conceptual example.

Interpreter defines a grammar as a class hierarchy: terminal expressions for
the leaves of a sentence and non-terminal expressions for the rules that
combine them. A sentence is parsed into a tree of expression objects, and
interpreting the root interprets the whole sentence against a context.

The grammar here is arithmetic over integers and variables, written in
reverse Polish notation: ``"x y + 2 -"`` means ``(x + y) - 2``.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from design_patterns.domain.core.exceptions import UnknownVariableError, ValidationError


class Context:
    """Global information for the interpreter: the variable values."""

    def __init__(self, **variables: int):
        self._variables: Dict[str, int] = dict(variables)

    def assign(self, name: str, value: int) -> None:
        self._variables[name] = value

    def look_up(self, name: str) -> int:
        if name not in self._variables:
            raise UnknownVariableError(name)
        return self._variables[name]


class Expression(ABC):
    """Interface shared by every node of the syntax tree."""

    @abstractmethod
    def interpret(self, context: Context) -> int:
        pass


class Number(Expression):
    """Terminal expression: an integer literal."""

    def __init__(self, value: int):
        self.value = value

    def interpret(self, context: Context) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Variable(Expression):
    """Terminal expression: a name resolved through the context."""

    def __init__(self, name: str):
        self.name = name

    def interpret(self, context: Context) -> int:
        return context.look_up(self.name)

    def __str__(self) -> str:
        return self.name


class Plus(Expression):
    """Non-terminal expression: the sum of two sub-expressions."""

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        return self.left.interpret(context) + self.right.interpret(context)

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"


class Minus(Expression):
    """Non-terminal expression: the difference of two sub-expressions."""

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        return self.left.interpret(context) - self.right.interpret(context)

    def __str__(self) -> str:
        return f"({self.left} - {self.right})"


OPERATORS = {"+": Plus, "-": Minus}


def parse(sentence: str) -> Expression:
    """
    Build the syntax tree of a reverse Polish notation sentence.

    Raises:
        ValidationError: If the sentence is empty or unbalanced
    """
    stack: List[Expression] = []
    for token in sentence.split():
        if token in OPERATORS:
            if len(stack) < 2:
                raise ValidationError(f"Operator '{token}' is missing an operand", sentence)
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATORS[token](left, right))
        elif token.lstrip("-").isdigit():
            stack.append(Number(int(token)))
        else:
            stack.append(Variable(token))

    if len(stack) != 1:
        raise ValidationError(f"Cannot parse expression '{sentence}'", sentence)
    return stack[0]


def client_code(sentence: str, context: Context) -> int:
    expression = parse(sentence)
    result = expression.interpret(context)
    print(f"Client: '{sentence}' is parsed as {expression}")
    print(f"Interpreter: {expression} = {result}")
    return result


def main() -> None:
    context = Context(x=5, y=3)
    print("Client: Interpreting with x=5, y=3")
    client_code("x y + 2 -", context)
    print()

    client_code("x 10 - y +", context)
    print()

    context.assign("x", 20)
    print("Client: Interpreting the same sentence after assigning x=20")
    client_code("x 10 - y +", context)


if __name__ == "__main__":
    main()
