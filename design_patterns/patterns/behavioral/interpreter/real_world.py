"""Interpreter - real-world example: boolean expressions.

Expressions such as ``A ∧ (B ∨ C)`` are built as trees of ``AndExp``,
``OrExp`` and ``VariableExp`` nodes and evaluated against a ``Context``
holding the variable values.
"""

from abc import ABC, abstractmethod
from typing import Dict

from design_patterns.domain.core.exceptions import UnknownVariableError


class Context:
    def __init__(self):
        self._pool_variable: Dict[str, bool] = {}

    def look_up(self, name: str) -> bool:
        if name not in self._pool_variable:
            raise UnknownVariableError(name)
        return self._pool_variable[name]

    def assign(self, variable: "VariableExp", value: bool) -> None:
        self._pool_variable[variable.get_name()] = value


class AbstractExp(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> bool:
        pass


class VariableExp(AbstractExp):
    def __init__(self, name: str):
        self._name = name

    def interpret(self, context: Context) -> bool:
        return context.look_up(self._name)

    def get_name(self) -> str:
        return self._name


class AndExp(AbstractExp):
    def __init__(self, first: AbstractExp, second: AbstractExp):
        self.first = first
        self.second = second

    def interpret(self, context: Context) -> bool:
        return self.first.interpret(context) and self.second.interpret(context)


class OrExp(AbstractExp):
    def __init__(self, first: AbstractExp, second: AbstractExp):
        self.first = first
        self.second = second

    def interpret(self, context: Context) -> bool:
        return self.first.interpret(context) or self.second.interpret(context)


def _format(value: bool) -> str:
    return "true" if value else "false"


def main() -> None:
    context = Context()

    a = VariableExp("A")
    b = VariableExp("B")
    c = VariableExp("C")

    # A ∧ (B ∨ C)
    exp = AndExp(a, OrExp(b, c))
    context.assign(a, True)
    context.assign(b, True)
    context.assign(c, False)

    result = _format(exp.interpret(context))
    print(f"boolean expression A ∧ (B ∨ C) = {result}, with variables A=true, B=true, C=false")

    # B ∨ (A ∧ (B ∨ C))
    exp = OrExp(b, AndExp(a, OrExp(b, c)))
    context.assign(a, False)
    context.assign(b, False)
    context.assign(c, True)

    result2 = _format(exp.interpret(context))
    print(f"boolean expression B ∨ (A ∧ (B ∨ C)) = {result2}, with variables A=false, B=false, C=true")


if __name__ == "__main__":
    main()
