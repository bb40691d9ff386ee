"""
Adapter: ASTEvaluator
Implementuje port Evaluator - rekurencyjne przejście AST na liczbach float.

evaluate()            - oblicza wartość; przypisanie modyfikuje środowisko
evaluate_with_steps() - to samo plus lista kroków do wyświetlenia

Lewy operand liczony jest zawsze przed prawym, więc przy kilku błędnych
operandach zgłaszany jest ten pierwszy od lewej.
"""
from __future__ import annotations

from adapters.presenter.messages import format_number
from contracts import (
    Assignment,
    ASTNode,
    BinaryOp,
    BinaryOperator,
    EvalResult,
    NumberLiteral,
    VariableEnvironment,
    VariableRef,
)
from errors import DivisionByZeroError, UndefinedVariableError


def _safe_div(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


_OP_FUNCS = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _safe_div,
}


class ASTEvaluator:
    """Ewaluator wyrażeń arytmetycznych z trwałym środowiskiem zmiennych."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, node: ASTNode, env: VariableEnvironment) -> float:
        value, _ = self._eval(node, env)
        return value

    def evaluate_with_steps(self, node: ASTNode, env: VariableEnvironment) -> EvalResult:
        value, steps = self._eval(node, env)
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval(
        self,
        node: ASTNode,
        env: VariableEnvironment,
    ) -> tuple[float, list[str]]:
        """Zwraca (wartość, lista kroków)."""

        if isinstance(node, NumberLiteral):
            return node.value, []

        if isinstance(node, VariableRef):
            if node.name not in env:
                raise UndefinedVariableError(node.name)
            val = env[node.name]
            return val, [f"{node.name} = {format_number(val)}"]

        if isinstance(node, Assignment):
            val, steps = self._eval(node.value, env)
            # Zapis dopiero po udanym policzeniu prawej strony
            env[node.name] = val
            return val, steps + [f"{node.name} := {format_number(val)}"]

        if isinstance(node, BinaryOp):
            left_val, left_steps = self._eval(node.left, env)
            right_val, right_steps = self._eval(node.right, env)

            result = _OP_FUNCS[node.op](left_val, right_val)
            step = (
                f"{format_number(left_val)} {node.op.value} "
                f"{format_number(right_val)} = {format_number(result)}"
            )
            return result, left_steps + right_steps + [step]

        raise TypeError(f"Unknown AST node type: {type(node)}")
