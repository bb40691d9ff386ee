"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wartości AST w środowisku zmiennych.
"""
from typing import Protocol, runtime_checkable

from contracts import ASTNode, EvalResult, VariableEnvironment


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, node: ASTNode, env: VariableEnvironment) -> float:
        """
        Evaluates an AST to a float.
        env: variable bindings; an Assignment node inserts or overwrites
        its entry only after the right-hand side evaluated successfully.
        Raises UndefinedVariableError for unbound variables.
        Raises DivisionByZeroError when a divisor is exactly zero.
        """
        ...

    def evaluate_with_steps(self, node: ASTNode, env: VariableEnvironment) -> EvalResult:
        """
        Same semantics as evaluate(), but also returns human-readable
        computation steps (left operand before right operand).
        """
        ...
