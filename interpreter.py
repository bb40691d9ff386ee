"""
interpreter.py - fasada potoku: tekst → tokeny → AST → wartość.

evaluate_line() - jedno wywołanie potoku; błąd dowolnego etapu przerywa
                  pozostałe i wraca jako EvalOutcome.error (nigdy wyjątek)
InterpreterSession - właściciel jednego środowiska zmiennych
run_session()   - pętla read_input → evaluate → display dla dowolnego hosta
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.lexer.scanning_lexer import ScanningLexer
from adapters.parser.recursive_descent_parser import RecursiveDescentParser
from contracts import Assignment, EvalOutcome, VariableEnvironment
from errors import InterpreterError
from ports.evaluator import Evaluator
from ports.host_io import HostIO
from ports.lexer import Lexer
from ports.parser import Parser

logger = logging.getLogger("rachmistrz.interpreter")


def evaluate_line(
    text: str,
    env: VariableEnvironment,
    *,
    lexer: Optional[Lexer] = None,
    parser: Optional[Parser] = None,
    evaluator: Optional[Evaluator] = None,
) -> EvalOutcome:
    """
    Evaluates one line against env.
    Returns EvalOutcome with value (and assigned name for an assignment)
    or with error; env is modified only by a fully evaluated assignment.
    """
    lexer = lexer or ScanningLexer()
    parser = parser or RecursiveDescentParser()
    evaluator = evaluator or ASTEvaluator()

    try:
        tokens = lexer.tokenize(text)
        ast = parser.parse(tokens)
        result = evaluator.evaluate_with_steps(ast, env)
    except InterpreterError as exc:
        logger.info("Evaluation failed (%s/%s): %s", exc.stage.value, exc.kind.value, exc)
        return EvalOutcome(text=text, error=exc.to_info())

    assigned = ast.name if isinstance(ast, Assignment) else None
    logger.debug("Evaluated %r -> %r", text, result.value)
    return EvalOutcome(
        text=text,
        value=result.value,
        assigned=assigned,
        steps=result.steps,
    )


class InterpreterSession:
    """Sesja interpretera: własne środowisko zmiennych + adaptery etapów."""

    def __init__(
        self,
        session_id: Optional[str] = None,
        lexer: Optional[Lexer] = None,
        parser: Optional[Parser] = None,
        evaluator: Optional[Evaluator] = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.env: VariableEnvironment = {}
        self._lexer = lexer or ScanningLexer()
        self._parser = parser or RecursiveDescentParser()
        self._evaluator = evaluator or ASTEvaluator()

    def evaluate(self, text: str) -> EvalOutcome:
        return evaluate_line(
            text,
            self.env,
            lexer=self._lexer,
            parser=self._parser,
            evaluator=self._evaluator,
        )

    def variables(self) -> dict[str, float]:
        """Kopia środowiska - modyfikacje nie wpływają na sesję."""
        return dict(self.env)


def run_session(host: HostIO, session: Optional[InterpreterSession] = None) -> int:
    """Czyta linie z hosta aż do None; zwraca liczbę policzonych linii."""
    session = session or InterpreterSession()
    count = 0
    while True:
        line = host.read_input()
        if line is None:
            break
        if not line.strip():
            continue
        host.display(session.evaluate(line))
        count += 1
    return count
