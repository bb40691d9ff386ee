from __future__ import annotations

import pytest

from contracts import ErrorKind, ErrorStage, EvalOutcome
from interpreter import InterpreterSession, evaluate_line, run_session


@pytest.mark.parametrize(
    "text, expected",
    [
        ("6 + 2", 8.0),
        ("6 - 2", 4.0),
        ("6 * 2", 12.0),
        ("6 / 4", 1.5),
        ("1.5 * 4;", 6.0),
    ],
)
def test_simple_binary_expressions(text, expected):
    outcome = evaluate_line(text, {})

    assert outcome.ok
    assert outcome.value == expected


def test_assignment_then_use():
    env: dict[str, float] = {}

    first = evaluate_line("x = 5;", env)
    second = evaluate_line("x + 1;", env)

    assert first.value == 5.0
    assert first.assigned == "x"
    assert env["x"] == 5.0
    assert second.value == 6.0
    assert second.assigned is None


def test_undefined_variable_on_fresh_environment():
    outcome = evaluate_line("y + 1;", {})

    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error.stage == ErrorStage.EVAL
    assert outcome.error.kind == ErrorKind.UNDEFINED_VARIABLE
    assert outcome.error.details == {"name": "y"}


def test_division_by_zero():
    outcome = evaluate_line("1 / 0;", {})

    assert outcome.error.kind == ErrorKind.DIVISION_BY_ZERO


def test_precedence_and_grouping():
    assert evaluate_line("(2 + 3) * 4;", {}).value == 20.0
    assert evaluate_line("2 + 3 * 4;", {}).value == 14.0


def test_subtraction_is_left_associative():
    assert evaluate_line("3 - 2 - 1;", {}).value == 0.0


def test_malformed_number():
    outcome = evaluate_line("1.2.3;", {})

    assert outcome.error.stage == ErrorStage.LEX
    assert outcome.error.kind == ErrorKind.MALFORMED_NUMBER


def test_unrecognized_character():
    outcome = evaluate_line("3 $ 4;", {})

    assert outcome.error.kind == ErrorKind.UNRECOGNIZED_CHARACTER
    assert outcome.error.details == {"char": "$"}
    assert outcome.error.position == 2


def test_missing_operand_in_assignment():
    env: dict[str, float] = {}

    outcome = evaluate_line("x = ;", env)

    assert outcome.error.stage == ErrorStage.PARSE
    assert outcome.error.kind == ErrorKind.EXPECTED_FACTOR
    assert env == {}


def test_trailing_tokens():
    outcome = evaluate_line("1 + 2 3;", {})

    assert outcome.error.kind == ErrorKind.TRAILING_TOKENS


def test_bare_expression_is_idempotent():
    env = {"x": 3.0}

    results = [evaluate_line("x * x - 1;", env).value for _ in range(5)]

    assert results == [8.0] * 5
    assert env == {"x": 3.0}


def test_failed_assignment_does_not_store():
    env = {"x": 1.0}

    outcome = evaluate_line("x = y + 1;", env)

    assert outcome.error.kind == ErrorKind.UNDEFINED_VARIABLE
    assert env == {"x": 1.0}


def test_outcome_carries_steps():
    outcome = evaluate_line("2 * 3 + 1", {})

    assert outcome.steps == ["2 * 3 = 6", "6 + 1 = 7"]


def test_sessions_have_independent_environments():
    a = InterpreterSession()
    b = InterpreterSession()

    a.evaluate("x = 1;")

    assert a.variables() == {"x": 1.0}
    assert b.evaluate("x;").error.kind == ErrorKind.UNDEFINED_VARIABLE
    assert a.session_id != b.session_id


def test_session_variables_returns_a_copy():
    session = InterpreterSession(session_id="s1")
    session.evaluate("x = 2;")

    snapshot = session.variables()
    snapshot["x"] = 100.0

    assert session.evaluate("x;").value == 2.0


class _ListHost:
    def __init__(self, lines):
        self._lines = list(lines)
        self.displayed: list[EvalOutcome] = []

    def read_input(self):
        return self._lines.pop(0) if self._lines else None

    def display(self, outcome):
        self.displayed.append(outcome)


def test_run_session_reads_until_none_and_skips_blank_lines():
    host = _ListHost(["a = 2;", "", "b = a * 10;", "b / 0", "a + b"])

    count = run_session(host)

    assert count == 4
    assert [o.value for o in host.displayed] == [2.0, 20.0, None, 22.0]
    assert host.displayed[2].error.kind == ErrorKind.DIVISION_BY_ZERO


def test_deeply_nested_parentheses_return_an_error_instead_of_raising():
    text = "(" * 499 + "1" + ")" * 499

    outcome = evaluate_line(text, {})

    assert not outcome.ok
    assert outcome.error.stage == ErrorStage.PARSE
    assert outcome.error.kind == ErrorKind.NESTING_TOO_DEEP
    assert outcome.error.details["limit"] == 100


def test_very_long_operator_chain_returns_an_error_instead_of_raising():
    outcome = evaluate_line("1" + " + 1" * 5000, {})

    assert outcome.error.kind == ErrorKind.NESTING_TOO_DEEP


def test_nesting_within_the_limit_is_evaluated():
    text = "(" * 90 + "2 * 3" + ")" * 90

    assert evaluate_line(text, {}).value == 6.0


def test_too_deep_assignment_does_not_store():
    env: dict[str, float] = {}

    outcome = evaluate_line("x = " + "(" * 200 + "1" + ")" * 200 + ";", env)

    assert outcome.error.kind == ErrorKind.NESTING_TOO_DEEP
    assert env == {}
