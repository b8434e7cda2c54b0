import pytest

from calculator import ExpressionCalculator, evaluate, to_rpn_string
from core.errors import EvalError, EvaluationError, LexError, ParseError


# --- Basic arithmetic ---

def test_addition() -> None:
    assert evaluate("2 + 3") == pytest.approx(5.0)


def test_division() -> None:
    assert evaluate("15 / 4") == pytest.approx(3.75)


def test_returns_python_float() -> None:
    assert type(evaluate("1 + 1")) is float


# --- Precedence and associativity ---

def test_right_associative_power() -> None:
    assert evaluate("2^3^2") == 512


def test_standard_precedence() -> None:
    # 3 + 8 / (-4)^8
    assert evaluate("3+4*2/(1-5)^2^3") == pytest.approx(3.0, abs=1e-3)
    assert evaluate("3+4*2/(1-5)^2^3") == pytest.approx(3.0001220703125, rel=1e-6)


def test_left_associative_subtraction() -> None:
    assert evaluate("10 - 4 - 3") == 3


@pytest.mark.parametrize(
    "plain, grouped",
    [
        ("2+3", "(2+3)"),
        ("2*3+4", "((2*3))+(4)"),
        ("max(2,3)", "(max((2),(3)))"),
        ("2^3^2", "2^(3^2)"),
    ],
)
def test_redundant_parentheses(plain, grouped) -> None:
    assert evaluate(plain) == evaluate(grouped)


# --- Functions and constants ---

def test_function_arity_is_respected() -> None:
    assert evaluate("max(2,3)") == 3
    assert evaluate("max3(1,5,3)") == 5
    assert evaluate("fact(5)") == 120


def test_trig_in_degrees() -> None:
    assert evaluate("sin(30)") == pytest.approx(0.5, abs=1e-6)
    assert evaluate("cos(0)") == pytest.approx(1.0)
    assert evaluate("sin(90) + cos(90)") == pytest.approx(1.0, abs=1e-6)


def test_fact_truncates() -> None:
    assert evaluate("fact(4.7)") == 24


def test_constants() -> None:
    assert evaluate("PI*2") == pytest.approx(evaluate("6.283185"), rel=1e-6)
    assert evaluate("(TAU-PI)*2") == evaluate("PI*2")


def test_postfix_factorial() -> None:
    assert evaluate("3! + 1") == 7
    assert evaluate("2^3!") == 64


# --- Errors ---

@pytest.mark.parametrize("text", ["(2+3", "2+3)"])
def test_mismatched_parentheses(text) -> None:
    with pytest.raises(ParseError):
        evaluate(text)


def test_empty_argument_is_an_error() -> None:
    with pytest.raises(EvaluationError):
        evaluate("max(2,)")


def test_errors_come_from_the_failing_stage() -> None:
    with pytest.raises(LexError):
        evaluate("2 # 3")
    with pytest.raises(ParseError):
        evaluate("max(1)")
    with pytest.raises(EvalError):
        evaluate("2 +")


def test_missing_operator_is_a_parse_error() -> None:
    for text in ("2 3 +", "-3", "- 3 4", "1 + 2 3 *"):
        with pytest.raises(ParseError):
            evaluate(text)


def test_empty_input() -> None:
    with pytest.raises(EvalError, match="empty expression"):
        evaluate("   ")


def test_division_by_zero_returns_inf() -> None:
    assert evaluate("1/0") == float("inf")


# --- No hidden state ---

def test_evaluation_is_idempotent() -> None:
    text = "max3(1, fact(4), 2^3) % 5 + sin(30)"
    assert evaluate(text) == evaluate(text)


def test_failure_does_not_affect_next_call() -> None:
    before = evaluate("1 + 2 * 3")
    with pytest.raises(ParseError):
        evaluate("(1 + 2")
    assert evaluate("1 + 2 * 3") == before


# --- ExpressionCalculator ---

def test_evaluate_many_continues_after_failure() -> None:
    calc = ExpressionCalculator()
    results = calc.evaluate_many(["1 + 1", "(1", "2 * 3"])
    assert results[0] == ("1 + 1", 2.0)
    assert results[1][0] == "(1"
    assert isinstance(results[1][1], ParseError)
    assert results[2] == ("2 * 3", 6.0)


def test_to_rpn_string() -> None:
    assert to_rpn_string("3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3") == "3 4 2 * 1 5 - 2 3 ^ ^ / +"
    assert ExpressionCalculator().to_rpn_string("max(1, 2)") == "1 2 max"


def test_tokenize_exposes_lexer_output() -> None:
    tokens = ExpressionCalculator().tokenize("1+2")
    assert [t.text for t in tokens] == ["1", "+", "2", ""]
