import logging
from typing import Iterable, List, Tuple, Union

from core import (
    Lexer, ShuntingYardConverter, RPNEvaluator, DEFAULT_REGISTRY, EvaluationError
)
from core.token_system import format_tokens

logger = logging.getLogger(__name__)


class ExpressionCalculator:
    """Runs text through lexer, shunting-yard and RPN evaluation"""

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.lexer = Lexer(self.registry)
        self.converter = ShuntingYardConverter
        self.rpn_evaluator = RPNEvaluator(self.registry)

    def tokenize(self, text: str) -> list:
        """Lexer stage only"""
        return self.lexer.tokenize(text)

    def to_postfix(self, text: str) -> list:
        """Lexer and shunting-yard stages"""
        return self.converter.to_postfix(self.tokenize(text))

    def evaluate(self, text: str) -> float:
        """
        Args:
            text: infix expression, e.g. "3 + 4 * 2 / (1 - 5) ^ 2 ^ 3"
        Returns:
            the result as a Python float holding the single-precision value
        Raises:
            EvaluationError: LexError, ParseError or EvalError from the failing stage
        """
        try:
            tokens = self.tokenize(text)
            postfix = self.converter.to_postfix(tokens)
            result = self.rpn_evaluator.evaluate(postfix)
        except EvaluationError as e:
            logger.debug(f"Evaluation of {text!r} failed: {e}")
            raise
        return float(result)

    def evaluate_many(self, texts: Iterable[str]) -> List[Tuple[str, Union[float, EvaluationError]]]:
        """Evaluate each expression; a failure is recorded and the next one still runs"""
        results = []
        for text in texts:
            try:
                results.append((text, self.evaluate(text)))
            except EvaluationError as e:
                results.append((text, e))
        return results

    def to_rpn_string(self, text: str) -> str:
        """Postfix form as space separated text"""
        return format_tokens(self.to_postfix(text))


_default_calculator = ExpressionCalculator()


def evaluate(text: str) -> float:
    """Evaluate text with the default registry"""
    return _default_calculator.evaluate(text)


def to_rpn_string(text: str) -> str:
    return _default_calculator.to_rpn_string(text)
