"""RPN evaluator - dispatches operators and functions to the Operators kernels"""
import logging

from core.errors import EvalError
from core.symbols import DEFAULT_REGISTRY
from core.token_system import TokenType, format_tokens

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """Evaluates a postfix token sequence with a single operand stack"""

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    @staticmethod
    def _pop_operands(stack, count, token):
        """Pop count operands and return them in push (source) order"""
        if len(stack) < count:
            logger.debug(f"Insufficient operands for {token.text!r}: need {count}, have {len(stack)}")
            raise EvalError(
                f"operand stack underflow: '{token.text}' needs {count} operand(s), found {len(stack)}",
                column=token.column,
                text=token.text,
            )
        operands = [stack.pop() for _ in range(count)]
        operands.reverse()
        return operands

    def evaluate(self, postfix):
        """
        Args:
            postfix: token sequence in postfix order
        Returns:
            numpy.float32 result
        Raises:
            EvalError: operand stack underflow or final stack size other than one
        """
        stack = []
        postfix = list(postfix)

        for token in postfix:
            if token.is_operand():
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                # binary kernels take (left, right); right was pushed last
                operands = self._pop_operands(stack, token.operator.arity, token)
                kernel = self.registry.implementation(token.operator)
                stack.append(kernel(*operands))

            elif token.type == TokenType.FUNCTION:
                operands = self._pop_operands(stack, token.function.arity, token)
                kernel = self.registry.implementation(token.function)
                stack.append(kernel(*operands))

            else:
                raise EvalError(f"unexpected token of type {token.type.value}",
                                column=token.column, text=token.text or None)

        if not stack:
            raise EvalError("empty expression")
        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluating: {format_tokens(postfix)}")
            raise EvalError(f"unbalanced expression: {len(stack)} values left on the operand stack")

        return stack[0]


def evaluate_postfix(postfix, registry=None):
    """Module-level shortcut for RPNEvaluator(registry).evaluate"""
    return RPNEvaluator(registry).evaluate(postfix)
