"""core/shunting_yard.py - infix token sequence to postfix (RPN)"""
import logging

from core.cursor import TokenCursor
from core.errors import ParseError
from core.token_system import TokenType, Associativity, format_tokens

logger = logging.getLogger(__name__)


class _CallFrame:
    """Argument bookkeeping for one open function call"""

    __slots__ = ('function', 'separators')

    def __init__(self, function):
        self.function = function
        self.separators = 0


class ShuntingYardConverter:
    """Converts infix tokens into postfix order (https://en.wikipedia.org/wiki/Shunting-yard_algorithm)"""

    @staticmethod
    def _should_pop(top, incoming):
        """Whether the stack top binds tighter than the incoming operator"""
        if top.type == TokenType.OPEN_PAREN:
            return False
        if top.type == TokenType.FUNCTION:
            return True
        if not top.is_operator():
            return False
        if top.precedence > incoming.precedence:
            return True
        # equal precedence right-associative operators stay on the stack: 2^3^2 = 2^(3^2)
        return (top.precedence == incoming.precedence
                and incoming.associativity == Associativity.LEFT_TO_RIGHT)

    @staticmethod
    def _follows_operand(prev):
        """Whether prev ends an operand: a value, ')' or a postfix operator"""
        return prev is not None and (
            prev.is_operand() or prev.type == TokenType.CLOSE_PAREN or prev.is_postfix_operator()
        )

    @staticmethod
    def _trace(cursor, token, operator_stack, output_queue):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"token: {token.text or '<end>'} | input: {format_tokens(cursor.remaining())}"
                f" | stack: {format_tokens(operator_stack)} | output: {format_tokens(output_queue)}"
            )

    @staticmethod
    def to_postfix(tokens):
        """
        Args:
            tokens: infix token sequence, normally straight from the lexer
        Returns:
            list of Token in postfix order, without parentheses, commas or END_OF_INPUT
        Raises:
            ParseError: mismatched parentheses, misplaced separator, malformed call
                or an operator / operand in the wrong position
        """
        cursor = tokens if isinstance(tokens, TokenCursor) else TokenCursor(tokens)
        follows_operand = ShuntingYardConverter._follows_operand
        output_queue = []
        operator_stack = []
        # one entry per '(' on the operator stack: a _CallFrame for calls, None for grouping
        groups = []

        token = cursor.current()
        while not cursor.at_end():
            prev = cursor.previous()

            if token.is_operand():
                if follows_operand(prev):
                    raise ParseError("missing operator before operand", column=token.column, text=token.text)
                output_queue.append(token)

            elif token.type == TokenType.FUNCTION:
                if follows_operand(prev):
                    raise ParseError("missing operator before function", column=token.column, text=token.text)
                try:
                    paren = cursor.require_next(TokenType.OPEN_PAREN)
                except ParseError as e:
                    raise ParseError(f"expected '(' after function '{token.text}'",
                                     column=e.column, text=e.text) from e
                operator_stack.append(token)
                operator_stack.append(paren)
                groups.append(_CallFrame(token))

            elif token.type == TokenType.OPEN_PAREN:
                if follows_operand(prev):
                    raise ParseError("missing operator before '('", column=token.column, text=token.text)
                groups.append(None)
                operator_stack.append(token)

            elif token.type == TokenType.COMMA:
                while operator_stack and operator_stack[-1].type != TokenType.OPEN_PAREN:
                    output_queue.append(operator_stack.pop())
                if not operator_stack:
                    raise ParseError("misplaced separator or mismatched parentheses",
                                     column=token.column, text=token.text)
                frame = groups[-1]
                if frame is None:
                    raise ParseError("misplaced separator outside a function call",
                                     column=token.column, text=token.text)
                if prev.type in (TokenType.OPEN_PAREN, TokenType.COMMA):
                    raise ParseError("empty argument", column=token.column, text=token.text)
                frame.separators += 1

            elif token.is_operator():
                if not follows_operand(prev):
                    if token.is_postfix_operator():
                        raise ParseError(f"operator '{token.text}' must follow an operand",
                                         column=token.column, text=token.text)
                    # no unary minus: a leading '-' has no left operand either
                    raise ParseError(f"operator '{token.text}' is missing its left operand",
                                     column=token.column, text=token.text)
                while operator_stack and ShuntingYardConverter._should_pop(operator_stack[-1], token):
                    output_queue.append(operator_stack.pop())
                operator_stack.append(token)

            elif token.type == TokenType.CLOSE_PAREN:
                while operator_stack and operator_stack[-1].type != TokenType.OPEN_PAREN:
                    output_queue.append(operator_stack.pop())
                if not operator_stack:
                    raise ParseError("mismatched parentheses", column=token.column, text=token.text)
                operator_stack.pop()  # the '(' is not emitted
                frame = groups.pop()

                if frame is None:
                    if prev.type == TokenType.OPEN_PAREN:
                        raise ParseError("empty parentheses", column=token.column, text=token.text)
                else:
                    if prev.type == TokenType.COMMA:
                        raise ParseError("empty argument", column=token.column, text=token.text)
                    arity = frame.function.arity
                    given = 0 if prev.type == TokenType.OPEN_PAREN else frame.separators + 1
                    if given != arity:
                        raise ParseError(
                            f"function '{frame.function.text}' expects {arity} argument(s), got {given}",
                            column=frame.function.column,
                            text=frame.function.text,
                        )
                    output_queue.append(operator_stack.pop())  # the function itself

            else:
                raise ParseError(f"unexpected token of type {token.type.value}",
                                 column=token.column, text=token.text or None)

            ShuntingYardConverter._trace(cursor, token, operator_stack, output_queue)
            token = cursor.advance()

        while operator_stack:
            top = operator_stack.pop()
            if top.is_parenthesis():
                raise ParseError("mismatched parentheses", column=top.column, text=top.text)
            output_queue.append(top)
            ShuntingYardConverter._trace(cursor, token, operator_stack, output_queue)

        logger.debug(f"Postfix: {format_tokens(output_queue)}")
        return output_queue


def to_postfix(tokens):
    """Module-level shortcut for ShuntingYardConverter.to_postfix"""
    return ShuntingYardConverter.to_postfix(tokens)
