"""core/lexer.py - raw text to token sequence"""
import logging

import numpy as np

from core.errors import LexError
from core.symbols import DEFAULT_REGISTRY
from core.token_system import (
    Token, TokenType, FunctionSpec, OPERATOR_DEFINITIONS, SINGLE_CHAR_TOKENS, format_tokens
)

logger = logging.getLogger(__name__)

WHITESPACE = ' '


def _is_digit(c):
    return '0' <= c <= '9'


def _is_letter(c):
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z')


class Lexer:
    """Scans expression text left to right into tokens, ending with END_OF_INPUT"""

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def tokenize(self, text):
        """
        Args:
            text: expression source
        Returns:
            list of Token, always terminated by an END_OF_INPUT token
        Raises:
            LexError: unrecognized character, malformed numeral or unknown identifier
        """
        tokens = []
        pos = 0
        length = len(text)

        while pos < length:
            c = text[pos]
            column = pos + 1

            if c in WHITESPACE:
                pos += 1
                continue

            if c in OPERATOR_DEFINITIONS:
                tokens.append(Token(TokenType.OPERATOR, c, column, operator=OPERATOR_DEFINITIONS[c]))
                pos += 1
            elif c in SINGLE_CHAR_TOKENS:
                tokens.append(Token(SINGLE_CHAR_TOKENS[c], c, column))
                pos += 1
            elif _is_digit(c) or c == '.':
                token, pos = self._read_number(text, pos)
                tokens.append(token)
            elif _is_letter(c):
                token, pos = self._read_identifier(text, pos)
                tokens.append(token)
            else:
                logger.debug(f"Unrecognized character {c!r} at column {column}")
                raise LexError("unrecognized character", column=column, text=c)

        tokens.append(Token.end_of_input(length + 1))
        logger.debug(f"Tokens: {format_tokens(tokens)}")
        return tokens

    @staticmethod
    def _read_number(text, pos):
        """Read a numeral starting at pos; returns (token, next position)"""
        start = pos
        while pos < len(text) and (_is_digit(text[pos]) or text[pos] == '.'):
            pos += 1

        literal = text[start:pos]
        if literal.count('.') > 1 or not any(_is_digit(c) for c in literal):
            raise LexError("malformed numeral", column=start + 1, text=literal)

        # numerals beyond float32 range become inf, like the arithmetic kernels
        with np.errstate(over='ignore'):
            value = np.float32(literal)
        return Token(TokenType.NUMBER, literal, start + 1, value=value), pos

    def _read_identifier(self, text, pos):
        """Read a name and resolve it through the registry"""
        start = pos
        while pos < len(text) and (_is_letter(text[pos]) or _is_digit(text[pos]) or text[pos] == '_'):
            pos += 1

        name = text[start:pos]
        spec = self.registry.lookup(name)
        if spec is None:
            # no variable storage, so an unknown name cannot be deferred
            raise LexError("unknown identifier", column=start + 1, text=name)

        if isinstance(spec, FunctionSpec):
            return Token(TokenType.FUNCTION, name, start + 1, function=spec), pos
        return Token(TokenType.CONSTANT, name, start + 1, value=spec.value), pos


def tokenize(text, registry=None):
    """Module-level shortcut for Lexer(registry).tokenize"""
    return Lexer(registry).tokenize(text)
