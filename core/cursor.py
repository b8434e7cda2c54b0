"""core/cursor.py - position-tracked view over a token sequence"""
from core.errors import ParseError
from core.token_system import Token, TokenType, describe


class TokenCursor:
    """
    Read-only cursor over tokens. Reads past the end return the END_OF_INPUT
    sentinel, which is appended if the sequence does not already end with one.
    """

    def __init__(self, tokens):
        tokens = tuple(tokens)
        if not tokens or tokens[-1].type != TokenType.END_OF_INPUT:
            column = tokens[-1].column + len(tokens[-1].text) if tokens else 1
            tokens = tokens + (Token.end_of_input(column),)
        self._tokens = tokens
        self._index = 0

    def current(self):
        """Token under the cursor"""
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return self._tokens[-1]

    def peek(self, offset=1):
        """Token offset positions ahead, without moving"""
        index = self._index + offset
        if index < len(self._tokens):
            return self._tokens[index]
        return self._tokens[-1]

    def advance(self):
        """Move forward one token and return the new current token"""
        if self._index < len(self._tokens) - 1:
            self._index += 1
        return self.current()

    def previous(self, back=1):
        """Token back positions behind, or None before the start"""
        index = self._index - back
        if index < 0:
            return None
        return self._tokens[index]

    def require_next(self, token_type):
        """Advance and return the new token, which must be of token_type"""
        token = self.advance()
        if token.type != token_type:
            raise ParseError(
                f"expected {describe(token_type)}, found {describe(token.type)}",
                column=token.column,
                text=token.text or None,
            )
        return token

    def at_end(self):
        """Whether the cursor sits on the end-of-input sentinel"""
        return self.current().type == TokenType.END_OF_INPUT

    def remaining(self):
        """Tokens from the cursor up to, not including, the sentinel"""
        return self._tokens[self._index:-1]

    def __len__(self):
        return len(self._tokens)
