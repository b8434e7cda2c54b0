"""core/token_system.py - token kinds, operator table and immutable descriptors"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"
    CONSTANT = "constant"
    OPERATOR = "operator"
    FUNCTION = "function"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    COMMA = "comma"
    END_OF_INPUT = "end_of_input"


class Associativity(Enum):
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"


class _Frozen:
    """Attributes are set once in __init__ and never rebound"""

    __slots__ = ()

    def _set(self, **attrs):
        for name, value in attrs.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")


class OperatorSpec(_Frozen):
    __slots__ = ('symbol', 'name', 'precedence', 'associativity', 'arity')

    def __init__(self, symbol, name, precedence, associativity, arity=2):
        self._set(symbol=symbol, name=name, precedence=precedence,
                  associativity=associativity, arity=arity)

    def __repr__(self):
        return f"OperatorSpec({self.symbol!r}, prec={self.precedence}, {self.associativity.value})"


class FunctionSpec(_Frozen):
    __slots__ = ('name', 'arity', 'kernel')

    def __init__(self, name, arity, kernel):
        if arity < 1:
            raise ValueError(f"Function '{name}' must take at least one argument")
        self._set(name=name, arity=arity, kernel=kernel)

    def __repr__(self):
        return f"FunctionSpec({self.name!r}, arity={self.arity})"


class ConstantSpec(_Frozen):
    __slots__ = ('name', 'value')

    def __init__(self, name, value):
        self._set(name=name, value=value)

    def __repr__(self):
        return f"ConstantSpec({self.name!r}, {self.value})"


L_R = Associativity.LEFT_TO_RIGHT
R_L = Associativity.RIGHT_TO_LEFT

# Operator table; name doubles as the Operators kernel name
OPERATOR_DEFINITIONS = {
    '+': OperatorSpec('+', 'add', 2, L_R),
    '-': OperatorSpec('-', 'sub', 2, L_R),
    '*': OperatorSpec('*', 'mul', 3, L_R),
    '/': OperatorSpec('/', 'div', 3, L_R),
    '%': OperatorSpec('%', 'mod', 3, L_R),
    '^': OperatorSpec('^', 'pow', 4, R_L),
    # postfix factorial
    '!': OperatorSpec('!', 'factorial', 5, L_R, arity=1),
}

SINGLE_CHAR_TOKENS = {
    '(': TokenType.OPEN_PAREN,
    ')': TokenType.CLOSE_PAREN,
    ',': TokenType.COMMA,
}


class Token(_Frozen):
    __slots__ = ('type', 'text', 'column', 'value', 'operator', 'function')

    def __init__(self, token_type, text, column, value=None, operator=None, function=None):
        self._set(type=token_type, text=text, column=column,
                  value=value, operator=operator, function=function)

    @classmethod
    def end_of_input(cls, column):
        """Sentinel token closing every lexer output"""
        return cls(TokenType.END_OF_INPUT, '', column)

    @property
    def precedence(self):
        """Operator precedence, None for non-operators"""
        return self.operator.precedence if self.operator is not None else None

    @property
    def associativity(self):
        """Operator associativity, None for non-operators"""
        return self.operator.associativity if self.operator is not None else None

    @property
    def arity(self):
        """Operands consumed by an operator or function, 0 otherwise"""
        if self.operator is not None:
            return self.operator.arity
        if self.function is not None:
            return self.function.arity
        return 0

    def is_operand(self):
        """Number or constant"""
        return self.type in (TokenType.NUMBER, TokenType.CONSTANT)

    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def is_postfix_operator(self):
        """Unary operator written after its operand, e.g. !"""
        return self.type == TokenType.OPERATOR and self.operator.arity == 1

    def is_parenthesis(self):
        return self.type in (TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text, self.column) == (other.type, other.text, other.column)

    def __hash__(self):
        return hash((self.type, self.text, self.column))

    def __repr__(self):
        return f"Token({self.type.value}, {self.text!r}, col={self.column})"


def describe(token_type):
    """Human readable name for diagnostics"""
    return {
        TokenType.NUMBER: "number",
        TokenType.CONSTANT: "constant",
        TokenType.OPERATOR: "operator",
        TokenType.FUNCTION: "function",
        TokenType.OPEN_PAREN: "'('",
        TokenType.CLOSE_PAREN: "')'",
        TokenType.COMMA: "','",
        TokenType.END_OF_INPUT: "end of input",
    }[token_type]


def format_tokens(tokens):
    """Space separated token text, used by the debug trace and the CLI"""
    return ' '.join(t.text for t in tokens if t.type != TokenType.END_OF_INPUT)
