"""Core module - tokens, symbol registry, lexer, shunting-yard converter and RPN evaluator"""
from .token_system import (
    TokenType, Associativity, Token, OperatorSpec, FunctionSpec, ConstantSpec,
    OPERATOR_DEFINITIONS
)
from .errors import EvaluationError, LexError, ParseError, EvalError
from .operators import Operators
from .symbols import SymbolRegistry, DEFAULT_REGISTRY, FUNCTION_DEFINITIONS, CONSTANT_DEFINITIONS
from .lexer import Lexer, tokenize
from .cursor import TokenCursor
from .shunting_yard import ShuntingYardConverter, to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate_postfix

__all__ = [
    'TokenType', 'Associativity', 'Token', 'OperatorSpec', 'FunctionSpec', 'ConstantSpec',
    'OPERATOR_DEFINITIONS', 'EvaluationError', 'LexError', 'ParseError', 'EvalError',
    'Operators', 'SymbolRegistry', 'DEFAULT_REGISTRY', 'FUNCTION_DEFINITIONS',
    'CONSTANT_DEFINITIONS', 'Lexer', 'tokenize', 'TokenCursor', 'ShuntingYardConverter',
    'to_postfix', 'RPNEvaluator', 'evaluate_postfix'
]
