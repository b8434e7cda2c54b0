"""Calculator module - text in, float out"""
from .evaluator import ExpressionCalculator, evaluate, to_rpn_string

__all__ = ['ExpressionCalculator', 'evaluate', 'to_rpn_string']
