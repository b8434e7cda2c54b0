"""core/operators.py - float32 arithmetic kernels"""
import logging

import numpy as np

logger = logging.getLogger(__name__)

FLOAT = np.float32


def as_float(value):
    """Coerce an operand to the evaluator's single-precision type"""
    return FLOAT(value)


class Operators:
    """Collection of float32 kernels, dispatched by name from the evaluator

    Division and modulo by zero follow IEEE-754 (inf / nan) instead of raising,
    so every kernel runs with numpy floating point warnings silenced.
    """

    # Binary operators ====================

    @staticmethod
    def add(left, right):
        """left + right"""
        with np.errstate(all='ignore'):
            return as_float(as_float(left) + as_float(right))

    @staticmethod
    def sub(left, right):
        """left - right"""
        with np.errstate(all='ignore'):
            return as_float(as_float(left) - as_float(right))

    @staticmethod
    def mul(left, right):
        """left * right"""
        with np.errstate(all='ignore'):
            return as_float(as_float(left) * as_float(right))

    @staticmethod
    def div(left, right):
        """left / right; division by zero gives inf or nan"""
        with np.errstate(all='ignore'):
            return as_float(np.divide(as_float(left), as_float(right)))

    @staticmethod
    def mod(left, right):
        """C-style remainder: result takes the sign of the dividend"""
        with np.errstate(all='ignore'):
            return as_float(np.fmod(as_float(left), as_float(right)))

    @staticmethod
    def pow(left, right):
        """left raised to right"""
        with np.errstate(all='ignore'):
            return as_float(np.power(as_float(left), as_float(right)))

    # Unary operators ====================

    @staticmethod
    def factorial(operand):
        """
        Integer factorial of the truncated operand, by repeated multiplication.
        Operands below 2 give 1; nan and inf pass through unchanged.
        """
        operand = as_float(operand)
        if not np.isfinite(operand):
            return operand

        n = int(np.trunc(operand))
        result = FLOAT(1)
        with np.errstate(over='ignore'):
            while n > 1:
                result = as_float(result * FLOAT(n))
                if np.isinf(result):
                    # float32 overflows past 34!
                    break
                n -= 1
        return result

    # Functions ====================

    @staticmethod
    def sin_degrees(angle):
        """Sine of an angle in degrees"""
        with np.errstate(all='ignore'):
            return as_float(np.sin(np.deg2rad(as_float(angle))))

    @staticmethod
    def cos_degrees(angle):
        """Cosine of an angle in degrees"""
        with np.errstate(all='ignore'):
            return as_float(np.cos(np.deg2rad(as_float(angle))))

    @staticmethod
    def max2(a, b):
        """Larger of two operands"""
        return as_float(np.maximum(as_float(a), as_float(b)))

    @staticmethod
    def max3(a, b, c):
        """Largest of three operands"""
        return as_float(np.maximum(np.maximum(as_float(a), as_float(b)), as_float(c)))
