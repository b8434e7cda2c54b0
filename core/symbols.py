"""core/symbols.py - read-only identifier table for functions and constants"""
from types import MappingProxyType

import numpy as np

from core.operators import Operators
from core.token_system import FunctionSpec, ConstantSpec


FUNCTION_DEFINITIONS = {
    'sin': FunctionSpec('sin', 1, 'sin_degrees'),    # degrees
    'cos': FunctionSpec('cos', 1, 'cos_degrees'),    # degrees
    'max': FunctionSpec('max', 2, 'max2'),
    'max3': FunctionSpec('max3', 3, 'max3'),
    'fact': FunctionSpec('fact', 1, 'factorial'),
}

CONSTANT_DEFINITIONS = {
    'PI': ConstantSpec('PI', np.float32(np.pi)),
    'TAU': ConstantSpec('TAU', np.float32(2 * np.pi)),
}


class SymbolRegistry:
    """
    Maps identifier text to a function or constant descriptor.

    Lookups are exact and case-sensitive. The tables are frozen on construction;
    kernels are resolved by name on the kernel collection, so tokens only carry
    plain descriptors.
    """

    def __init__(self, functions=None, constants=None, kernels=Operators):
        functions = FUNCTION_DEFINITIONS if functions is None else functions
        constants = CONSTANT_DEFINITIONS if constants is None else constants

        overlap = set(functions) & set(constants)
        if overlap:
            raise ValueError(f"Names registered as both function and constant: {sorted(overlap)}")
        for spec in functions.values():
            if not callable(getattr(kernels, spec.kernel, None)):
                raise ValueError(f"No kernel '{spec.kernel}' for function '{spec.name}'")

        self._functions = MappingProxyType(dict(functions))
        self._constants = MappingProxyType(dict(constants))
        self._kernels = kernels

    @property
    def functions(self):
        """Read-only name -> FunctionSpec table"""
        return self._functions

    @property
    def constants(self):
        """Read-only name -> ConstantSpec table"""
        return self._constants

    def lookup(self, name):
        """Return the FunctionSpec or ConstantSpec for name, or None if unknown"""
        spec = self._functions.get(name)
        if spec is not None:
            return spec
        return self._constants.get(name)

    def function(self, name):
        """FunctionSpec for name; KeyError if unknown"""
        return self._functions[name]

    def constant(self, name):
        """ConstantSpec for name; KeyError if unknown"""
        return self._constants[name]

    def implementation(self, spec):
        """Kernel callable for a function or operator descriptor"""
        kernel = getattr(self._kernels, getattr(spec, 'kernel', spec.name), None)
        if kernel is None:
            raise KeyError(spec.name)
        return kernel

    def function_names(self):
        """Sorted function names"""
        return sorted(self._functions)

    def constant_names(self):
        """Sorted constant names"""
        return sorted(self._constants)

    def __contains__(self, name):
        return name in self._functions or name in self._constants


DEFAULT_REGISTRY = SymbolRegistry()
