"""
Symbol table for named constants and variables.

Two independent namespaces: constants are registered once and only read
afterwards, variables are created, updated and removed freely. Every single
lookup or mutation is atomic; nothing coordinates a sequence of them.

The golden ratio is seeded under both `phi` and `fi`.
"""

import threading
from typing import Dict, Optional

import numpy as np

from .core.errors import DuplicateSymbolError, check_name, check_number
from .logging_system import LogLevel, log_info

GOLDEN_RATIO = (1.0 + np.sqrt(5.0)) / 2.0

DEFAULT_CONSTANTS: Dict[str, float] = {
    'pi': float(np.pi),
    'e': float(np.e),
    'phi': float(GOLDEN_RATIO),
    'fi': float(GOLDEN_RATIO),
}


class SymbolTable:
    """Name -> value resolution used by `Constant` and `Variable` nodes"""

    def __init__(self, constants: Optional[Dict[str, float]] = None,
                 variables: Optional[Dict[str, float]] = None,
                 seed_defaults: bool = True):
        self._lock = threading.RLock()
        self._constants: Dict[str, float] = {}
        self._variables: Dict[str, float] = {}

        if seed_defaults:
            self._constants.update(DEFAULT_CONSTANTS)
        for name, value in (constants or {}).items():
            self.register_constant(name, value)
        for name, value in (variables or {}).items():
            self.create_variable(name, value)

    # Constants

    def register_constant(self, name: str, value: float):
        check_name(name, 'constant')
        value = check_number(value, f"constant {name!r}")
        with self._lock:
            if name in self._constants:
                raise DuplicateSymbolError(f"constant {name!r} is already registered")
            self._constants[name] = value
        log_info(f"registered constant {name} = {value}", LogLevel.DETAILED)

    def lookup_constant(self, name: str) -> Optional[float]:
        """Value of the constant, or None when it is not registered"""
        with self._lock:
            return self._constants.get(name)

    def has_constant(self, name: str) -> bool:
        with self._lock:
            return name in self._constants

    def constants(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._constants)

    # Variables

    def create_variable(self, name: str, value: float = 0.0):
        check_name(name, 'variable')
        value = check_number(value, f"variable {name!r}")
        with self._lock:
            if name in self._variables:
                raise DuplicateSymbolError(f"variable {name!r} already exists")
            self._variables[name] = value
        log_info(f"created variable {name} = {value}", LogLevel.DETAILED)

    def set_variable(self, name: str, value: float):
        """Bind `name` to `value`, creating the variable if needed"""
        check_name(name, 'variable')
        value = check_number(value, f"variable {name!r}")
        with self._lock:
            self._variables[name] = value
        log_info(f"set variable {name} = {value}", LogLevel.DETAILED)

    def get_variable(self, name: str) -> Optional[float]:
        """Value of the variable, or None when it does not exist"""
        with self._lock:
            return self._variables.get(name)

    def variable_exists(self, name: str) -> bool:
        with self._lock:
            return name in self._variables

    def remove_variable(self, name: str) -> bool:
        """Remove one variable; returns False if it did not exist"""
        with self._lock:
            removed = self._variables.pop(name, None) is not None
        if removed:
            log_info(f"removed variable {name}", LogLevel.DETAILED)
        return removed

    def remove_all_variables(self):
        with self._lock:
            self._variables.clear()
        log_info("removed all variables", LogLevel.DETAILED)

    def variables(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._variables)

    def __repr__(self) -> str:
        with self._lock:
            return (f"SymbolTable(constants={len(self._constants)}, "
                    f"variables={sorted(self._variables)})")
