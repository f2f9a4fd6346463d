"""
    Value types for node fields, with conversion, comparison and clamping.
"""
from enum import Enum
from typing import Any


class ValueType(Enum):
    INT = "int"
    STR = "str"
    FLOAT = "float"


class TypeValidator:
    """Conversion and comparison of field values"""

    @staticmethod
    def convert_to_type(value: Any, target_type: ValueType) -> Any:
        """Convert value to target type"""
        if target_type == ValueType.INT:
            return int(value)
        elif target_type == ValueType.FLOAT:
            return float(value)
        else:  # STR
            return str(value)

    @staticmethod
    def compare(value1: Any, value2: Any, operator: str) -> bool:
        """Compare values according to operator"""
        operators = {
            '==': lambda a, b: a == b,
            '!=': lambda a, b: a != b,
            '<': lambda a, b: a < b,
            '<=': lambda a, b: a <= b,
            '>': lambda a, b: a > b,
            '>=': lambda a, b: a >= b,
        }

        if operator not in operators:
            raise ValueError(f"Unknown operator: {operator}")

        try:
            return operators[operator](value1, value2)
        except TypeError as e:
            raise TypeError(f"Cannot compare {type(value1).__name__} and {type(value2).__name__}: {str(e)}")


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""
    return max(lower, min(value, upper))
