from .MathEngine import Calculator, CalculationResult, calculate, evaluate, format_result
from .error import MathError

__all__ = ["Calculator", "CalculationResult", "MathError", "calculate", "evaluate", "format_result"]
