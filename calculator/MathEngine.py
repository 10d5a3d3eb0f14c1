# MathEngine.py
"""""
Core calculation engine for the expression calculator.

Pipeline
--------
1) TokenStream: pulls Tokens lazily out of the input string (one Token of pushback).
2) Grammar (recursive descent, evaluated while parsing):
       expression := term (('+' | '-') term)*
       term       := primary (('*' | '/' | '%') primary)*
       primary    := '(' expression ')' | number | '-' primary | '+' primary
3) Entry point: skips leading ';', runs the grammar, checks for trailing input and
   turns any MathError into a CalculationResult without a value.
4) Formatter: renders a result with the default '%g' conversion.
"""""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

from . import config_manager as config_manager
from . import error as E
from .TokenStream import TokenStream, NUMBER, PRINT, END

logger = logging.getLogger(__name__)

MODULO_OPERANDS = ("term", "primary")

# a '(' level costs three Python frames (primary → expression → term)
MAX_NESTING = 200


# -----------------------------
# Result type
# -----------------------------

@dataclass
class CalculationResult:
    """Outcome of one evaluation: either a value or the error that stopped it, never both."""
    problem: str
    value: Optional[float] = None
    error: Optional[E.MathError] = None

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


# -----------------------------
# Small helpers
# -----------------------------

def truncate(value):
    """Drop the fractional part (toward zero), like a C cast to int."""
    try:
        return int(value)
    except (OverflowError, ValueError):
        raise E.CalculationError(f"Cannot truncate {value} to an integer", code="3026")


def remainder(dividend, divisor):
    """Integer remainder with the sign of the dividend (C semantics, -7 % 2 == -1)."""
    rest = abs(dividend) % abs(divisor)
    return -rest if dividend < 0 else rest


def format_result(value):
    """Default numeric-to-text conversion: '%g', six significant digits."""
    if value == 0:
        value = 0.0  # no "-0"
    return format(value, "g")


# -----------------------------
# Calculator
# -----------------------------

class Calculator:

    def __init__(self, settings=None):
        if settings is None:
            settings = config_manager.load_setting_value("all")
        self.allow_trailing_input = settings.get("allow_trailing_input", False)
        if not isinstance(self.allow_trailing_input, bool):
            raise E.ConfigurationError(
                f"allow_trailing_input must be true or false, got {self.allow_trailing_input!r}", code="5001"
            )
        self.modulo_operand = settings.get("modulo_operand_precedence", "term")
        if self.modulo_operand not in MODULO_OPERANDS:
            raise E.ConfigurationError(
                f"modulo_operand_precedence must be one of {MODULO_OPERANDS}, got {self.modulo_operand!r}",
                code="5001"
            )
        self.ts = TokenStream()
        self.depth = 0

    @contextmanager
    def nested(self):
        """One level deeper into '(', a unary sign or the right side of '%'."""
        self.depth += 1
        if self.depth > MAX_NESTING:
            raise E.SyntaxError(f"Expression nested deeper than {MAX_NESTING} levels", code="3035")
        try:
            yield
        finally:
            self.depth -= 1

    # ---- Grammar, lowest precedence first ----

    def expression(self):
        """Addition and subtraction."""
        left = self.term()
        t = self.ts.get()

        while True:
            if t.kind == '+':
                left += self.term()
                t = self.ts.get()
            elif t.kind == '-':
                left -= self.term()
                t = self.ts.get()
            else:
                self.ts.putback(t)
                return left

    def term(self):
        """Multiplication, division and integer modulo."""
        left = self.primary()
        t = self.ts.get()

        while True:
            if t.kind == '*':
                left *= self.primary()
                t = self.ts.get()

            elif t.kind == '/':
                d = self.primary()
                if d == 0:
                    raise E.CalculationError("Division by zero", code="3003")
                left /= d
                t = self.ts.get()

            elif t.kind == '%':
                i1 = truncate(left)
                if self.modulo_operand == "term":
                    # right-hand side binds as a whole term: 7 % 2 * 3 == 7 % 6
                    with self.nested():
                        i2 = truncate(self.term())
                else:
                    i2 = truncate(self.primary())
                if i2 == 0:
                    raise E.CalculationError("Modulo by zero", code="3032")
                left = float(remainder(i1, i2))
                t = self.ts.get()

            else:
                self.ts.putback(t)
                return left

    def primary(self):
        """Numbers, sub-expressions in '()' and unary signs."""
        t = self.ts.get()

        if t.kind == '(':
            with self.nested():
                d = self.expression()
            t = self.ts.get()
            if t.kind != ')':
                raise E.SyntaxError(f"')' expected, found {t}", code="3009")
            return d
        elif t.kind == NUMBER:
            return t.value
        elif t.kind == '-':
            with self.nested():
                return -self.primary()
        elif t.kind == '+':
            with self.nested():
                return self.primary()
        elif t.kind == END:
            raise E.SyntaxError("Missing Number.", code="3027")
        else:
            raise E.SyntaxError(f"primary expected, found {t}", code="3011")

    # ---- Entry point ----

    def evaluate(self, problem):
        """Evaluate one expression; failures come back inside the result instead of being raised."""
        try:
            try:
                value = self._run(problem)
            except RecursionError:
                # only when sys.setrecursionlimit() was lowered below what MAX_NESTING needs
                raise E.SyntaxError("Expression nested too deeply", code="3035")
        except E.MathError as e:
            e.equation = problem
            logger.info("Evaluation of %r failed with %s: %s", problem, e.code, e.message)
            return CalculationResult(problem=problem, error=e)

        logger.debug("%r = %r", problem, value)
        return CalculationResult(problem=problem, value=value)

    def _run(self, problem):
        self.ts.reset(problem)
        self.depth = 0

        t = self.ts.get()
        while t.kind == PRINT:
            logger.debug("Skipping leading ';'")
            t = self.ts.get()
        self.ts.putback(t)

        value = self.expression()

        if not self.allow_trailing_input:
            t = self.ts.get()
            while t.kind == PRINT:
                t = self.ts.get()
            if t.kind != END:
                raise E.SyntaxError(f"Unexpected token after expression: {t}", code="3034")

        return value


# -----------------------------
# Public entry points
# -----------------------------

def evaluate(problem, settings=None):
    """Evaluate with a fresh Calculator, so no state is shared between calls."""
    return Calculator(settings).evaluate(problem)


def calculate(problem, settings=None):
    """Main API: evaluate → format → render string. Raises the MathError on failure."""
    result = evaluate(problem, settings)
    return format_result(result.unwrap())


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    try:
        print("= " + calculate(problem + PRINT))
    except E.MathError as e:
        print(e.describe())


if __name__ == "__main__":
    test_main()
