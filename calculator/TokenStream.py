# TokenStream.py
"""""
Lexer for the expression calculator.

A CharacterReader walks over one input string; a TokenStream turns its characters
into Tokens on demand and can hold back exactly one Token for the grammar.
"""""

import logging
import re
from dataclasses import dataclass

from . import error as E

logger = logging.getLogger(__name__)

NUMBER = "number"
PRINT = ";"     # statement terminator
END = "end"     # no characters left

Operations = ["(", ")", "+", "-", "*", "/", "%"]

# digits, at most one '.', optional exponent (only taken when digits follow it)
_number_pattern = re.compile(r"\d*\.?\d*(?:[eE][+-]?\d+)?", re.ASCII)
_mantissa_start = re.compile(r"\.?\d", re.ASCII)


@dataclass(frozen=True)
class Token:
    kind: str
    value: float = 0.0

    def __str__(self):
        if self.kind == NUMBER:
            return repr(self.value)
        if self.kind == END:
            return "end of input"
        return self.kind


class CharacterReader:
    """Cursor over a single input string."""

    def __init__(self, text):
        self.text = text
        self.position = 0

    def skip_whitespace(self):
        while self.position < len(self.text) and self.text[self.position].isspace():
            self.position += 1

    def peek(self):
        """Next character without consuming it, or None at the end."""
        if self.position < len(self.text):
            return self.text[self.position]
        return None

    def read(self):
        ch = self.peek()
        if ch is not None:
            self.position += 1
        return ch

    def read_number(self):
        """Consume the longest float literal at the cursor.

        Raises E.SyntaxError when the characters there do not form a number (e.g. a lone '.').
        """
        start = self.position
        match = _number_pattern.match(self.text, start)
        literal = match.group(0)
        if not _mantissa_start.match(literal):
            raise E.SyntaxError(f"Malformed number at position {start}", code="3008")
        self.position = match.end()
        return float(literal)


class TokenStream:

    def __init__(self, text=""):
        self.full = False
        self.buffer = None
        self.reader = CharacterReader(text)

    def reset(self, text):
        """Start over on a new input; forgets any pushed-back Token."""
        self.reader = CharacterReader(text)
        self.full = False
        self.buffer = None

    def putback(self, token):
        if self.full:
            raise E.PutbackError(f"putback() of {token} into a full buffer (holding {self.buffer})")
        self.buffer = token
        self.full = True

    def get(self):
        if self.full:
            self.full = False
            token = self.buffer
            self.buffer = None
            return token

        self.reader.skip_whitespace()
        ch = self.reader.peek()

        if ch is None:
            token = Token(END)
        elif ch == PRINT or ch in Operations:
            self.reader.read()
            token = Token(ch)
        elif ch in "0123456789.":
            # cursor is still on ch, so the number reader sees the whole literal
            token = Token(NUMBER, self.reader.read_number())
        else:
            raise E.LexicalError(f"Bad token '{ch}' at position {self.reader.position}", code="3031")

        logger.debug("Token: %s", token)
        return token
