"""Lexical analysis for bfi. Source text is scanned one character at a time and every character of the operator
alphabet becomes a Token; everything else is a comment and is dropped.

All grammar can be defined as follows:

```
<program>   ::= (<operator> | <comment>)*
<operator>  ::= "<"         ; move the tape cursor left
              | ">"         ; move the tape cursor right
              | "+"         ; increment current cell (mod 256)
              | "-"         ; decrement current cell (mod 256)
              | "."         ; write current cell to output
              | ","         ; read one byte into current cell
              | "["         ; jump past matching "]" if current cell is zero
              | "]"         ; jump back to matching "[" if current cell is non-zero
<comment>   ::= <any char that is not an operator>
```

Brackets are only paired up later, when the jump table is built (see bfi/interpreter.py).
"""

from dataclasses import dataclass
from enum import Enum


class Operation(Enum):
    """The eight operations of the language, keyed by their source character."""
    MOVE_LEFT = "<"
    MOVE_RIGHT = ">"
    INCREMENT = "+"
    DECREMENT = "-"
    PRINT = "."
    INPUT = ","
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"


@dataclass(frozen=True)
class Token:
    """A single operation and where it came from.

    :param kind: Operation performed by this token
    :param pos: 1-based offset of the token's character in the source text
    """
    kind: Operation
    pos: int

    def __repr__(self):
        return f"Token({self.kind.value!r}, pos={self.pos})"


class Lexer:
    """Turns source text into Tokens. Lexing is total: it never raises."""
    OPERATORS = {operation.value: operation for operation in Operation}

    def __init__(self, source):
        self.source = source

    @staticmethod
    def identify(char):
        """Returns the Operation char stands for, or None if char is a comment."""
        return Lexer.OPERATORS.get(char)

    def lex(self):
        """Returns list of Tokens in source order. Every scanned character advances the position, kept or not."""
        tokens = []
        for pos, char in enumerate(self.source, start=1):
            kind = Lexer.identify(char)
            if kind is not None:
                tokens.append(Token(kind, pos))
        return tokens


def tokenize(source):
    """Shorthand for Lexer(source).lex()."""
    return Lexer(source).lex()
