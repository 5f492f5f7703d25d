"""bfi interpreter.

Basic program flow:
    1. Lexer: turns source text into a list of Tokens, dropping comments (see bfi/lang/lexical.py)
    2. Jump table: pairs up every '[' with its ']' in both directions. Unbalanced programs fail here, before anything
       is executed
    3. Execution: runs one Token at a time against a Tape until the program cursor runs off the end

Note on loops: a jump lands *on* the matching bracket, and the program cursor is then advanced past it like after any
other token. Jumping to one past the bracket would change how nested loops terminate.
"""

import sys

from bfi.lang.error import BracketError, InputError
from bfi.lang.lexical import Operation, tokenize
from bfi.tape import Tape


def build_jump_table(tokens):
    """Returns dict mapping the index of every '[' to the index of its ']' and vice versa. Raises BracketError if the
    brackets in tokens are unbalanced.
    """
    jump_table = {}
    stack = []

    for idx, token in enumerate(tokens):
        if token.kind is Operation.LOOP_OPEN:
            stack.append(idx)
        elif token.kind is Operation.LOOP_CLOSE:
            if not stack:
                raise BracketError("unmatched '{}': no '[' to close", "]")
            opening = stack.pop()
            jump_table[opening] = idx
            jump_table[idx] = opening

    if stack:
        raise BracketError("unmatched '{}': {} loop(s) never closed", ["[", len(stack)])

    return jump_table


class Interpreter:
    """Runs a bfi program. Owns its tokens, jump table and tape for the whole run.

    stdin and stdout are binary file-like objects; they default to the process' standard streams.
    """

    def __init__(self, source, stdin=None, stdout=None):
        self.tokens = tokenize(source)
        self.jump_table = build_jump_table(self.tokens)

        self.tape = Tape()
        self.program_cursor = 0

        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer

    @property
    def done(self):
        """Whether the program cursor has run past the last token."""
        return self.program_cursor >= len(self.tokens)

    def step(self):
        """Executes the token under the program cursor, then advances the cursor by one. Does nothing once done."""
        if self.done:
            return

        token = self.tokens[self.program_cursor]
        kind = token.kind

        if kind is Operation.INCREMENT:
            self.tape.increment()
        elif kind is Operation.DECREMENT:
            self.tape.decrement()
        elif kind is Operation.MOVE_RIGHT:
            self.tape.move_right()
        elif kind is Operation.MOVE_LEFT:
            self.tape.move_left()
        elif kind is Operation.PRINT:
            self.stdout.write(bytes([self.tape.value]))
        elif kind is Operation.INPUT:
            self.tape.value = self._read_byte(token)
        elif kind is Operation.LOOP_OPEN:
            if self.tape.value == 0:
                self.program_cursor = self.jump_table[self.program_cursor]
        elif kind is Operation.LOOP_CLOSE:
            if self.tape.value != 0:
                self.program_cursor = self.jump_table[self.program_cursor]
        else:
            raise ValueError(f"unknown operation {kind!r}")

        self.program_cursor += 1

    def interpret(self):
        """Runs the program to completion. Programs that never halt make this never return."""
        while not self.done:
            self.step()
        self.stdout.flush()

    def _read_byte(self, token):
        """Blocks for one byte of input on behalf of token. Output is flushed first so prompts are visible."""
        msg = "couldn't fetch user input: failed on ',' at pos {}"
        self.stdout.flush()
        try:
            data = self.stdin.read(1)
        except OSError as err:
            raise InputError(msg + " ({})", [token.pos, err]) from err

        if not data:
            raise InputError(msg + " (end of input)", token.pos)
        return data[0]
