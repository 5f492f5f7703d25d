"""Memory for bfi programs: a row of byte cells that grows on demand at both ends.

Cells are stored around a fixed origin. Offsets >= 0 live in one list and negative offsets in another (offset -1 at
index 0), so growing leftwards is an append rather than an insert at the front. Seen from outside, the tape behaves
like a single list in which moving left off index 0 inserts a new zero cell at index 0.
"""

CELL_MODULUS = 256


class Tape:
    """Growable tape of unsigned 8-bit cells. Starts as a single zero cell with the cursor on it."""

    def __init__(self):
        self._right = [0]  # offsets 0, 1, 2, ...
        self._left = []    # offsets -1, -2, -3, ...
        self._offset = 0   # offset of the cursor relative to the origin

    @property
    def value(self):
        """Value of the cell under the cursor."""
        if self._offset >= 0:
            return self._right[self._offset]
        return self._left[-self._offset - 1]

    @value.setter
    def value(self, value):
        value %= CELL_MODULUS
        if self._offset >= 0:
            self._right[self._offset] = value
        else:
            self._left[-self._offset - 1] = value

    @property
    def cursor(self):
        """Index of the current cell, counted from the leftmost cell."""
        return self._offset + len(self._left)

    @property
    def cells(self):
        """Copy of all cells, leftmost first."""
        return self._left[::-1] + self._right

    def increment(self):
        self.value += 1

    def decrement(self):
        self.value -= 1

    def move_right(self):
        """Moves the cursor right, appending a zero cell if it falls off the end."""
        self._offset += 1
        if self._offset >= len(self._right):
            self._right.append(0)

    def move_left(self):
        """Moves the cursor left, adding a zero cell at the front if it falls off the start."""
        self._offset -= 1
        if -self._offset > len(self._left):
            self._left.append(0)

    def __len__(self):
        return len(self._left) + len(self._right)

    def __repr__(self):
        return f"Tape(cells={self.cells}, cursor={self.cursor})"
