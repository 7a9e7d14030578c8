"""
liquid_sorter.py
A solver for the liquid sorting puzzle.

This solver uses a best-first search (A*-shaped, guided by a count of
color boundaries) to find a short sequence of pours that leaves every
non-empty bottle full of a single color.

Accepts the game info from stdin, with one bottle per line written
bottom to top, one character per slot. An empty slot is written as "."
and a blank line is an empty bottle. The first line may hold the number
of bottles, which is then checked against the bottles given.

Example run:
  $ printf 'AABB\nBBAA\n....\n' | python liquid_sorter.py
"""

# =============================================================================

import heapq
import itertools
import sys
import time
from collections import namedtuple

# =============================================================================

DEBUG = False
# How many expanded states between progress lines in debug mode
DEBUG_EVERY = 10000

# The number of units in a single bottle
CAPACITY = 4
# A placeholder value for when a color doesn't exist in a slot
EMPTY = "."

# =============================================================================


class PourException(Exception):
    """An error that occurs while trying to pour."""


# =============================================================================


class Bottle:
    """Representation of a bottle, with slots ordered bottom to top."""

    def __init__(self, state):
        self._state = tuple(state)
        if len(self._state) != CAPACITY:
            raise ValueError(f"bottle must have {CAPACITY} slots")
        for token in self._state:
            # board keys join the tokens, so each must be one character
            if not isinstance(token, str) or len(token) != 1:
                raise ValueError(f"slot must be a single character: {token!r}")
        self._hash_value = hash(self._state)

    @classmethod
    def empty(cls):
        return cls(EMPTY for _ in range(CAPACITY))

    @classmethod
    def from_string(cls, row):
        """Builds a bottle from a row such as "AB..".
        Raises a ValueError if the row is not a well-formed bottle.
        """
        if len(row) != CAPACITY:
            raise ValueError(f"bottle must have {CAPACITY} slots: {row!r}")
        seen_empty = False
        for token in row:
            if token.isspace():
                raise ValueError(f"bottle has a blank slot: {row!r}")
            if token == EMPTY:
                seen_empty = True
            elif seen_empty:
                raise ValueError(
                    f"bottle has an empty space under a color: {row!r}"
                )
        return cls(row)

    def __iter__(self):
        return iter(self._state)

    def __len__(self):
        return len(self._state)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Bottle):
            return NotImplemented
        return self._state == other._state

    def __hash__(self):
        return self._hash_value

    def __getitem__(self, index):
        return self._state[index]

    def __str__(self):
        return "".join(self._state)

    def __repr__(self):
        return f"Bottle({str(self)!r})"

    def top(self):
        """Returns the top color and its index, or (None, -1) if the
        bottle is empty.
        """
        for i in range(CAPACITY - 1, -1, -1):
            if self._state[i] != EMPTY:
                return self._state[i], i
        return None, -1

    def is_full(self):
        return self._state[CAPACITY - 1] != EMPTY

    def is_empty(self):
        # slots are filled from the bottom, so only the first needs checking
        return self._state[0] == EMPTY

    def empty_slots(self):
        count = 0
        for i in range(CAPACITY - 1, -1, -1):
            if self._state[i] != EMPTY:
                break
            count += 1
        return count

    def top_run_length(self):
        """Returns how many units of the top color sit together at the
        top of the bottle.
        """
        if self.is_empty():
            return 0
        color, index = self.top()
        count = 0
        for i in range(index, -1, -1):
            if self._state[i] != color:
                break
            count += 1
        return count

    def is_uniform(self):
        first, *rest = self._state
        return all(color == first for color in rest)


class Board:
    """All the bottles."""

    def __init__(self, bottles):
        self._bottles = tuple(bottles)
        self._key = "".join(str(bottle) for bottle in self._bottles)
        self._is_solved = self._check_solved()

    @classmethod
    def parse(cls, rows, num_bottles=None):
        """Builds a board from one row per bottle, each written bottom to
        top. An empty row is an empty bottle.
        Raises a ValueError on malformed input.
        """
        rows = list(rows)
        if num_bottles is not None and num_bottles != len(rows):
            raise ValueError(
                f"expected {num_bottles} bottles but got {len(rows)}"
            )
        bottles = []
        for i, row in enumerate(rows):
            if row == "":
                bottles.append(Bottle.empty())
                continue
            try:
                bottles.append(Bottle.from_string(row))
            except ValueError as e:
                raise ValueError(f"bottle {i+1}: {e}") from e
        return cls(bottles)

    def __str__(self):
        rows = [[] for _ in range(2 + CAPACITY)]
        for i, bottle in enumerate(self._bottles):
            # top slot first
            col = [str(i + 1), "-"] + list(reversed(list(bottle)))
            width = max(len(c) for c in col)
            col[1] = "-" * width
            for r, row in enumerate(rows):
                row.append(col[r].center(width))
        return "\n".join("  ".join(row) for row in rows)

    def __repr__(self):
        return str(tuple(str(bottle) for bottle in self._bottles))

    def _check_solved(self):
        for bottle in self._bottles:
            if bottle.is_empty():
                continue
            if not bottle.is_full() or not bottle.is_uniform():
                return False
        return True

    def __iter__(self):
        return iter(self._bottles)

    def __len__(self):
        return len(self._bottles)

    def __getitem__(self, index):
        return self._bottles[index]

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    @property
    def num_bottles(self):
        return len(self._bottles)

    @property
    def is_solved(self):
        return self._is_solved

    def key(self):
        """The canonical encoding used by the seen-state table."""
        return self._key

    def num_units(self):
        return sum(1 for token in self._key if token != EMPTY)

    def legal_moves(self):
        """Returns every legal (src, dest) pour, ordered by source and
        then by destination.
        """
        moves = []
        for src, source in enumerate(self._bottles):
            if source.is_empty():
                continue
            src_color, _ = source.top()
            for dest, destination in enumerate(self._bottles):
                if src == dest or destination.is_full():
                    continue
                dest_color, _ = destination.top()
                if dest_color is None or dest_color == src_color:
                    if destination.empty_slots() > 0:
                        moves.append((src, dest))
        return moves

    def pour(self, src, dest):
        """Returns the board after pouring the top run of `src` into
        `dest`. The current board is left untouched.
        """
        if src == dest:
            raise PourException("cannot pour from and to same bottle")
        source = self._bottles[src]
        destination = self._bottles[dest]
        if source.is_empty():
            raise PourException("cannot pour from empty bottle")
        if destination.is_full():
            raise PourException("cannot pour into full bottle")
        color, src_top = source.top()
        dest_color, dest_top = destination.top()
        if dest_color is not None and dest_color != color:
            raise PourException("cannot pour on a different color")

        amount = min(source.top_run_length(), destination.empty_slots())
        new_source = list(source)
        new_destination = list(destination)
        for i in range(amount):
            new_destination[dest_top + 1 + i] = color
            new_source[src_top - i] = EMPTY

        bottles = list(self._bottles)
        bottles[src] = Bottle(new_source)
        bottles[dest] = Bottle(new_destination)
        return self.__class__(bottles)

    def heuristic(self):
        """Counts the color boundaries inside every bottle."""
        h = 0
        for bottle in self._bottles:
            prev_color = None
            for color in bottle:
                if color == EMPTY:
                    continue
                if prev_color is not None and color != prev_color:
                    h += 1
                prev_color = color
        return h


# =============================================================================

SearchResult = namedtuple(
    "SearchResult", ["moves", "states_checked", "states_expanded"]
)


def search(start):
    """Performs a best-first search from the given start board.
    Frontier entries are ordered by moves taken plus the heuristic, with
    ties going to whichever entry was pushed first.
    Returns a SearchResult whose moves are None if the board is
    unsolvable. States checked counts every entry taken off the
    frontier, while states expanded leaves out stale entries and the
    solved board.
    """
    order = itertools.count()
    frontier = [(start.heuristic(), next(order), 0, start, ())]
    # maps: board key -> fewest moves known to reach it
    seen = {start.key(): 0}
    states_checked = 0
    states_expanded = 0
    while frontier:
        _, _, g, board, path = heapq.heappop(frontier)
        states_checked += 1
        if DEBUG and states_checked % DEBUG_EVERY == 0:
            print(
                f"checked {states_checked} states, {len(frontier)} in "
                f"frontier, {len(seen)} seen"
            )
        if g > seen[board.key()]:
            # a shorter path to this board was found after it was pushed
            continue
        if board.is_solved:
            return SearchResult(list(path), states_checked, states_expanded)
        states_expanded += 1
        next_g = g + 1
        for move in board.legal_moves():
            poured = board.pour(*move)
            key = poured.key()
            if key in seen and seen[key] <= next_g:
                continue
            seen[key] = next_g
            heapq.heappush(
                frontier,
                (
                    next_g + poured.heuristic(),
                    next(order),
                    next_g,
                    poured,
                    path + (move,),
                ),
            )
    return SearchResult(None, states_checked, states_expanded)


def solve(board):
    """Returns the list of (src, dest) moves that solves the board, or
    None if it cannot be solved.
    """
    return search(board).moves


def replay(board, moves):
    """Returns the start board followed by the board after each move."""
    boards = [board]
    for src, dest in moves:
        board = board.pour(src, dest)
        boards.append(board)
    return boards


# =============================================================================


class Game:
    """Defines a game of liquid sorting."""

    def __init__(self, rows, num_bottles=None):
        self._board = Board.parse(rows, num_bottles)
        self._solved = False
        self._moves = None
        self._steps = None
        self._states_checked = None
        self._states_expanded = None
        self._elapsed = None

    def __str__(self):
        return str(self._board)

    def __repr__(self):
        return f"Game({repr(self._board)})"

    @property
    def board(self):
        return self._board

    @property
    def moves(self):
        return self._moves

    @property
    def steps(self):
        return self._steps

    @property
    def num_moves(self):
        if self._moves is None:
            return None
        return len(self._moves)

    @property
    def states_checked(self):
        return self._states_checked

    @property
    def states_expanded(self):
        return self._states_expanded

    @property
    def elapsed(self):
        return self._elapsed

    def solve(self):
        if self._solved:
            return
        print("Solving...")
        start = time.perf_counter()
        result = search(self._board)
        self._elapsed = time.perf_counter() - start
        self._states_checked = result.states_checked
        self._states_expanded = result.states_expanded
        if result.moves is None:
            raise RuntimeError("Could not find a solution for the given game")
        self._moves = result.moves
        self._steps = replay(self._board, self._moves)
        self._solved = True

    def print_moves(self):
        if not self._solved:
            self.solve()
        start, *steps = self._steps
        print("Start:")
        print(start)
        for i, (step, (src, dest)) in enumerate(zip(steps, self._moves)):
            print()
            print(f"Step {i+1}: Pour bottle {src+1} into bottle {dest+1}")
            print(step)
        print()
        print("Num moves:", self.num_moves)
        print("States checked:", self._states_checked)
        print("States expanded:", self._states_expanded)
        print(f"Time consumed: {self._elapsed:.6f} seconds")


# =============================================================================


def read_rows(lines):
    """Reads bottle rows from the given lines.
    Returns the rows and the declared number of bottles, if any.
    """
    rows = [line.strip() for line in lines]
    num_bottles = None
    # a row of CAPACITY digits is a bottle, not a count
    if len(rows) > 0 and rows[0].isdigit() and len(rows[0]) < CAPACITY:
        num_bottles = int(rows[0])
        rows = rows[1:]
    return rows, num_bottles


def main():
    rows, num_bottles = read_rows(sys.stdin)
    if len(rows) == 0:
        print("No bottles given")
        return

    try:
        game = Game(rows, num_bottles)
    except ValueError as e:
        print(e)
        sys.exit(1)
    try:
        game.solve()
    except RuntimeError as e:
        print(e)
        print("States checked:", game.states_checked)
        sys.exit(1)
    game.print_moves()


if __name__ == "__main__":
    main()
