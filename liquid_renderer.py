"""
liquid_renderer.py
Draws liquid sorting boards as images.

Solves the given level and renders every board along the solution as
one row of a PNG image, so the pours can be checked at a glance.

Example run:
  $ python liquid_renderer.py level.txt solution.png
"""

# =============================================================================

import sys
from pathlib import Path

from PIL import Image

import liquid_sorter
from liquid_sorter import CAPACITY, EMPTY

# =============================================================================

# Pixels per slot before scaling
SLOT_SIZE = 1
# Pixels between bottles and between rows of boards
GAP = 1
# How much to blow up the final image
SCALE = 16

BACKGROUND = (0, 0, 0)
EMPTY_RGB = (60, 60, 60)

PALETTE = [
    (244, 67, 54),  # red
    (25, 118, 210),  # blue
    (76, 175, 80),  # green
    (255, 235, 59),  # yellow
    (156, 39, 176),  # purple
    (255, 152, 0),  # orange
    (0, 188, 212),  # cyan
    (233, 30, 99),  # pink
    (121, 85, 72),  # brown
    (205, 220, 57),  # lime
    (0, 150, 136),  # teal
    (255, 255, 255),  # white
]

# =============================================================================


def assign_colors(boards):
    """Maps every color token in the given boards to a palette entry, in
    order of first appearance.
    """
    colors = {EMPTY: EMPTY_RGB}
    for board in boards:
        for bottle in board:
            for token in bottle:
                if token in colors:
                    continue
                if len(colors) > len(PALETTE):
                    raise ValueError(
                        f"more than {len(PALETTE)} colors cannot be drawn"
                    )
                colors[token] = PALETTE[len(colors) - 1]
    return colors


def board_to_array(board, colors):
    """Returns the given board as a 2D array of RGB values, with the top
    slot of each bottle on the first row.
    """
    width = len(board) * (SLOT_SIZE + GAP) - GAP
    array = [[BACKGROUND for _ in range(width)] for _ in range(CAPACITY)]
    for i, bottle in enumerate(board):
        c = i * (SLOT_SIZE + GAP)
        for j, token in enumerate(bottle):
            r = CAPACITY - 1 - j
            for cc in range(SLOT_SIZE):
                array[r][c + cc] = colors[token]
    return array


def steps_to_array(boards, colors):
    """Stacks the arrays of the given boards on top of each other."""
    array = []
    for k, board in enumerate(boards):
        if k > 0:
            width = len(array[0])
            for _ in range(GAP):
                array.append([BACKGROUND for _ in range(width)])
        array.extend(board_to_array(board, colors))
    return array


def image_from_array(colors, scale=SCALE):
    """Returns the given 2D array of RGB values as an image."""
    height = len(colors)
    width = len(colors[0])
    im = Image.new("RGB", (width, height))
    flattened = []
    for row in colors:
        for rgb in row:
            flattened.append(rgb)
    im.putdata(flattened)
    if scale != 1:
        im = im.resize(
            (width * scale, height * scale), Image.Resampling.NEAREST
        )
    return im


def render_board(board, scale=SCALE):
    return image_from_array(
        board_to_array(board, assign_colors([board])), scale
    )


def render_steps(boards, scale=SCALE):
    return image_from_array(
        steps_to_array(boards, assign_colors(boards)), scale
    )


# =============================================================================


def main():
    _, *args = sys.argv
    if len(args) < 2:
        print("Usage: liquid_renderer.py LEVEL_FILE OUTPUT_FILE")
        sys.exit(1)
    level_file, output_file = Path(args[0]), Path(args[1])

    lines = level_file.read_text(encoding="utf-8").splitlines()
    rows, num_bottles = liquid_sorter.read_rows(lines)
    if len(rows) == 0:
        print("No bottles given")
        sys.exit(1)

    try:
        game = liquid_sorter.Game(rows, num_bottles)
        game.solve()
    except (ValueError, RuntimeError) as e:
        print(e)
        sys.exit(1)

    render_steps(game.steps).save(output_file)
    print(f"Saved {game.num_moves} moves to {output_file}")


if __name__ == "__main__":
    main()
