# SPDX-License-Identifier: MIT

import random

# Terminal styles for tasks that have left the active state
EATEN_TASK_COLOR = "bright_black"
ROTTEN_TASK_COLOR = "dark_olive_green3"

FROSTING_COLORS = [
    "#FFDEE2",
    "#FEF7CD",
    "#F2FCE2",
    "#E5DEFF",
    "#FDE1D3",
    "#D3E4FD",
    "light_pink1",
    "wheat1",
    "plum1",
    "light_goldenrod1",
    "dark_orange",
    "deep_pink",
    "orchid",
]


def get_random_color() -> str:
    """Pick a frosting color for a category created without one.

    Every entry is a style rich can render directly.
    """
    return random.choice(FROSTING_COLORS)
