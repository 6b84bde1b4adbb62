"""
Terminal rendering of color images with ANSI 24-bit escapes.

Two pixel rows share one text line: the upper pixel is the foreground of a
half block, the lower one its background.
"""

import os

from localtypes import Rgb
from utils.grid import Image

# Constants

RESET = "\033[0m"
UPPER_HALF_BLOCK = "▀"


def supports_true_color() -> bool:
    """
    Return True if the terminal claims to support 24-bit (true-color).
    We check COLORTERM and TERM for the usual markers.
    """
    # 1) Check COLORTERM
    ct = os.getenv("COLORTERM", "")
    if "truecolor" in ct.lower() or "24bit" in ct.lower():
        return True

    # 2) Check TERM
    term = os.getenv("TERM", "")
    if "truecolor" in term.lower() or "24bit" in term.lower():
        return True

    return False


def fg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[38;2;{red};{green};{blue}m"


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


def render_image(image: Image[Rgb], max_width: int | None = None) -> str:
    """
    Render the image as text, sampling every n-th pixel so that at most
    max_width columns are used.
    """
    step = 1
    if max_width is not None and image.width > max_width:
        step = -(-image.width // max_width)

    cols = range(0, image.width, step)
    rows = list(range(0, image.height, step))
    lines = []
    for top, bottom in zip(rows[::2], rows[1::2] + [None]):
        cells = []
        for col in cols:
            upper = fg_color_24b(*image.get(col, top))
            if bottom is None:
                cells.append(f"{upper}{UPPER_HALF_BLOCK}{RESET}")
            else:
                lower = bg_color_24b(*image.get(col, bottom))
                cells.append(f"{upper}{lower}{UPPER_HALF_BLOCK}")
        lines.append("".join(cells) + RESET)
    return "\n".join(lines)


if __name__ == "__main__":
    from palette import generate_palette

    colors = generate_palette(4)
    demo = Image.new(Rgb(0, 0, 0), 8, 8)
    for index, (col, row) in enumerate(demo.coords()):
        demo.set(col, row, colors[index])
    print(render_image(demo))
