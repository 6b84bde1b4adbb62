from localtypes import Rgb
from utils.grid import Image
from utils.io.tui import render_image, supports_true_color


def display_image(image: Image[Rgb], max_width: int | None = 80) -> None:
    if not supports_true_color():
        print("Warning: terminal does not advertise 24-bit color support")
    print(render_image(image, max_width))
