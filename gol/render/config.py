"""Display configuration for the Game of Life renderer."""

from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


def _check_color(name: str, color: Color) -> Color:
    if len(color) != 3 or not all(0 <= channel <= 255 for channel in color):
        raise ValueError(f"{name} must be an RGB triple with channels in 0-255, got {color}")
    return tuple(int(channel) for channel in color)


class RenderConfig:
    """Window, cell and colour settings for drawing generations."""

    def __init__(self,
                 window_width: int = 500,
                 window_height: int = 500,
                 cell_width: int = 10,
                 cell_height: int = 10,
                 fps: int = 10,
                 alive_color: Color = BLACK,
                 dead_color: Color = WHITE,
                 title: str = "Game of life"):
        """Initialize render configuration.

        Args:
            window_width: Window width in pixels
            window_height: Window height in pixels
            cell_width: Width of one cell in pixels
            cell_height: Height of one cell in pixels
            fps: Generations drawn per second
            alive_color: Fill colour of live cells
            dead_color: Fill colour of dead cells (and the background)
            title: Window caption

        Raises:
            ValueError: If a size or the frame rate is not positive, or a colour is invalid
        """
        if window_width < 1 or window_height < 1:
            raise ValueError("Window dimensions must be positive")
        if cell_width < 1 or cell_height < 1:
            raise ValueError("Cell dimensions must be positive")
        if fps < 1:
            raise ValueError("Frame rate must be at least 1")

        self.window_width = window_width
        self.window_height = window_height
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.fps = fps
        self.alive_color = _check_color("alive_color", alive_color)
        self.dead_color = _check_color("dead_color", dead_color)
        self.title = title

    @property
    def window_size(self) -> Tuple[int, int]:
        return (self.window_width, self.window_height)

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """(rows, cols) of cells that fit in the window."""
        return (self.window_height // self.cell_height, self.window_width // self.cell_width)

    def copy(self) -> 'RenderConfig':
        """Create a copy of the configuration."""
        return RenderConfig(
            window_width=self.window_width,
            window_height=self.window_height,
            cell_width=self.cell_width,
            cell_height=self.cell_height,
            fps=self.fps,
            alive_color=self.alive_color,
            dead_color=self.dead_color,
            title=self.title
        )

    def __repr__(self) -> str:
        return (f"RenderConfig({self.window_width}x{self.window_height}, "
                f"cell={self.cell_width}x{self.cell_height}, fps={self.fps})")
