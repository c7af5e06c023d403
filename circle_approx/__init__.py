"""Approximate an image with solid circles by stochastic hill climbing."""

from .canvas import apply, blank_canvas, blank_like
from .color import Color, Palette, color_distances
from .scoring import shape_improves, total_error
from .search import ConsoleProgress, SearchResult, approximate
from .shapes import Circle
from .utils import ApproximationError, ArgumentError, ImageIOError

__version__ = "0.1.0"
