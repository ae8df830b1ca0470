"""CLI: граница ввода/вывода калькулятора сдачи."""

from .amounts import parse_amount
from .main import app
from .render import render_outcome

__all__ = [
    "app",
    "parse_amount",
    "render_outcome",
]
