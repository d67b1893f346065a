"""Render line charts to raw RGB pixel buffers."""

from __future__ import annotations

from typing import Iterable

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

WIDTH = 1600
HEIGHT = 1400
_DPI = 100


def generate_realtime_chart(
    x_values: Iterable[float], y_values: Iterable[float]
) -> bytes:
    """Draw the points as a red line on a white 1600x1400 chart.

    The axes span 0..10 horizontally and 0..100 vertically. Extra values
    in the longer sequence are ignored. Returns the pixels row by row as
    RGB triples.
    """
    points = list(zip(x_values, y_values))
    xs = [x for x, _ in points]
    ys = [y for _, y in points]

    figure = Figure(figsize=(WIDTH / _DPI, HEIGHT / _DPI), dpi=_DPI, facecolor="white")
    canvas = FigureCanvasAgg(figure)
    axes = figure.add_subplot(1, 1, 1)
    axes.set_facecolor("white")
    axes.set_xlim(0.0, 10.0)
    axes.set_ylim(0.0, 100.0)
    axes.grid(True)
    axes.plot(xs, ys, color="red", marker="o", markersize=4)
    canvas.draw()

    rgba = bytes(canvas.buffer_rgba())
    rgb = bytearray(len(rgba) // 4 * 3)
    rgb[0::3] = rgba[0::4]
    rgb[1::3] = rgba[1::4]
    rgb[2::3] = rgba[2::4]
    return bytes(rgb)