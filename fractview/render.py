"""Escape-time computation and shading of the three fractals."""

from __future__ import annotations

from typing import Callable

import numpy as np

from fractview.state import Env, Fractal

WIDTH = 1500
HEIGHT = 1100
_ESCAPE = 4.0

_Step = Callable[[np.ndarray, np.ndarray, np.ndarray, np.ndarray], tuple]


def _quadratic(zr, zi, cr, ci):
    return zr * zr - zi * zi + cr, 2 * zr * zi + ci


def _burning(zr, zi, cr, ci):
    ar, ai = np.abs(zr), np.abs(zi)
    return ar * ar - ai * ai + cr, 2 * ar * ai + ci


def _plane(env: Env, width: int, height: int):
    xs = np.arange(width) / env.zoom + env.x_min
    ys = np.arange(height) / env.zoom + env.y_min
    return np.meshgrid(xs, ys)


def _iterate(zr, zi, cr, ci, it_max: int, step: _Step) -> np.ndarray:
    counts = np.ones(zr.shape, dtype=np.int64)
    flat = counts.reshape(-1)
    zr = zr.reshape(-1).copy()
    zi = zi.reshape(-1).copy()
    cr = cr.reshape(-1)
    ci = ci.reshape(-1)
    if it_max > 1:
        idx = np.flatnonzero(zr * zr + zi * zi < _ESCAPE)
    else:
        idx = np.empty(0, dtype=np.intp)
    while idx.size:
        nr, ni = step(zr[idx], zi[idx], cr[idx], ci[idx])
        zr[idx] = nr
        zi[idx] = ni
        flat[idx] += 1
        keep = (nr * nr + ni * ni < _ESCAPE) & (flat[idx] < it_max)
        idx = idx[keep]
    return counts


def escape_counts(env: Env, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """Iteration count of every pixel, as an array of shape (height, width).

    Counts start at 1 and never exceed ``env.it_max``.
    """
    re, im = _plane(env, width, height)
    if env.fractal is Fractal.MANDELBROT:
        return _iterate(re, im, re, im, env.it_max, _quadratic)
    if env.fractal is Fractal.JULIA:
        cr = np.full_like(re, env.c_r)
        ci = np.full_like(im, env.c_i)
        zr, zi = _quadratic(re, im, cr, ci)
        return _iterate(zr, zi, cr, ci, env.it_max, _quadratic)
    return _iterate(np.abs(re), np.abs(im), re, im, env.it_max, _burning)


def _finish(env: Env, counts: np.ndarray, r, g, b) -> np.ndarray:
    rgb = np.stack(np.broadcast_arrays(r, g, b), axis=-1).astype(np.int64)
    rgb = np.minimum(rgb, 255)
    rgb[counts == env.it_max] = 0
    return (rgb & 0xFF).astype(np.uint8)


def shade_plain(env: Env, counts) -> np.ndarray:
    """Gradient shading: brighter with more iterations, black inside the set.

    Returns an RGB array of shape counts.shape + (3,).
    """
    counts = np.asarray(counts, dtype=np.int64)
    base = counts * 255 // env.it_max
    return _finish(env, counts, env.r + base, env.g + base, env.b + base)


def shade_palette(env: Env, counts) -> np.ndarray:
    """Banded shading that picks a channel by iteration band.

    Returns an RGB array of shape counts.shape + (3,).
    """
    counts = np.asarray(counts, dtype=np.int64)
    m = env.it_max
    base = counts * 255 // m
    band = np.select(
        [
            counts == 1,
            counts == 2,
            counts < m // 15,
            counts < m // 12,
            counts < m // 7,
            counts < m // 5,
            counts < m // 4,
            counts < m // 3,
            counts < m // 2,
            counts != m,
        ],
        list(range(1, 11)),
        default=0,
    )
    r = np.zeros_like(counts)
    g = np.zeros_like(counts)
    b = np.zeros_like(counts)

    def assign(target, which, value):
        mask = band == which
        target[mask] = value[mask]

    assign(r, 1, env.g + base + 70)
    assign(b, 2, env.b + base + 50)
    assign(r, 3, env.g + base + 50)
    assign(g, 4, env.b + base + 40)
    assign(b, 5, env.g + base + 21)
    assign(r, 6, env.b + base + 40)
    assign(g, 7, env.g + base + 21)
    assign(b, 8, env.b + base)
    assign(r, 9, env.g + base)
    assign(r, 10, env.r + base - 20)
    assign(g, 10, env.g + base - 20)
    assign(b, 10, env.b + base - 20)
    return _finish(env, counts, r, g, b)


def render(env: Env, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """Draw the current fractal as an RGB array of shape (height, width, 3)."""
    counts = escape_counts(env, width, height)
    if env.palette:
        return shade_palette(env, counts)
    return shade_plain(env, counts)