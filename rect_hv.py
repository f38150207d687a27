from typing import Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt
from point2d import Point2D

'''
Immutable closed axis-aligned rectangle [xmin, xmax] x [ymin, ymax].
Bounds may be infinite, which is used for the unbounded region of a search.
'''

class RectHV:
    __slots__ = ('_xmin', '_ymin', '_xmax', '_ymax')

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        bounds = np.array([xmin, ymin, xmax, ymax], dtype=float)
        if np.isnan(bounds).any():
            raise ValueError(f"Bounds must not be NaN, got {tuple(bounds)}")
        if bounds[0] > bounds[2]:
            raise ValueError(f"xmin ({bounds[0]}) is greater than xmax ({bounds[2]})")
        if bounds[1] > bounds[3]:
            raise ValueError(f"ymin ({bounds[1]}) is greater than ymax ({bounds[3]})")
        object.__setattr__(self, '_xmin', float(bounds[0]))
        object.__setattr__(self, '_ymin', float(bounds[1]))
        object.__setattr__(self, '_xmax', float(bounds[2]))
        object.__setattr__(self, '_ymax', float(bounds[3]))

    def __setattr__(self, name, value):
        raise AttributeError("RectHV is immutable")

    @classmethod
    def plane(cls) -> 'RectHV':
        return cls(-np.inf, -np.inf, np.inf, np.inf)

    @property
    def xmin(self) -> float:
        return self._xmin

    @property
    def ymin(self) -> float:
        return self._ymin

    @property
    def xmax(self) -> float:
        return self._xmax

    @property
    def ymax(self) -> float:
        return self._ymax

    @property
    def width(self) -> float:
        return self._xmax - self._xmin

    @property
    def height(self) -> float:
        return self._ymax - self._ymin

    def contains(self, p: Point2D) -> bool:
        return (self._xmin <= p.x <= self._xmax) and (self._ymin <= p.y <= self._ymax)

    def intersects(self, that: 'RectHV') -> bool:
        return (self._xmax >= that._xmin and self._ymax >= that._ymin
                and that._xmax >= self._xmin and that._ymax >= self._ymin)

    def distance_squared_to(self, p: Point2D) -> float:
        dx = 0.0
        dy = 0.0
        if p.x < self._xmin:
            dx = p.x - self._xmin
        elif p.x > self._xmax:
            dx = p.x - self._xmax
        if p.y < self._ymin:
            dy = p.y - self._ymin
        elif p.y > self._ymax:
            dy = p.y - self._ymax
        return dx * dx + dy * dy

    def distance_to(self, p: Point2D) -> float:
        dx = max(self._xmin - p.x, 0.0, p.x - self._xmax)
        dy = max(self._ymin - p.y, 0.0, p.y - self._ymax)
        return float(np.hypot(dx, dy))

    def split(self, vertical: bool, c: float) -> Tuple['RectHV', 'RectHV']:
        # vertical: split by the line x = c, otherwise by the line y = c
        if vertical:
            return (RectHV(self._xmin, self._ymin, c, self._ymax),
                    RectHV(c, self._ymin, self._xmax, self._ymax))
        return (RectHV(self._xmin, self._ymin, self._xmax, c),
                RectHV(self._xmin, c, self._xmax, self._ymax))

    def __eq__(self, other):
        if not isinstance(other, RectHV):
            return NotImplemented
        return (self._xmin, self._ymin, self._xmax, self._ymax) == \
            (other._xmin, other._ymin, other._xmax, other._ymax)

    def __hash__(self):
        return hash((self._xmin, self._ymin, self._xmax, self._ymax))

    def __repr__(self):
        return f"RectHV({self._xmin!r}, {self._ymin!r}, {self._xmax!r}, {self._ymax!r})"

    def __str__(self):
        return f"[{self._xmin}, {self._xmax}] x [{self._ymin}, {self._ymax}]"

    def draw(self, ax: Optional[plt.Axes] = None, **kwargs) -> plt.Axes:
        if ax is None:
            ax = plt.gca()
        xs = [self._xmin, self._xmax, self._xmax, self._xmin, self._xmin]
        ys = [self._ymin, self._ymin, self._ymax, self._ymax, self._ymin]
        ax.plot(xs, ys, **kwargs)
        return ax
