from functools import total_ordering
from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from config import POINT_COLOR, POINT_SIZE

'''
Immutable point in the plane
'''

@total_ordering
class Point2D:
    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float):
        x = float(x)
        y = float(y)
        if not (np.isfinite(x) and np.isfinite(y)):
            raise ValueError(f"Coordinates must be finite, got ({x}, {y})")
        # Normalise -0.0 so it prints the same as 0.0
        object.__setattr__(self, '_x', x + 0.0)
        object.__setattr__(self, '_y', y + 0.0)

    def __setattr__(self, name, value):
        raise AttributeError("Point2D is immutable")

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Point2D':
        array = np.asarray(array, dtype=float)
        if array.shape != (2,):
            raise ValueError(f"Expected an array of shape (2,), got {array.shape}")
        return cls(array[0], array[1])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def to_array(self) -> np.ndarray:
        return np.array([self._x, self._y])

    def distance_squared_to(self, that: 'Point2D') -> float:
        dx = self._x - that._x
        dy = self._y - that._y
        return dx * dx + dy * dy

    def distance_to(self, that: 'Point2D') -> float:
        return float(np.hypot(self._x - that._x, self._y - that._y))

    def __eq__(self, other):
        if not isinstance(other, Point2D):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    # Points are ordered by y coordinate, ties broken by x coordinate
    def __lt__(self, other):
        if not isinstance(other, Point2D):
            return NotImplemented
        return (self._y, self._x) < (other._y, other._x)

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Point2D({self._x!r}, {self._y!r})"

    def __str__(self):
        return f"({self._x}, {self._y})"

    def draw(self, ax: Optional[plt.Axes] = None, **kwargs) -> plt.Axes:
        if ax is None:
            ax = plt.gca()
        kwargs.setdefault('color', POINT_COLOR)
        kwargs.setdefault('s', POINT_SIZE)
        ax.scatter([self._x], [self._y], **kwargs)
        return ax
