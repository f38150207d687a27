from typing import Optional, List, Iterator
import numpy as np
import matplotlib.pyplot as plt
from point2d import Point2D
from rect_hv import RectHV

'''
Brute-force point set with the same interface as KdTree, every query is a linear scan.
Used as the reference answer for the tree.
'''

class PointSet:
    def __init__(self):
        self._members = set()
        self._points = []

    def size(self) -> int:
        return len(self._points)

    def is_empty(self) -> bool:
        return len(self._points) == 0

    def __len__(self):
        return len(self._points)

    def __iter__(self) -> Iterator[Point2D]:
        return iter(list(self._points))

    def insert(self, point: Point2D) -> bool:
        if point is None:
            raise TypeError("Cannot insert None into a PointSet")
        new_point = Point2D(point.x, point.y)
        if new_point in self._members:
            return False
        self._members.add(new_point)
        self._points.append(new_point)
        return True

    def contains(self, point: Point2D) -> bool:
        if point is None:
            raise TypeError("Cannot search a PointSet for None")
        return point in self._members

    def __contains__(self, point):
        return self.contains(point)

    def points(self) -> np.ndarray:
        return np.array([point.to_array() for point in self._points], dtype=float).reshape(-1, 2)

    def range(self, rect: RectHV) -> List[Point2D]:
        if rect is None:
            raise TypeError("Cannot run a range query with None")
        return [point for point in self._points if rect.contains(point)]

    def nearest(self, query: Point2D) -> Optional[Point2D]:
        if query is None:
            raise TypeError("Cannot run a nearest query with None")
        closest_point = None
        closest_distance = float('inf')
        for point in self._points:
            distance = query.distance_to(point)
            if distance < closest_distance:
                closest_distance = distance
                closest_point = point
        return closest_point

    def draw(self, ax: Optional[plt.Axes] = None) -> plt.Axes:
        if ax is None:
            ax = plt.gca()
        for point in self._points:
            point.draw(ax)
        return ax
