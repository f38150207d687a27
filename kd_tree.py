from typing import Optional, List, Iterator
import numpy as np
import matplotlib.pyplot as plt
from config import SCALE_MIN, SCALE_MAX, VERTICAL_COLOR, HORIZONTAL_COLOR, SPLIT_LINE_WIDTH
from logger import logger
from point2d import Point2D
from rect_hv import RectHV

'''
2D-tree over points in the plane. Nodes split alternately on x (even depth, a vertical
line) and y (odd depth, a horizontal line). Points strictly less than a node on its
axis live in its left subtree, everything else in its right subtree.
'''

def split_coordinate(point: Point2D, vertical: bool) -> float:
    return point.x if vertical else point.y

class KdTreeNode:
    def __init__(self, point: Point2D, left: Optional['KdTreeNode'] = None, right: Optional['KdTreeNode'] = None):
        self.point = point
        self.left = left
        self.right = right

class KdTree:
    def __init__(self, node_class = KdTreeNode):
        self.root = None
        self.node_class = node_class
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self):
        return self._size

    def insert(self, point: Point2D) -> bool:
        '''Insert a copy of point, returns False if an equal point is already stored'''
        if point is None:
            raise TypeError("Cannot insert None into a KdTree")
        new_point = Point2D(point.x, point.y)
        if self.root is None:
            self.root = self.node_class(new_point)
            self._size += 1
            return True
        node = self.root
        vertical = True
        while True:
            if new_point == node.point:
                logger.debug("Skipping duplicate point %s", new_point)
                return False
            if split_coordinate(new_point, vertical) < split_coordinate(node.point, vertical):
                if node.left is None:
                    node.left = self.node_class(new_point)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = self.node_class(new_point)
                    break
                node = node.right
            vertical = not vertical
        self._size += 1
        return True

    def contains(self, point: Point2D) -> bool:
        if point is None:
            raise TypeError("Cannot search a KdTree for None")
        node = self.root
        vertical = True
        # At most one descent path can hold the point
        while node is not None:
            if point == node.point:
                return True
            if split_coordinate(point, vertical) < split_coordinate(node.point, vertical):
                node = node.left
            else:
                node = node.right
            vertical = not vertical
        return False

    def __contains__(self, point):
        return self.contains(point)

    def __iter__(self) -> Iterator[Point2D]:
        # Pre-order, left subtree before right subtree
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.point
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def points(self) -> np.ndarray:
        return np.array([point.to_array() for point in self], dtype=float).reshape(-1, 2)

    def range(self, rect: RectHV) -> List[Point2D]:
        '''
        All stored points inside rect (boundary included), in pre-order.
        The region confining each subtree travels with it on the stack and only
        subtrees whose region intersects rect are visited.
        '''
        if rect is None:
            raise TypeError("Cannot run a range query with None")
        in_range = []
        visited = 0
        stack = [(self.root, True, RectHV.plane())] if self.root is not None else []
        while stack:
            node, vertical, region = stack.pop()
            visited += 1
            if rect.contains(node.point):
                in_range.append(node.point)
            lower, upper = region.split(vertical, split_coordinate(node.point, vertical))
            # Right is pushed first so the left subtree is reported before it
            if node.right is not None and rect.intersects(upper):
                stack.append((node.right, not vertical, upper))
            if node.left is not None and rect.intersects(lower):
                stack.append((node.left, not vertical, lower))
        logger.debug("range %s visited %d of %d nodes, found %d points", rect, visited, self._size, len(in_range))
        return in_range

    def nearest(self, query: Point2D) -> Optional[Point2D]:
        '''
        Closest stored point to query, or None if the tree is empty. On exact ties the
        first point found wins, since the best candidate is only replaced by a strictly
        closer one.
        '''
        if query is None:
            raise TypeError("Cannot run a nearest query with None")
        if self.root is None:
            return None
        best_point = self.root.point
        best_distance = query.distance_to(best_point)
        visited = 0
        # Entries are (node, vertical, to_split). A far side carries its distance to the
        # splitting line and is only searched if the best is still further away than that.
        stack = [(self.root, True, None)]
        while stack:
            node, vertical, to_split = stack.pop()
            if node is None:
                continue
            if to_split is not None and not best_distance > to_split:
                continue
            visited += 1
            distance = query.distance_to(node.point)
            if distance < best_distance:
                best_point = node.point
                best_distance = distance

            query_coordinate = split_coordinate(query, vertical)
            node_coordinate = split_coordinate(node.point, vertical)
            if query_coordinate < node_coordinate:
                next_branch, opposite_branch = node.left, node.right
            else:
                next_branch, opposite_branch = node.right, node.left

            # The opposite side is popped after the whole next branch is done
            stack.append((opposite_branch, not vertical, abs(query_coordinate - node_coordinate)))
            stack.append((next_branch, not vertical, None))
        logger.debug("nearest %s visited %d of %d nodes", query, visited, self._size)
        return best_point

    def draw(self, ax: Optional[plt.Axes] = None) -> plt.Axes:
        '''Vertical splits in red, horizontal splits in blue, points in black, clipped to the unit square'''
        if ax is None:
            ax = plt.gca()
        stack = [(self.root, True, RectHV(SCALE_MIN, SCALE_MIN, SCALE_MAX, SCALE_MAX))] if self.root is not None else []
        while stack:
            node, vertical, region = stack.pop()
            if vertical:
                c = min(max(node.point.x, region.xmin), region.xmax)
                ax.plot([c, c], [region.ymin, region.ymax], color=VERTICAL_COLOR, linewidth=SPLIT_LINE_WIDTH)
            else:
                c = min(max(node.point.y, region.ymin), region.ymax)
                ax.plot([region.xmin, region.xmax], [c, c], color=HORIZONTAL_COLOR, linewidth=SPLIT_LINE_WIDTH)
            node.point.draw(ax)
            lower, upper = region.split(vertical, c)
            if node.right is not None:
                stack.append((node.right, not vertical, upper))
            if node.left is not None:
                stack.append((node.left, not vertical, lower))
        return ax
