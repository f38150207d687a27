from typing import Optional
import numpy as np
from function_profiler import FunctionProfiler
from kd_tree import KdTree
from point2d import Point2D
from point_set import PointSet
from rect_hv import RectHV

'''
Times nearest and range queries on a KdTree against the brute-force PointSet
for the same random points, checking that both give the same answers.
'''

def random_rect(rng: np.random.Generator, max_side: float = 0.2) -> RectHV:
    xmin, ymin = rng.uniform(0.0, 1.0 - max_side, size=2)
    width, height = rng.uniform(0.0, max_side, size=2)
    return RectHV(xmin, ymin, xmin + width, ymin + height)

def run_benchmark(n_points: int, n_queries: int, seed: int = 0, profiler: Optional[FunctionProfiler] = None) -> FunctionProfiler:
    if profiler is None:
        profiler = FunctionProfiler()
    rng = np.random.default_rng(seed)
    tree = KdTree()
    brute = PointSet()
    for coordinates in rng.uniform(0.0, 1.0, size=(n_points, 2)):
        point = Point2D.from_array(coordinates)
        tree.insert(point)
        brute.insert(point)

    tree_nearest = profiler.profile('kd_tree.nearest')(tree.nearest)
    brute_nearest = profiler.profile('point_set.nearest')(brute.nearest)
    tree_range = profiler.profile('kd_tree.range')(tree.range)
    brute_range = profiler.profile('point_set.range')(brute.range)

    for coordinates in rng.uniform(0.0, 1.0, size=(n_queries, 2)):
        query = Point2D.from_array(coordinates)
        found = tree_nearest(query)
        expected = brute_nearest(query)
        # Equal-distance candidates may legitimately differ
        if query.distance_to(found) != query.distance_to(expected):
            raise RuntimeError(f"Nearest mismatch for {query}: {found} vs {expected}")

    for _ in range(n_queries):
        rect = random_rect(rng)
        if set(tree_range(rect)) != set(brute_range(rect)):
            raise RuntimeError(f"Range mismatch for {rect}")

    return profiler

if __name__ == '__main__':
    n_points = 10000
    n_queries = 500
    profiler = run_benchmark(n_points, n_queries)
    for name in ('kd_tree.nearest', 'point_set.nearest', 'kd_tree.range', 'point_set.range'):
        print(f"{name}: average {profiler.mean(name):.6f}s over {n_queries} queries on {n_points} points")
    for query in ('nearest', 'range'):
        speedup = profiler.speedup(f'point_set.{query}', f'kd_tree.{query}')
        print(f"{query}: 2D-tree is {speedup:.1f}x faster than the brute-force scan")
        profiler.plot_all(f'kd_tree.{query}', f'point_set.{query}', title=f"{query} query time, 2D-tree vs brute-force scan")
