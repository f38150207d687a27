import functools
import time
from typing import Optional
import seaborn as sns
import matplotlib.pyplot as plt
import numpy as np

class FunctionProfiler:
    def __init__(self):
        self.profiles = {}

    def profile(self, name):
        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                result = func(*args, **kwargs)
                elapsed_time = time.perf_counter() - start_time
                self.profiles.setdefault(name, []).append(elapsed_time)
                return result

            return wrapper

        return decorator

    def timings(self, name) -> np.ndarray:
        return np.array(self.profiles.get(name, []), dtype=float)

    def mean(self, name) -> Optional[float]:
        if name not in self.profiles:
            return None
        return float(np.mean(self.profiles[name]))

    def speedup(self, baseline, candidate) -> Optional[float]:
        '''How many times faster candidate ran than baseline on average'''
        baseline_mean = self.mean(baseline)
        candidate_mean = self.mean(candidate)
        if baseline_mean is None or candidate_mean is None or candidate_mean == 0:
            return None
        return baseline_mean / candidate_mean

    def plot(self, name):
        if name not in self.profiles:
            print(f"No timings recorded for query '{name}'")
            return

        plt.figure(figsize=(8, 6))
        plt.title(f"Query time distribution for '{name}' ({len(self.profiles[name])} queries)")
        plt.xlabel("Query time (seconds)")
        plt.ylabel("Density")

        sns.kdeplot(self.timings(name), color='b', fill=True)
        plt.show()

    def plot_all(self, *names, title="Query time, 2D-tree vs brute-force scan"):
        plt.figure(figsize=(8, 6))
        plt.title(title)
        plt.xlabel("Query time (seconds)")
        plt.ylabel("Density")

        for name in names:
            if name in self.profiles:
                sns.kdeplot(self.timings(name), fill=True, label=f"{name} (mean {self.mean(name):.2e}s)")

        plt.legend()
        plt.show()
