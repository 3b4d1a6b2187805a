import daiquiri
import numpy as np

import fenwick


def logging_debug_example():
    daiquiri.setup(level="DEBUG")
    rng = np.random.default_rng(32)
    fenwick.FenwickTree.from_values(rng.integers(0, 100, size=10**4))
    fenwick.FenwickTree2D(rng.integers(0, 100, size=(100, 100)))
    fenwick.FenwickTree2D([])
