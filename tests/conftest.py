import numpy as np
import pytest

from qtree.tree import QTree


def _assert_tiling(tree: QTree):
    coverage = np.zeros((tree.height, tree.width), dtype=np.int32)
    for leaf in tree.leaves():
        (x0, y0), (x1, y1) = leaf.up_left, leaf.low_right
        assert 0 <= x0 <= x1 < tree.width
        assert 0 <= y0 <= y1 < tree.height
        coverage[y0:y1 + 1, x0:x1 + 1] += 1
    assert np.all(coverage == 1)


@pytest.fixture
def assert_tiling():
    return _assert_tiling


@pytest.fixture
def random_image():
    def make(height: int, width: int, seed: int = 0) -> np.ndarray:
        rng = np.random.default_rng(seed)
        return rng.integers(0, 256, (height, width, 3), dtype=np.uint8)
    return make


@pytest.fixture
def blocky_image():
    """Image made of flat 4x4 blocks with a little noise, so pruning has something to collapse."""
    def make(height: int, width: int, seed: int = 0) -> np.ndarray:
        rng = np.random.default_rng(seed)
        blocks = rng.integers(20, 236, ((height + 3) // 4, (width + 3) // 4, 3))
        img = np.repeat(np.repeat(blocks, 4, axis=0), 4, axis=1)[:height, :width]
        noise = rng.integers(-6, 7, img.shape)
        return (img + noise).clip(0, 255).astype(np.uint8)
    return make


@pytest.fixture
def four_colors() -> np.ndarray:
    return np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [255, 255, 0]],
    ], dtype=np.uint8)
