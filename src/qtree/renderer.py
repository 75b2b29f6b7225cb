import numpy as np
from numba import njit

from qtree.common import DEFAULT_SCALE, QTreeNode


class QTreeRenderer:
    def __init__(self, scale: int = DEFAULT_SCALE) -> None:
        """
        Args:
            scale (int): every source pixel is drawn as a scale x scale block, must be positive
        """
        self.scale = scale

    def render(self, root: QTreeNode, width: int, height: int) -> np.ndarray:
        img = np.zeros((height * self.scale, width * self.scale, 3), dtype=np.uint8)
        rects, colors = _collect_leaves(root)
        _paint_leaves(img, rects, colors, self.scale)
        return img


def _collect_leaves(root: QTreeNode) -> tuple[np.ndarray, np.ndarray]:
    leaves = list(root.leaves())
    rects = np.empty((len(leaves), 4), dtype=np.int64)
    colors = np.empty((len(leaves), 3), dtype=np.uint8)
    for i, leaf in enumerate(leaves):
        rects[i] = (leaf.up_left[0], leaf.up_left[1], leaf.low_right[0], leaf.low_right[1])
        colors[i] = leaf.avg.as_tuple()
    return rects, colors

@njit
def _paint_leaves(img: np.ndarray, rects: np.ndarray, colors: np.ndarray, scale: int):
    for k in range(rects.shape[0]):
        x0, y0, x1, y1 = rects[k][0], rects[k][1], rects[k][2], rects[k][3]
        for i in range(y0 * scale, (y1 + 1) * scale):
            for j in range(x0 * scale, (x1 + 1) * scale):
                img[i, j, 0] = colors[k, 0]
                img[i, j, 1] = colors[k, 1]
                img[i, j, 2] = colors[k, 2]
