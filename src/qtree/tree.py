from typing import Iterator

import numpy as np
from PIL import Image

from qtree.builder import QTreeBuilder
from qtree.common import DEFAULT_SCALE, QTreeNode
from qtree.renderer import QTreeRenderer
from qtree.transforms import flip_node, prune_node, rotate_node
from utils import as_rgb_array, load_rgb


class QTree:
    """Region quadtree over an RGB image.

    Every leaf of a freshly built tree is one pixel, every internal node stores the area weighted
    average of its children. Prune, flip_horizontal and rotate_ccw rewrite the tree in place and
    keep the leaves tiling the whole (width x height) image.
    """

    def __init__(self, img: np.ndarray | Image.Image) -> None:
        img = as_rgb_array(img)
        self.height, self.width = img.shape[0], img.shape[1]
        self.root: QTreeNode = QTreeBuilder().build(img)

    @staticmethod
    def from_file(src_path: str) -> "QTree":
        return QTree(load_rgb(src_path))

    def render(self, scale: int = DEFAULT_SCALE) -> np.ndarray:
        """Returns (height * scale, width * scale, 3) uint8 image, scale must be positive.
           A cleared tree renders as a blank canvas.
        """
        if self.root is None:
            return np.zeros((self.height * scale, self.width * scale, 3), dtype=np.uint8)
        return QTreeRenderer(scale).render(self.root, self.width, self.height)

    def prune(self, tolerance: float):
        """
        Args:
            tolerance (float): max rgb distance between a leaf and the average of a subtree for the subtree
                to be collapsed. Should be called at most once, and not on a copy of a pruned tree.
        """
        if self.root is None:
            return
        prune_node(self.root, tolerance)

    def flip_horizontal(self):
        if self.root is None:
            return
        flip_node(self.root)

    def rotate_ccw(self):
        self.width, self.height = self.height, self.width
        if self.root is None:
            return
        self.root.low_right = (self.width - 1, self.height - 1)
        rotate_node(self.root)

    def leaves(self) -> Iterator[QTreeNode]:
        if self.root is None:
            return iter(())
        return self.root.leaves()

    def count_leaves(self) -> int:
        return sum(1 for _ in self.leaves())

    def count_nodes(self) -> int:
        if self.root is None:
            return 0
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children())
        return count

    def copy(self) -> "QTree":
        res = QTree.__new__(QTree)
        res.width = self.width
        res.height = self.height
        res.root = self.root.copy() if self.root is not None else None
        return res

    def __copy__(self) -> "QTree":
        return self.copy()

    def __deepcopy__(self, memo) -> "QTree":
        return self.copy()

    def assign(self, other: "QTree") -> "QTree":
        """Replaces this tree with a deep copy of other, previous nodes are released."""
        if other is self:
            return self
        self.clear()
        self.width = other.width
        self.height = other.height
        self.root = other.root.copy() if other.root is not None else None
        return self

    def clear(self):
        if self.root is not None:
            self.root.clear_children()
        self.root = None
