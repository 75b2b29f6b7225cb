import numpy as np

from qtree.common import Point, QTreeNode, RGBPixel, SplitPattern

"""
Build:
    - every leaf is a single pixel of the source image
    - an internal node splits its rectangle in half along both axes, the extra row/column of an odd
      split goes to the upper/left half
    - 1 pixel wide rectangles only get NW and SW children, 1 pixel tall rectangles only get NW and NE
    - internal averages are area weighted means of the direct children (integer truncated), so shallow
      nodes accumulate rounding error on purpose
"""

class QTreeBuilder:
    def __init__(self) -> None:
        self.img: np.ndarray = None

    def build(self, img: np.ndarray) -> QTreeNode:
        """
        Args:
            img (np.ndarray): (height, width, channels) raster, only the first three channels are read

        Returns:
            QTreeNode: root covering (0, 0) - (width - 1, height - 1)
        """
        height, width = img.shape[0], img.shape[1]
        self.img = img
        try:
            return self._build_node((0, 0), (width - 1, height - 1))
        finally:
            self.img = None

    def _build_node(self, up_left: Point, low_right: Point) -> QTreeNode:
        x0, y0 = up_left
        x1, y1 = low_right
        width = x1 - x0 + 1
        height = y1 - y0 + 1

        if width == 1 and height == 1:
            return QTreeNode.Leaf(up_left, low_right, RGBPixel.from_array(self.img[y0, x0]))

        half_w = (width + 1) // 2
        half_h = (height + 1) // 2
        pattern = SplitPattern.of(width, height)

        if pattern == SplitPattern.VERTICAL_ONLY:
            nw = self._build_node(up_left, (x1, y0 + half_h - 1))
            sw = self._build_node((x0, y0 + half_h), low_right)
            return QTreeNode.ParentOf(up_left, low_right, nw, None, sw, None)

        if pattern == SplitPattern.HORIZONTAL_ONLY:
            nw = self._build_node(up_left, (x0 + half_w - 1, y1))
            ne = self._build_node((x0 + half_w, y0), low_right)
            return QTreeNode.ParentOf(up_left, low_right, nw, ne, None, None)

        nw = self._build_node(up_left, (x0 + half_w - 1, y0 + half_h - 1))
        ne = self._build_node((x0 + half_w, y0), (x1, y0 + half_h - 1))
        sw = self._build_node((x0, y0 + half_h), (x0 + half_w - 1, y1))
        se = self._build_node((x0 + half_w, y0 + half_h), low_right)
        return QTreeNode.ParentOf(up_left, low_right, nw, ne, sw, se)
