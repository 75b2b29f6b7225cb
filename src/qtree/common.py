from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

import numpy as np

MAX_CHANNEL = 255
DEFAULT_SCALE = 1

Point = tuple[int, int]


@dataclass(frozen=True)
class RGBPixel:
    r: int = MAX_CHANNEL
    g: int = MAX_CHANNEL
    b: int = MAX_CHANNEL

    def distance_to(self, other: "RGBPixel") -> float:
        dr = self.r - other.r
        dg = self.g - other.g
        db = self.b - other.b
        return float(np.sqrt(dr * dr + dg * dg + db * db))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @staticmethod
    def from_array(px: np.ndarray) -> "RGBPixel":
        return RGBPixel(int(px[0]), int(px[1]), int(px[2]))


class SplitPattern(Enum):
    FOUR_WAY = 0
    VERTICAL_ONLY = 1 # 1 pixel wide, NW over SW
    HORIZONTAL_ONLY = 2 # 1 pixel tall, NW beside NE

    @staticmethod
    def of(width: int, height: int) -> "SplitPattern":
        if width == 1:
            return SplitPattern.VERTICAL_ONLY
        if height == 1:
            return SplitPattern.HORIZONTAL_ONLY
        return SplitPattern.FOUR_WAY


class QTreeNode:
    def __init__(self, up_left: Point, low_right: Point, avg: RGBPixel,
                 nw: Optional["QTreeNode"] = None, ne: Optional["QTreeNode"] = None,
                 sw: Optional["QTreeNode"] = None, se: Optional["QTreeNode"] = None) -> None:
        self.up_left = up_left
        self.low_right = low_right
        self.avg = avg
        self.nw = nw
        self.ne = ne
        self.sw = sw
        self.se = se

    def is_leaf(self) -> bool:
        return self.nw is None and self.ne is None and self.sw is None and self.se is None

    def width(self) -> int:
        return self.low_right[0] - self.up_left[0] + 1

    def height(self) -> int:
        return self.low_right[1] - self.up_left[1] + 1

    def area(self) -> int:
        return self.width() * self.height()

    def children(self) -> Iterator["QTreeNode"]:
        """Yields present children in NW, NE, SW, SE order."""
        for child in (self.nw, self.ne, self.sw, self.se):
            if child is not None:
                yield child

    def leaves(self) -> Iterator["QTreeNode"]:
        if self.is_leaf():
            yield self
            return
        for child in self.children():
            yield from child.leaves()

    def clear_children(self) -> None:
        """Recursively detaches the whole subtree below this node."""
        for child in self.children():
            child.clear_children()
        self.nw = self.ne = self.sw = self.se = None

    def copy(self) -> "QTreeNode":
        return QTreeNode(
            self.up_left, self.low_right, self.avg,
            self.nw.copy() if self.nw is not None else None,
            self.ne.copy() if self.ne is not None else None,
            self.sw.copy() if self.sw is not None else None,
            self.se.copy() if self.se is not None else None,
        )

    def __repr__(self) -> str:
        return f"QTreeNode({self.up_left}, {self.low_right}, {self.avg.as_tuple()})"

    @staticmethod
    def Leaf(up_left: Point, low_right: Point, avg: RGBPixel) -> "QTreeNode":
        return QTreeNode(up_left, low_right, avg)

    @staticmethod
    def ParentOf(up_left: Point, low_right: Point, nw: "QTreeNode", ne: Optional["QTreeNode"],
                 sw: Optional["QTreeNode"], se: Optional["QTreeNode"]) -> "QTreeNode":
        """Creates an internal node, its average is computed from the children in constant time."""
        node = QTreeNode(up_left, low_right, RGBPixel(), nw, ne, sw, se)
        node.avg = area_weighted_average(node)
        return node


def area_weighted_average(node: QTreeNode) -> RGBPixel:
    r = g = b = 0
    total_area = 0
    for child in node.children():
        area = child.area()
        r += area * child.avg.r
        g += area * child.avg.g
        b += area * child.avg.b
        total_area += area
    return RGBPixel(r // total_area, g // total_area, b // total_area)
