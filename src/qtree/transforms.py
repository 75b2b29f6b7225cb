from qtree.common import QTreeNode, RGBPixel


def prune_node(node: QTreeNode, tolerance: float):
    """Collapses the shallowest subtrees whose leaves are all within tolerance of the subtree's own average.
       Decisions must be made on leaf level data, so the tree should not have been pruned before.
    """
    if node.is_leaf():
        return

    if _within_tolerance(node, node.avg, tolerance):
        node.clear_children()
        return

    for child in node.children():
        prune_node(child, tolerance)

def _within_tolerance(node: QTreeNode, avg: RGBPixel, tolerance: float) -> bool:
    if node.is_leaf():
        return node.avg.distance_to(avg) <= tolerance
    return all(_within_tolerance(child, avg, tolerance) for child in node.children())


def flip_node(node: QTreeNode):
    """Mirrors the subtree across a vertical axis, node's own rectangle stays the same."""
    if node.is_leaf():
        return

    west_width, north_height = _split_sizes(node, node.width(), node.height())
    node.nw, node.ne, node.sw, node.se = node.ne, node.nw, node.se, node.sw
    _place_children(node, node.width() - west_width, north_height)

    for child in node.children():
        flip_node(child)


def rotate_node(node: QTreeNode):
    """Rotates the subtree 90 degrees counter-clockwise.
       Node's rectangle must already be rotated by the caller, children still hold their old rectangles.
    """
    if node.is_leaf():
        return

    # old width is the new height and vice versa
    old_width = node.height()
    old_height = node.width()
    west_width, north_height = _split_sizes(node, old_width, old_height)

    # old (x, y) goes to (y, old_width - 1 - x)
    node.nw, node.ne, node.sw, node.se = node.ne, node.se, node.nw, node.sw
    _place_children(node, north_height, old_width - west_width)

    for child in node.children():
        rotate_node(child)


def _split_sizes(node: QTreeNode, width: int, height: int) -> tuple[int, int]:
    """Returns width of the western column and height of the northern row of node's children.
       Missing side is inferred from the present one, so it may be 0 when a whole side is absent.
    """
    if node.nw is not None:
        west_width = node.nw.width()
    elif node.sw is not None:
        west_width = node.sw.width()
    else:
        east = node.ne if node.ne is not None else node.se
        west_width = width - east.width()

    if node.nw is not None:
        north_height = node.nw.height()
    elif node.ne is not None:
        north_height = node.ne.height()
    else:
        south = node.sw if node.sw is not None else node.se
        north_height = height - south.height()

    return west_width, north_height

def _place_children(node: QTreeNode, west_width: int, north_height: int):
    x0, y0 = node.up_left
    x1, y1 = node.low_right
    split_x = x0 + west_width
    split_y = y0 + north_height

    if node.nw is not None:
        node.nw.up_left = (x0, y0)
        node.nw.low_right = (split_x - 1, split_y - 1)
    if node.ne is not None:
        node.ne.up_left = (split_x, y0)
        node.ne.low_right = (x1, split_y - 1)
    if node.sw is not None:
        node.sw.up_left = (x0, split_y)
        node.sw.low_right = (split_x - 1, y1)
    if node.se is not None:
        node.se.up_left = (split_x, split_y)
        node.se.low_right = (x1, y1)
