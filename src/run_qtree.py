import argparse
from time import time

from qtree.tree import QTree
from utils import save_rgb


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Approximate an image with a region quadtree.")
    parser.add_argument("input", help="source image, anything Pillow can open")
    parser.add_argument("output", help="destination image, format taken from the extension")
    parser.add_argument("--scale", type=int, default=1, help="up-scale factor of the rendered image")
    parser.add_argument("--prune", type=float, default=None, metavar="TOL", help="collapse regions within TOL rgb distance")
    parser.add_argument("--flip", action="store_true", help="mirror horizontally")
    parser.add_argument("--rotate", type=int, default=0, metavar="N", help="rotate N times by 90 degrees counter-clockwise")
    parser.add_argument("--verbose", action="store_true", help="print timings and node counts")
    args = parser.parse_args(argv)

    start = time()
    tree = QTree.from_file(args.input)
    if args.verbose:
        print(f"Build time: {time() - start}; leaves = {tree.count_leaves()}")

    if args.prune is not None:
        start = time()
        tree.prune(args.prune)
        if args.verbose:
            print(f"Prune time: {time() - start}; leaves = {tree.count_leaves()}")

    if args.flip:
        tree.flip_horizontal()
    for _ in range(args.rotate % 4):
        tree.rotate_ccw()

    start = time()
    img = tree.render(args.scale)
    save_rgb(img, args.output)
    if args.verbose:
        print(f"Render time: {time() - start}; size = {img.shape[1]}x{img.shape[0]}")


if __name__ == "__main__":
    main()
