import numpy as np
from PIL import Image

from qtree.common import MAX_CHANNEL


def load_rgb(src_path: str) -> np.ndarray:
    with Image.open(src_path) as im:
        return np.array(im.convert("RGB"))

def save_rgb(img: np.ndarray, dst_path: str):
    Image.fromarray(img).save(dst_path)

def as_rgb_array(img: np.ndarray | Image.Image) -> np.ndarray:
    """ Brings img to a (height, width, 3) uint8 array, extra channels (alpha) are dropped

    Args:
        img (np.ndarray | Image.Image): PIL image or array with at least 3 channels in the last axis

    Returns:
        np.ndarray: read-only view/copy, source image is never modified
    """
    if isinstance(img, Image.Image):
        return np.array(img.convert("RGB"))
    if img.ndim != 3 or img.shape[2] < 3:
        raise Exception(f"unsupported image shape {img.shape}, expected (height, width, channels >= 3)")
    if not np.issubdtype(img.dtype, np.integer):
        raise Exception(f"unsupported image dtype {img.dtype}, expected integer channels in 0..{MAX_CHANNEL}")
    if img.dtype == np.uint8:
        return img[..., :3]
    return img[..., :3].clip(0, MAX_CHANNEL).astype(np.uint8)
