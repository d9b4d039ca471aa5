from typing import Sequence

import numpy as np
from PIL import Image

from starfinder.record import Star

__all__ = ["BRIGHTNESS_EXPONENT", "rasterize_stars", "write_image"]

BRIGHTNESS_EXPONENT = 2.5


def rasterize_stars(
    stars: Sequence[Star],
    width: int,
    height: int,
    min_ra: float,
    max_ra: float,
    min_dec: float,
    max_dec: float,
) -> np.ndarray:
    """Plot stars as single pixels whose brightness follows their magnitude

    RA maps linearly onto columns and Dec onto rows, so ``image[0, 0]`` is
    (`min_ra`, `min_dec`). Pixels are half-open bins: a star exactly on
    `max_ra` or `max_dec` falls outside the image and is not drawn.
    Magnitudes are normalized over the given stars and raised to
    `BRIGHTNESS_EXPONENT` to emphasize the brightest ones.

    An empty star list always gives a black image, whatever the sky window;
    the window must be non-empty only when there are stars to place.

    Parameters
    ----------
    stars : Sequence[Star]
        stars to draw, usually the output of `~starfinder.catalog.filter_visible_stars`
    width, height : int
        size of the image in pixels
    min_ra, max_ra : float
        right ascension covered by the image, degrees
    min_dec, max_dec : float
        declination covered by the image, degrees

    Returns
    -------
    np.ndarray
        uint8 image of shape (height, width), 0 where no star was drawn
    """
    if width < 0 or height < 0:
        raise ValueError(f"Image size must not be negative, got {width}x{height}")

    image = np.zeros((height, width), dtype=np.uint8)
    if len(stars) == 0:
        return image

    if max_ra <= min_ra or max_dec <= min_dec:
        raise ValueError(f"Empty sky window: RA {min_ra} to {max_ra}, Dec {min_dec} to {max_dec}")

    ra = np.array([star.ra for star in stars], dtype=float)
    dec = np.array([star.dec for star in stars], dtype=float)
    mag = np.array([star.mag for star in stars], dtype=float)

    xs = np.floor((ra - min_ra) / (max_ra - min_ra) * width).astype(int)
    ys = np.floor((dec - min_dec) / (max_dec - min_dec) * height).astype(int)

    min_mag, max_mag = mag.min(), mag.max()
    if max_mag == min_mag:
        normalized = np.ones_like(mag)
    else:
        normalized = (max_mag - mag) / (max_mag - min_mag)
    brightness = np.clip(np.round(normalized**BRIGHTNESS_EXPONENT * 255), 0, 255).astype(np.uint8)

    in_image = (0 <= xs) & (xs < width) & (0 <= ys) & (ys < height)
    # drawn one at a time so a pixel hit twice keeps the later star
    for x, y, value in zip(xs[in_image], ys[in_image], brightness[in_image]):
        image[y, x] = value
    return image


def write_image(image: np.ndarray, path: str) -> None:
    """Save a rasterized star map as an 8-bit greyscale image, format chosen from the extension"""
    Image.fromarray(np.asarray(image, dtype=np.uint8)).save(path)
