import matplotlib.pyplot as plt
import numpy as np


def plot_star_map(
    image: np.ndarray,
    min_ra: float,
    max_ra: float,
    min_dec: float,
    max_dec: float,
    cmap="Greys_r",
    figsize=(10, 7.5),
):
    fig, ax = plt.subplots(figsize=figsize)
    im = ax.imshow(
        image,
        vmin=0,
        vmax=255,
        origin="lower",
        cmap=cmap,
        interpolation="None",
        extent=[min_ra, max_ra, min_dec, max_dec],
        aspect="auto",
    )
    ax.set_xlabel("Right Ascension [deg]")
    ax.set_ylabel("Declination [deg]")
    ax.set_title("Star map")
    fig.colorbar(im, ax=ax, label="brightness")
    return fig, ax
