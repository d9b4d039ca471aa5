from datetime import datetime

import click
import matplotlib.pyplot as plt

from starfinder.catalog import (DEFAULT_CATALOG_PATH, filter_visible_stars,
                                read_tycho2_catalog, stars_to_dataframe)
from starfinder.render import rasterize_stars, write_image
from starfinder.visualize import plot_star_map


@click.command()
@click.argument("file", default=DEFAULT_CATALOG_PATH, required=False,
                type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", default="star_map.png", type=click.Path(dir_okay=False),
              help="Output image file name")
@click.option("--width", default=800, type=click.IntRange(min=1), help="Output image width in pixels")
@click.option("--height", default=600, type=click.IntRange(min=1), help="Output image height in pixels")
@click.option("--min-ra", default=0.0, type=float, help="Minimum Right Ascension (degrees)")
@click.option("--max-ra", default=360.0, type=float, help="Maximum Right Ascension (degrees)")
@click.option("--min-dec", default=-90.0, type=float, help="Minimum Declination (degrees)")
@click.option("--max-dec", default=90.0, type=float, help="Maximum Declination (degrees)")
@click.option("-m", "--max-magnitude", default=6.0, type=float,
              help="Maximum visual magnitude (lower is brighter)")
@click.option("-w", "--workers", default=None, type=click.IntRange(min=1),
              help="Threads used to split catalog lines, defaults to the CPU count")
@click.option("--report-limit", default=10, type=click.IntRange(min=0),
              help="Number of rejected catalog rows to report")
@click.option("--progress", default=False, is_flag=True, help="Show a progress bar while splitting the catalog")
@click.option("--csv", "csv_path", default=None, type=click.Path(dir_okay=False),
              help="Also write the filtered stars as a reduced CSV catalog")
@click.option("--preview", default=None, type=click.Path(dir_okay=False),
              help="Also write a quick-look figure with RA/Dec axes")
def render_star_map(file, output="star_map.png", width=800, height=600,
                    min_ra=0.0, max_ra=360.0, min_dec=-90.0, max_dec=90.0, max_magnitude=6.0,
                    workers=None, report_limit=10, progress=False, csv_path=None, preview=None):
    """Render the stars of a Tycho-2 catalog FILE into a greyscale star map"""
    if max_ra <= min_ra or max_dec <= min_dec:
        raise click.BadParameter(f"empty sky window: RA {min_ra} to {max_ra}, Dec {min_dec} to {max_dec}")

    print(f"Reading stars from: {file}")
    print(f"RA range: {min_ra} to {max_ra}")
    print(f"Dec range: {min_dec} to {max_dec}")
    print(f"Max magnitude: {max_magnitude}")

    start = datetime.now()
    stars = read_tycho2_catalog(file, workers=workers, report_limit=report_limit, progress=progress)
    print(f"Read {len(stars)} stars in {datetime.now() - start}")

    start = datetime.now()
    stars = filter_visible_stars(stars, min_ra=min_ra, max_ra=max_ra, min_dec=min_dec, max_dec=max_dec,
                                 dimmest_magnitude=max_magnitude)
    print(f"Total stars: {len(stars)} (filtered in {datetime.now() - start})")

    if csv_path is not None:
        stars_to_dataframe(stars).to_csv(csv_path, index=False)
        print(f"Reduced catalog saved as: {csv_path}")

    start = datetime.now()
    image = rasterize_stars(stars, width, height, min_ra, max_ra, min_dec, max_dec)
    try:
        write_image(image, output)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Could not write {output}: {e}") from e
    print(f"Rendered and saved image in {datetime.now() - start}")
    print(f"Image saved as: {output}")

    if preview is not None:
        fig, _ = plot_star_map(image, min_ra, max_ra, min_dec, max_dec)
        fig.savefig(preview)
        plt.close(fig)
        print(f"Preview saved as: {preview}")
