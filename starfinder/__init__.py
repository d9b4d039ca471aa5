from starfinder.catalog import filter_visible_stars, read_tycho2_catalog
from starfinder.record import Star, parse_record
from starfinder.render import rasterize_stars, write_image

__all__ = ["Star", "filter_visible_stars", "parse_record", "rasterize_stars", "read_tycho2_catalog", "write_image"]
