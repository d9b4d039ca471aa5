import concurrent.futures
import os
import warnings
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from tqdm import tqdm

from starfinder.error import SkippedRecordWarning
from starfinder.record import ParseFailure, Star, parse_record

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "read_tycho2_catalog",
    "split_record",
    "split_records",
    "parse_records",
    "filter_visible_stars",
    "stars_to_dataframe",
    "load_reduced_catalog",
]

DEFAULT_CATALOG_PATH = "data/tycho2/catalog.dat"
DELIMITER = "|"

# below this many lines the thread pool costs more than it saves
MIN_PARALLEL_LINES = 10_000


def split_record(line: str) -> List[str]:
    return line.split(DELIMITER)


def _split_chunk(lines: Sequence[str], start: int, stop: int) -> (int, List[List[str]]):
    return start, [split_record(line) for line in lines[start:stop]]


def split_records(lines: Sequence[str], workers: Optional[int] = None, progress: bool = False) -> List[List[str]]:
    """Split every catalog line into its fields, keeping the line order

    Parameters
    ----------
    lines : Sequence[str]
        raw catalog lines without line terminators
    workers : int, optional
        number of threads, defaults to the CPU count; 1 splits in the calling thread
    progress : bool
        show a progress bar over the chunks

    Returns
    -------
    List[List[str]]
        one record per line, in the same order as `lines`
    """
    workers = workers or os.cpu_count() or 1
    num_lines = len(lines)
    if workers == 1 or num_lines < MIN_PARALLEL_LINES:
        return [split_record(line) for line in tqdm(lines, disable=not progress)]

    chunk_size = -(-num_lines // (workers * 4))
    records: List[Optional[List[str]]] = [None] * num_lines
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_split_chunk, lines, start, min(start + chunk_size, num_lines))
                   for start in range(0, num_lines, chunk_size)]
        with tqdm(total=len(futures), disable=not progress) as pbar:
            for future in concurrent.futures.as_completed(futures):
                start, chunk = future.result()
                # each chunk owns its own slice, so completion order does not matter
                records[start:start + len(chunk)] = chunk
                pbar.update(1)
    return records


def parse_records(records: Sequence[Sequence[str]], report_limit: int = 10) -> List[Star]:
    """Parse split records into stars, dropping the ones that fail

    Parameters
    ----------
    records : Sequence[Sequence[str]]
        split catalog lines
    report_limit : int
        how many rejected rows to report as a `SkippedRecordWarning`; later rejections are silent

    Returns
    -------
    List[Star]
        the parsed stars in record order
    """
    stars = []
    skipped_rows = 0
    for i, record in enumerate(records):
        star = parse_record(record)
        if isinstance(star, ParseFailure):
            skipped_rows += 1
            if skipped_rows <= report_limit:
                warnings.warn(f"Skipping row {i} due to error: {star}", SkippedRecordWarning, stacklevel=2)
            elif skipped_rows == report_limit + 1 and report_limit > 0:
                warnings.warn("Further skipped rows will not be reported", SkippedRecordWarning, stacklevel=2)
            continue
        stars.append(star)
    return stars


def read_tycho2_catalog(
    path: str = DEFAULT_CATALOG_PATH, workers: Optional[int] = None, report_limit: int = 10, progress: bool = False
) -> List[Star]:
    """Load the stars of a raw Tycho-2 catalog file

    Parameters
    ----------
    path : str
        path to the pipe-delimited Tycho-2 ``catalog.dat``
    workers : int, optional
        number of threads used to split lines, defaults to the CPU count
    report_limit : int
        how many rejected rows to report as a `SkippedRecordWarning`
    progress : bool
        show a progress bar while splitting

    Returns
    -------
    List[Star]
        every star whose RA, Dec and magnitude could be parsed, in file order

    Raises
    ------
    OSError
        if the file cannot be opened or read
    """
    # undecodable bytes become U+FFFD so only the affected row fails to parse
    with open(path, encoding="ascii", errors="replace") as f:
        lines = [line.rstrip("\r\n") for line in f]

    records = split_records(lines, workers=workers, progress=progress)
    return parse_records(records, report_limit=report_limit)


def filter_visible_stars(
    stars: Sequence[Star],
    min_ra: float = 0,
    max_ra: float = 360,
    min_dec: float = -90,
    max_dec: float = 90,
    dimmest_magnitude: float = 6,
) -> List[Star]:
    """Filters to only include stars inside a sky window and at least as bright as a given magnitude

    Parameters
    ----------
    stars : Sequence[Star]
        stars loaded with `~starfinder.catalog.read_tycho2_catalog`
    min_ra, max_ra : float
        inclusive right ascension bounds in degrees
    min_dec, max_dec : float
        inclusive declination bounds in degrees
    dimmest_magnitude : float
        the dimmest magnitude to keep

    Returns
    -------
    List[Star]
        the kept stars in their original order
    """
    ra = np.fromiter((star.ra for star in stars), dtype=float, count=len(stars))
    dec = np.fromiter((star.dec for star in stars), dtype=float, count=len(stars))
    mag = np.fromiter((star.mag for star in stars), dtype=float, count=len(stars))
    keep = (min_ra <= ra) & (ra <= max_ra) & (min_dec <= dec) & (dec <= max_dec) & (mag <= dimmest_magnitude)
    return [star for star, kept in zip(stars, keep) if kept]


def stars_to_dataframe(stars: Sequence[Star]) -> pd.DataFrame:
    """Tabulate stars with the column names of the reduced catalog

    Parameters
    ----------
    stars : Sequence[Star]
        stars to tabulate

    Returns
    -------
    pd.DataFrame
        one row per star with columns ``RAdeg``, ``DEdeg`` and ``Vmag``
    """
    return pd.DataFrame(
        {
            "RAdeg": [star.ra for star in stars],
            "DEdeg": [star.dec for star in stars],
            "Vmag": [star.mag for star in stars],
        },
        columns=["RAdeg", "DEdeg", "Vmag"],
    )


def load_reduced_catalog(catalog_path: str) -> List[Star]:
    """Load stars from a reduced catalog written with `stars_to_dataframe`

    Parameters
    ----------
    catalog_path : str
        path to the reduced CSV catalog

    Returns
    -------
    List[Star]
        loaded stars in file order
    """
    df = pd.read_csv(catalog_path, usecols=["RAdeg", "DEdeg", "Vmag"])
    return [Star(float(ra), float(dec), float(mag))
            for ra, dec, mag in zip(df["RAdeg"], df["DEdeg"], df["Vmag"])]
