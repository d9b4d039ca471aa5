import math
from dataclasses import dataclass
from typing import Sequence, Union

__all__ = [
    "Star",
    "ParseFailure",
    "MissingField",
    "InvalidField",
    "MissingMagnitude",
    "BT_FIELD",
    "VT_FIELD",
    "RA_FIELD",
    "DEC_FIELD",
    "MIN_FIELDS_COUNT",
    "extract_field",
    "synthesize_magnitude",
    "parse_record",
]

BT_FIELD = 17
VT_FIELD = 19
RA_FIELD = 24
DEC_FIELD = 25
MIN_FIELDS_COUNT = max(BT_FIELD, VT_FIELD, RA_FIELD, DEC_FIELD) + 1

# weight of the BT - VT color term when converting Tycho photometry to V
COLOR_TERM = 0.090


@dataclass(frozen=True)
class Star:
    """A catalog star

    Attributes
    ----------
    ra : float
        right ascension in degrees
    dec : float
        declination in degrees
    mag : float
        visual magnitude, lower is brighter
    """

    ra: float
    dec: float
    mag: float


class ParseFailure:
    """Base class for the reasons a record can be rejected"""


@dataclass(frozen=True)
class MissingField(ParseFailure):
    label: str

    def __str__(self):
        return f"Missing field: {self.label}"


@dataclass(frozen=True)
class InvalidField(ParseFailure):
    label: str
    reason: str

    def __str__(self):
        return f"Failed to parse {self.label}. ({self.reason})"


@dataclass(frozen=True)
class MissingMagnitude(ParseFailure):
    bt_failure: ParseFailure
    vt_failure: ParseFailure

    def __str__(self):
        return f"Missing magnitude. {self.bt_failure}. {self.vt_failure}"


def extract_field(record: Sequence[str], column_index: int, field_label: str) -> Union[float, ParseFailure]:
    """Parse one numeric column of a split catalog record

    Parameters
    ----------
    record : Sequence[str]
        the fields of one catalog line
    column_index : int
        0-based column to read
    field_label : str
        human-readable name of the column, used in the failure message

    Returns
    -------
    float | ParseFailure
        the parsed value, or `MissingField` when the column does not exist and
        `InvalidField` when its text is not a finite number
    """
    if not 0 <= column_index < len(record):
        return MissingField(field_label)

    text = record[column_index]
    # float() also accepts digit separators, which are not catalog syntax
    if "_" in text:
        return InvalidField(field_label, f"could not convert string to float: {text!r}")
    try:
        value = float(text)
    except ValueError as e:
        return InvalidField(field_label, str(e))

    if not math.isfinite(value):
        return InvalidField(field_label, f"non-finite value: {text.strip()!r}")
    return value


def synthesize_magnitude(record: Sequence[str]) -> Union[float, ParseFailure]:
    """Derive a visual magnitude from the Tycho BT and VT bands

    When both bands are present the color-corrected blend
    ``VT - 0.090 * (BT - VT)`` is used, otherwise whichever band exists.

    Parameters
    ----------
    record : Sequence[str]
        the fields of one catalog line

    Returns
    -------
    float | ParseFailure
        the visual magnitude, or `MissingMagnitude` carrying both band failures
    """
    bt = extract_field(record, BT_FIELD, "BT magnitude")
    vt = extract_field(record, VT_FIELD, "VT magnitude")
    bt_ok = not isinstance(bt, ParseFailure)
    vt_ok = not isinstance(vt, ParseFailure)

    if bt_ok and vt_ok:
        return vt - COLOR_TERM * (bt - vt)
    if bt_ok:
        return bt
    if vt_ok:
        return vt
    return MissingMagnitude(bt, vt)


def parse_record(record: Sequence[str]) -> Union[Star, ParseFailure]:
    """Convert a split catalog record into a `Star`

    Parameters
    ----------
    record : Sequence[str]
        the fields of one catalog line

    Returns
    -------
    Star | ParseFailure
        the star, or the first failure met while reading RA, Dec and magnitude
    """
    ra = extract_field(record, RA_FIELD, "RA")
    if isinstance(ra, ParseFailure):
        return ra

    dec = extract_field(record, DEC_FIELD, "Dec")
    if isinstance(dec, ParseFailure):
        return dec

    mag = synthesize_magnitude(record)
    if isinstance(mag, ParseFailure):
        return mag

    return Star(ra, dec, mag)
