import pytest

# a real Tycho-2 row (TYC 1-8-1); columns 17/19 are BT/VT and 24/25 are RA/Dec
SAMPLE_FIELDS = ("0001 00008 1| |  2.31750494|  2.23184345|  -16.3|   -9.0| 68| 73| 1.7| 1.8|1958.89|1951.94| 4|"
                 "1.0|1.0|0.9|1.0|12.146|0.158|12.146|0.223|999| |         |  2.31754222|  2.23186444|1.67|1.54|"
                 " 88.0|100.8| |-0.2").split("|")


def build_tycho2_line(bt="", vt="", ra="", dec=""):
    fields = list(SAMPLE_FIELDS)
    fields[17], fields[19], fields[24], fields[25] = bt, vt, ra, dec
    return "|".join(fields)


@pytest.fixture
def make_line():
    return build_tycho2_line


@pytest.fixture
def catalog_file(tmp_path):
    lines = [
        build_tycho2_line(bt="5.0", vt="4.5", ra="10.0", dec="20.0"),
        build_tycho2_line(bt="", vt="", ra="11.0", dec="21.0"),
        build_tycho2_line(bt="7.5", vt="", ra="200.0", dec="-45.0"),
        "short|row",
        build_tycho2_line(bt="", vt="3.25", ra="359.5", dec="89.0"),
    ]
    path = tmp_path / "catalog.dat"
    path.write_text("\n".join(lines) + "\n")
    return path
