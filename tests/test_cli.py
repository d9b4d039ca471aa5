import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
from click.testing import CliRunner  # noqa: E402
from PIL import Image  # noqa: E402

from starfinder.cli import render_star_map  # noqa: E402


def test_render_star_map_writes_image(catalog_file, tmp_path):
    """the command reads, filters, and writes a greyscale image of the requested size"""
    output = tmp_path / "map.png"
    result = CliRunner().invoke(render_star_map, [str(catalog_file), "-o", str(output),
                                                  "--width", "40", "--height", "20", "-m", "6"])
    assert result.exit_code == 0, result.output
    assert "Total stars: 2" in result.output
    assert f"Image saved as: {output}" in result.output

    with Image.open(output) as image:
        assert image.mode == "L"
        assert image.size == (40, 20)
        pixels = np.asarray(image)
    # Star(10, 20, 4.455) and Star(359.5, 89, 3.25) survive the magnitude ceiling
    assert pixels[12, 1] == 0
    assert pixels[19, 39] == 255
    assert np.count_nonzero(pixels) == 1


def test_render_star_map_csv_and_preview(catalog_file, tmp_path):
    output = tmp_path / "map.png"
    csv_path = tmp_path / "reduced.csv"
    preview = tmp_path / "preview.png"
    result = CliRunner().invoke(render_star_map, [str(catalog_file), "-o", str(output), "-m", "10",
                                                  "--csv", str(csv_path), "--preview", str(preview),
                                                  "--workers", "2", "--report-limit", "0"])
    assert result.exit_code == 0, result.output
    assert preview.exists()
    df = pd.read_csv(csv_path)
    assert list(df["RAdeg"]) == [10.0, 200.0, 359.5]


def test_render_star_map_missing_catalog(tmp_path):
    """a catalog that does not exist is rejected before any work"""
    output = tmp_path / "map.png"
    result = CliRunner().invoke(render_star_map, [str(tmp_path / "missing.dat"), "-o", str(output)])
    assert result.exit_code != 0
    assert not output.exists()


def test_render_star_map_empty_window(catalog_file, tmp_path):
    result = CliRunner().invoke(render_star_map, [str(catalog_file), "-o", str(tmp_path / "map.png"),
                                                  "--min-ra", "100", "--max-ra", "50"])
    assert result.exit_code != 0


def test_render_star_map_unwritable_output(catalog_file, tmp_path):
    result = CliRunner().invoke(render_star_map, [str(catalog_file), "-o", str(tmp_path / "map.unknown")])
    assert result.exit_code == 1
    assert "Could not write" in result.output
