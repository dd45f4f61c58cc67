"""Tests for the command line entry point."""

import numpy as np
import pytest
from PIL import Image

from simplexgen.main import build_parser, main


def test_sample_prints_value(capsys):
    """--sample prints the noise value at one point."""
    main(["--sample", "0.1,-0.5"])
    out = capsys.readouterr().out.strip()
    assert float(out) == pytest.approx(0.16815495823682902, abs=1e-10)


def test_sample_infers_dimensions(capsys):
    """The sample's coordinate count picks the dimensionality."""
    main(["--seed", "88", "--sample", "0.5,0.6,0.7"])
    assert float(capsys.readouterr().out) == pytest.approx(0.4227759870550164, abs=1e-10)


def test_sample_dimension_mismatch(capsys):
    """A sample that does not match -d is a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(["-d", "3", "--sample", "0.1,0.2"])
    assert excinfo.value.code == 2


def test_statistics_report(capsys):
    """Without output options the grid statistics are printed."""
    main(["--size", "8x4", "--octaves", "2"])
    out = capsys.readouterr().out
    assert "8x4 samples" in out
    assert "min:" in out and "max:" in out and "mean:" in out


def test_writes_npy(tmp_path):
    """-o with a .npy suffix stores the raw grid."""
    path = tmp_path / "grid.npy"
    main(["-d", "3", "--size", "5x3", "--origin", "0,0,1.5", "-o", str(path)])
    grid = np.load(path)
    assert grid.shape == (3, 5)


def test_writes_image(tmp_path):
    """-o with an image suffix writes a grayscale preview."""
    path = tmp_path / "noise.png"
    main(["--size", "12x6", "-o", str(path)])
    image = Image.open(path)
    assert image.size == (12, 6)
    assert image.mode == "L"


def test_config_file_with_overrides(tmp_path, capsys):
    """Command line options override values from the settings file."""
    config = tmp_path / "cfg.yaml"
    config.write_text("seed: 5\ndimensions: 4\nsize: [4, 4]\n")
    main(["-c", str(config), "--seed", "88", "--sample", "0.5,0.0,0.0,0.0"])
    assert float(capsys.readouterr().out) == pytest.approx(0.08398241210986652, abs=1e-10)


def test_missing_config_is_usage_error(tmp_path):
    """A missing settings file exits with status 2."""
    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(tmp_path / "missing.yaml")])
    assert excinfo.value.code == 2


def test_out_of_domain_sample_is_usage_error():
    """Samples outside the noise domain exit with status 2."""
    with pytest.raises(SystemExit) as excinfo:
        main(["--sample", "1e12,0"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "argv",
    [
        ["--size", "12by6"],
        ["--origin", "1"],
        ["--sample", "a,b"],
        ["-d", "5"],
        ["--octaves", "-2"],
        ["--step", "0"],
    ],
)
def test_invalid_arguments(argv):
    """Malformed or out-of-range options exit with status 2."""
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_parser_parses_lists():
    """Size and coordinate lists are parsed into tuples."""
    args = build_parser().parse_args(["--size", "640x480", "--origin", "1,2,3,4", "--sample", "0.5,1"])
    assert args.size == (640, 480)
    assert args.origin == (1.0, 2.0, 3.0, 4.0)
    assert args.sample == (0.5, 1.0)


@pytest.mark.parametrize("text", ["step: fast\n", "octaves: five\n", "gain: half\n"])
def test_wrongly_typed_config_is_usage_error(tmp_path, text):
    """Settings files with wrongly typed values exit with status 2."""
    config = tmp_path / "typed.yaml"
    config.write_text(text)
    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(config)])
    assert excinfo.value.code == 2


def test_amplitude_option(capsys):
    """--amplitude scales the sampled value."""
    main(["--amplitude", "2", "--sample", "0.1,-0.5"])
    assert float(capsys.readouterr().out) == pytest.approx(2 * 0.16815495823682902, abs=1e-10)
