from click.testing import CliRunner

from quadrant_blur.cli.process_image import main

from .conftest import encode_png, solid_pixels


def test_cli_writes_result(tmp_path):
    source = tmp_path / "in.png"
    source.write_bytes(encode_png(solid_pixels(120, 120)))
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(main, [str(source), "--output-dir", str(out_dir), "--blur-offset", "8"])

    assert result.exit_code == 0, result.output
    assert str(out_dir / "result.png") in result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["1.png", "2.png", "3.png", "4.png", "result.png"]


def test_cli_reports_too_small_image(tmp_path):
    source = tmp_path / "tiny.png"
    source.write_bytes(encode_png(solid_pixels(20, 20)))

    result = CliRunner().invoke(main, [str(source), "--output-dir", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "Image too small" in result.output
