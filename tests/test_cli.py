import pytest

from pitchboard.cli import build_parser, main


def test_headless_render(tmp_path):
    output = tmp_path / "board.png"
    code = main(["--headless", "--output", str(output), "--formation-red", "4-2-3-1", "--no-offside"])
    assert code == 0
    assert output.exists()
    assert output.stat().st_size > 0


def test_unknown_formation_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--formation-blue", "1-1-8"])
