import pytest
from PIL import Image

from asciiramp.cli import main


@pytest.fixture
def white_png(tmp_path):
    path = tmp_path / "white.png"
    Image.new("RGB", (100, 50), (255, 255, 255)).save(path)
    return path


def test_prints_art(white_png, capsys):
    assert main([str(white_png), "-w", "40", "-c", "minimal"]) == 0
    out = capsys.readouterr().out
    assert out == ("#" * 40 + "\n") * 10


def test_invert(white_png, capsys):
    assert main([str(white_png), "-w", "20", "-c", "minimal", "-i"]) == 0
    assert capsys.readouterr().out == (" " * 20 + "\n") * 5


def test_default_width_when_not_a_tty(white_png, capsys):
    assert main([str(white_png)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert all(len(line) == 80 for line in lines)
    assert len(lines) == 20


def test_output_file_default_name(white_png, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(white_png), "-w", "20", "-c", "blocks", "-o"]) == 0
    assert (tmp_path / "ascii-art.txt").read_text(encoding="utf-8") == ("█" * 20 + "\n") * 5


def test_output_file_explicit(white_png, tmp_path):
    target = tmp_path / "art.txt"
    assert main([str(white_png), "-w", "20", "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8").splitlines()[0] == "@" * 20


def test_width_out_of_range(white_png, capsys):
    with pytest.raises(SystemExit):
        main([str(white_png), "-w", "5"])
    assert "between 20 and 300" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.png")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_not_an_image(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("not an image")
    assert main([str(path)]) == 1
    assert "Not a recognised image" in capsys.readouterr().err


def test_too_many_pixels(tmp_path, capsys, monkeypatch):
    path = tmp_path / "big.png"
    Image.new("RGB", (100, 100)).save(path)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    assert main([str(path), "-w", "20"]) == 1
    assert "Image too large" in capsys.readouterr().err


def test_output_path_is_directory(white_png, tmp_path, capsys):
    assert main([str(white_png), "-w", "20", "-o", str(tmp_path)]) == 1
    assert "Could not write output" in capsys.readouterr().err
