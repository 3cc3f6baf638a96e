import pytest

from asciiramp.charsets import DETAILED
from asciiramp.errors import InvalidInput
from asciiramp.model import AsciiArt, ConversionConfig


def test_config_from_preset():
    config = ConversionConfig.from_preset("detailed", 120, invert=True)
    assert config.ramp == DETAILED
    assert config.target_width == 120
    assert config.invert is True


def test_config_is_frozen():
    config = ConversionConfig(target_width=10, ramp=" #")
    with pytest.raises(AttributeError):
        config.target_width = 20


@pytest.mark.parametrize("width", [0, -5, 2.5, True])
def test_config_rejects_bad_width(width):
    with pytest.raises(InvalidInput, match="Target width"):
        ConversionConfig(target_width=width, ramp=" #")


def test_config_rejects_empty_ramp():
    with pytest.raises(InvalidInput):
        ConversionConfig(target_width=10, ramp="")


def test_ascii_art_text_terminates_every_line():
    art = AsciiArt(lines=("ab", "cd"))
    assert art.text == "ab\ncd\n"
    assert str(art) == art.text
    assert art.width == 2
    assert art.height == 2
