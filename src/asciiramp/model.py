from dataclasses import dataclass

from asciiramp.charsets import get_ramp, validate_ramp
from asciiramp.errors import InvalidInput


@dataclass(frozen=True)
class ConversionConfig:
    target_width: int
    ramp: str
    invert: bool = False

    def __post_init__(self):
        if isinstance(self.target_width, bool) or not isinstance(self.target_width, int):
            raise InvalidInput(f"Target width must be an integer, got {self.target_width!r}")
        if self.target_width < 1:
            raise InvalidInput(f"Target width must be at least 1, got {self.target_width}")
        validate_ramp(self.ramp)

    @classmethod
    def from_preset(cls, name: str, target_width: int, invert: bool = False) -> "ConversionConfig":
        return cls(target_width=target_width, ramp=get_ramp(name), invert=invert)


@dataclass(frozen=True)
class AsciiArt:
    lines: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        """Every row terminated by a newline, the last one included."""
        return "".join(line + "\n" for line in self.lines)

    def __str__(self) -> str:
        return self.text
