import sys
from pathlib import Path
from typing import Protocol, TextIO

from asciiramp.model import AsciiArt

DEFAULT_FILENAME = "ascii-art.txt"


class OutputSink(Protocol):
    def write(self, art: AsciiArt) -> None:
        """Deliver finished art somewhere outside the converter."""
        ...


class StreamSink:
    """Display art on a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def write(self, art: AsciiArt) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(art.text)
        stream.flush()


class FileSink:
    """Save art as a plain-text download."""

    def __init__(self, path: str | Path = DEFAULT_FILENAME):
        self.path = Path(path)

    def write(self, art: AsciiArt) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(art.text, encoding="utf-8")
