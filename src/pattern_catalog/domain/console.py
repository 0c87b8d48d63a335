"""Console output port shared by every demo."""
import sys
from typing import List, Optional, TextIO


class Console:
    """
    Collects the lines a demo prints.

    Demos never call ``print`` directly; they write to a Console so the
    output can be echoed to a terminal, captured for tests, or embedded in
    the generated markdown as sample output.
    """

    def __init__(self, echo: bool = False, stream: Optional[TextIO] = None):
        self._lines: List[str] = []
        self._echo = echo
        self._stream = stream

    def write(self, line: str = "") -> None:
        """Record a line and echo it when enabled."""
        self._lines.append(line)
        if self._echo:
            stream = self._stream or sys.stdout
            stream.write(line + "\n")

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
