"""The player's score and the high score kept in a file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Scoreboard:
    """Counts destroyed ships and stores the best count in a file."""

    path: Path = Path("highscore.txt")
    score: int = 0
    high_score: int = 0

    def load_high_score(self) -> int:
        """Read the high score from the file; a missing or unreadable file gives 0."""
        try:
            text = Path(self.path).read_text()
        except OSError:
            self.high_score = 0
            return self.high_score
        match = _LEADING_INTEGER.match(text)
        self.high_score = int(match.group(1)) if match else 0
        return self.high_score

    def increase(self) -> None:
        """Add one point; a new high score is written to the file at once."""
        self.score += 1
        if self.score > self.high_score:
            self.high_score = self.score
            try:
                Path(self.path).write_text(str(self.high_score))
            except OSError:
                pass