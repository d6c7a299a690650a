"""Memory card game: flippable cards and the scoring game mode."""

from __future__ import annotations

from dataclasses import dataclass

FACE_DOWN_ANGLE = 180.0
FACE_UP_ANGLE = 0.0


@dataclass
class MemoryCard:
    """A card that flips over and toggles whether it can be clicked."""

    is_clickable: bool = True
    rotation: float = FACE_UP_ANGLE

    def turn_card(self) -> float:
        """Flip the card and return its new rotation in degrees."""
        self.is_clickable = not self.is_clickable
        self.rotation = FACE_DOWN_ANGLE if self.rotation == FACE_UP_ANGLE else FACE_UP_ANGLE
        return self.rotation


@dataclass
class MemoryGame:
    """Keeps the score and the previously turned card."""

    score: int = 0
    previous_card: MemoryCard | None = None

    def update_score(self, value: int) -> int:
        """Add a value to the score and return the new score."""
        self.score += value
        return self.score

    def test_pair(self, first_card_value: int, second_card_value: int) -> bool:
        """Return whether two card values form a pair."""
        return first_card_value == second_card_value