"""Mastermind board: the game master, the clickable spheres and the answer row."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

CODE_LENGTH = 4
COLOR_COUNT = 6

SolutionListener = Callable[[int, int], None]


@dataclass(frozen=True)
class LinearColor:
    """An RGBA colour with float channels."""

    r: float
    g: float
    b: float
    a: float = 1.0


LinearColor.RED = LinearColor(1.0, 0.0, 0.0)
LinearColor.YELLOW = LinearColor(1.0, 1.0, 0.0)
LinearColor.GREEN = LinearColor(0.0, 1.0, 0.0)
LinearColor.BLUE = LinearColor(0.0, 0.0, 1.0)
LinearColor.GRAY = LinearColor(0.5, 0.5, 0.5)
LinearColor.WHITE = LinearColor(1.0, 1.0, 1.0)
LinearColor.BLACK = LinearColor(0.0, 0.0, 0.0)


def _default_colors() -> list[LinearColor]:
    return [
        LinearColor.RED,
        LinearColor.YELLOW,
        LinearColor.GREEN,
        LinearColor.BLUE,
        LinearColor.GRAY,
        LinearColor.WHITE,
    ]


class MasterMindGame:
    """Holds the secret code, scores answers and notifies listeners."""

    def __init__(
        self,
        solution: Iterable[int] | None = None,
        colors: Iterable[LinearColor] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.colors: list[LinearColor] = list(colors) if colors is not None else _default_colors()
        self._listeners: list[SolutionListener] = []
        if solution is None:
            self.solution: list[int] = []
            self.create_solution(rng)
        else:
            self.solution = list(solution)

    def get_color(self, color_number: int) -> LinearColor:
        """Return the colour for a colour number, or black if there is none."""
        if 0 <= color_number < len(self.colors):
            return self.colors[color_number]
        return LinearColor.BLACK

    def create_solution(self, rng: random.Random | None = None) -> list[int]:
        """Draw a new secret code of four colour numbers in 0..5."""
        source = rng if rng is not None else random
        self.solution = [source.randint(0, COLOR_COUNT - 1) for _ in range(CODE_LENGTH)]
        return self.solution

    def subscribe(self, callback: SolutionListener) -> None:
        """Register a callback receiving (good_places, wrong_places) after each check."""
        self._listeners.append(callback)

    def check_answer(self, answer: Sequence[int]) -> bool:
        """Score an answer, notify listeners and return whether it matches the code."""
        if len(self.solution) < CODE_LENGTH:
            raise RuntimeError("no solution has been created")
        if len(answer) < CODE_LENGTH:
            raise ValueError(f"an answer needs {CODE_LENGTH} colours, got {len(answer)}")

        pairs = list(zip(answer[:CODE_LENGTH], self.solution[:CODE_LENGTH]))
        exact = [given == secret for given, secret in pairs]
        # The good-place count starts at the code length.
        good_places = CODE_LENGTH + sum(exact)

        unmatched_solution = [secret for (_, secret), hit in zip(pairs, exact) if not hit]
        wrong_places = 0
        for (given, _), hit in zip(pairs, exact):
            if not hit and given in unmatched_solution:
                unmatched_solution.remove(given)
                wrong_places += 1

        for listener in list(self._listeners):
            listener(good_places, wrong_places)
        return all(exact)


@dataclass
class MastermindSphere:
    """A peg whose colour cycles through the game's palette when clicked."""

    manager: MasterMindGame | None = None
    color_number: int = 0
    blocked_color: LinearColor = LinearColor.BLACK
    color: LinearColor = field(init=False)

    def __post_init__(self) -> None:
        self.color = self.blocked_color

    def clicked(self) -> None:
        """Advance to the next colour number, wrapping after the last one."""
        self.color_number += 1
        if self.color_number >= COLOR_COUNT:
            self.color_number = 0
        if self.manager is not None:
            self.change_color(self.manager.get_color(self.color_number))

    def change_color(self, new_color: LinearColor) -> None:
        """Show a new colour on the sphere."""
        self.color = new_color


class MastermindRow:
    """A row of player spheres submitted together as one answer."""

    def __init__(
        self,
        manager: MasterMindGame,
        player_spheres: Iterable[MastermindSphere] = (),
    ) -> None:
        self.manager = manager
        self.player_spheres: list[MastermindSphere] = list(player_spheres)
        self.last_result: tuple[int, int] | None = None
        manager.subscribe(self.apply_solution)

    def clicked(self) -> bool:
        """Submit the colours of the row's spheres to the game."""
        if len(self.player_spheres) < CODE_LENGTH:
            raise ValueError(
                f"a row needs {CODE_LENGTH} spheres, has {len(self.player_spheres)}"
            )
        answer = [sphere.color_number for sphere in self.player_spheres[:CODE_LENGTH]]
        return self.manager.check_answer(answer)

    def apply_solution(self, good_places: int, wrong_places: int) -> None:
        """Record the score of the last checked answer."""
        self.last_result = (good_places, wrong_places)