"""Keyboard state sampled once per tick."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Set

import pygame

LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
JUMP_KEYS = (pygame.K_w, pygame.K_UP)


@dataclass(frozen=True)
class Controls:
    """Logical inputs consumed by the physics tick."""

    left: bool = False
    right: bool = False
    jump: bool = False


IDLE = Controls()


class HeldKeys:
    """Tracks which keys are currently down from KEYDOWN / KEYUP events."""

    def __init__(self) -> None:
        self._down: Set[int] = set()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._down.add(event.key)
        elif event.type == pygame.KEYUP:
            self._down.discard(event.key)

    def release_all(self) -> None:
        self._down.clear()

    def is_held(self, key: int) -> bool:
        return key in self._down

    def sample(self) -> Controls:
        return Controls(
            left=any(self.is_held(k) for k in LEFT_KEYS),
            right=any(self.is_held(k) for k in RIGHT_KEYS),
            jump=any(self.is_held(k) for k in JUMP_KEYS),
        )
