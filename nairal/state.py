"""Game states and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class State(ABC):
    """One screen of the game: it is entered, updated, drawn and left."""

    @abstractmethod
    def enter(self) -> None: ...

    @abstractmethod
    def exit(self) -> None: ...

    @abstractmethod
    def update(self, dt: float) -> None: ...

    @abstractmethod
    def render(self, surface: Any) -> None: ...

    @abstractmethod
    def handle_event(self, event: Any) -> None: ...


class StateManager:
    """Holds the current state and applies queued state changes."""

    def __init__(self) -> None:
        self.current_state: State | None = None
        self.pending_state: State | None = None
        self.change_pending = False

    def change_state(self, new_state: State | None) -> None:
        """Leave the current state at once and enter ``new_state``."""
        if self.current_state is not None:
            self.current_state.exit()
        self.current_state = new_state
        if self.current_state is not None:
            self.current_state.enter()

    def update(self, dt: float) -> None:
        """Update the current state, then apply any queued change."""
        if self.current_state is not None:
            self.current_state.update(dt)
        if self.change_pending:
            pending = self.pending_state
            self.pending_state = None
            self.change_pending = False
            self.change_state(pending)

    def render(self, surface: Any) -> None:
        if self.current_state is not None:
            self.current_state.render(surface)

    def handle_event(self, event: Any) -> None:
        if self.current_state is not None:
            self.current_state.handle_event(event)

    def enqueue_state_change(self, new_state: State | None) -> None:
        """Switch to ``new_state`` after the next update finishes."""
        self.pending_state = new_state
        self.change_pending = True