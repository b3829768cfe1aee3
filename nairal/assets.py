"""Cached loading of textures and sound buffers, and playing sounds."""

from __future__ import annotations

import logging
import os
from collections import deque
from typing import Any, Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

logger = logging.getLogger(__name__)


class TextureManager:
    """Loads each image file once and hands out the cached surface."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    def __len__(self) -> int:
        return len(self._textures)

    def load(self, path: str) -> pygame.Surface:
        """The surface for ``path``; an empty surface if it cannot be read."""
        cached = self._textures.get(path)
        if cached is not None:
            return cached
        try:
            texture = pygame.image.load(path)
        except (pygame.error, OSError):
            logger.error("failed to load texture: %s", path)
            texture = pygame.Surface((0, 0))
        self._textures[path] = texture
        return texture


def _load_sound(path: str) -> Any:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        logger.error("failed to load sound: %s", path)
        return None


class _Voice:
    """One playback of a sound buffer, with its own looping and volume."""

    def __init__(self, buffer: Any) -> None:
        self.buffer = buffer
        self.looping = False
        self._volume = 100.0
        self._channel: Any = None

    @property
    def volume(self) -> float:
        """Volume from 0 to 100."""
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = max(0.0, min(float(value), 100.0))
        if self.playing:
            self._channel.set_volume(self._volume / 100.0)

    @property
    def playing(self) -> bool:
        channel = self._channel
        return (
            channel is not None
            and bool(channel.get_busy())
            and channel.get_sound() is self.buffer
        )

    def play(self) -> None:
        """Start from the beginning; a sound that failed to load stays silent."""
        if self.buffer is None:
            return
        self.stop()
        channel = self.buffer.play(loops=-1 if self.looping else 0)
        if channel is not None:
            channel.set_volume(self._volume / 100.0)
        self._channel = channel

    def stop(self) -> None:
        if self.playing:
            self._channel.stop()
        self._channel = None


class SoundManager:
    """Caches sound buffers and keeps the sounds started from them."""

    def __init__(self, loader: Callable[[str], Any] | None = None) -> None:
        self._loader = loader or _load_sound
        self._buffers: dict[str, Any] = {}
        self._voices: deque[_Voice] = deque()

    def __len__(self) -> int:
        return len(self._voices)

    def play(self, path: str) -> _Voice:
        """A new, not yet started sound for ``path``; the buffer loads once."""
        if path not in self._buffers:
            self._buffers[path] = self._loader(path)
        voice = _Voice(self._buffers[path])
        self._voices.append(voice)
        return voice

    def cleanup_stopped(self) -> None:
        """Drop stopped sounds from the front of the queue."""
        while self._voices and not self._voices[0].playing:
            self._voices.popleft()

    def stop_all(self) -> None:
        for voice in self._voices:
            voice.stop()