"""Textures and sounds, loaded once and looked up by key."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PureWindowsPath
from typing import Any, Optional, Union

import pygame

from framekit.drawing import TRANSPARENT_KEY

PathLike = Union[str, Path]


class SoundChannel(Enum):
    BGM = 0
    EFFECT = 1


class Texture:
    """A bitmap image with its lookup key and file path."""

    def __init__(self, key: str = "", path: PathLike = "") -> None:
        self.key = key
        self.path = path
        self.surface: Optional[pygame.Surface] = None

    @property
    def width(self) -> int:
        return self.surface.get_width() if self.surface is not None else 0

    @property
    def height(self) -> int:
        return self.surface.get_height() if self.surface is not None else 0

    def load(self, path: PathLike) -> None:
        """Load the image; magenta pixels become transparent when drawn."""
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"texture not found: {file_path}")
        surface = pygame.image.load(str(file_path))
        surface.set_colorkey(TRANSPARENT_KEY)
        self.surface = surface


@dataclass
class SoundInfo:
    """A loaded sound and whether it loops."""

    sound: Any
    loop: bool


class ResourceManager:
    """Caches textures and sounds found under <root>/Resource."""

    def __init__(self, root: Optional[PathLike] = None) -> None:
        base = Path.cwd() if root is None else Path(root)
        self.resource_path = base / "Resource"
        self._textures: dict[str, Texture] = {}
        self._sounds: dict[str, SoundInfo] = {}
        self._channels: dict[SoundChannel, Any] = {}
        self._sound_enabled = self._init_mixer()

    @staticmethod
    def _init_mixer() -> bool:
        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(len(SoundChannel))
        except pygame.error:
            return False
        return True

    @property
    def sound_enabled(self) -> bool:
        return self._sound_enabled

    def _resolve(self, path: PathLike) -> Path:
        return self.resource_path.joinpath(*PureWindowsPath(str(path)).parts)

    def texture_load(self, key: str, path: PathLike) -> Texture:
        """Return the texture under key, loading it from path the first time."""
        texture = self.texture_find(key)
        if texture is not None:
            return texture
        full_path = self._resolve(path)
        texture = Texture(key, full_path)
        texture.load(full_path)
        self._textures[key] = texture
        return texture

    def texture_find(self, key: str) -> Optional[Texture]:
        return self._textures.get(key)

    def release(self) -> None:
        """Drop every texture and sound and shut the sound system down."""
        self._textures.clear()
        for channel in self._channels.values():
            channel.stop()
        self._channels.clear()
        self._sounds.clear()
        if self._sound_enabled:
            pygame.mixer.quit()
            self._sound_enabled = False

    def load_sound(self, key: str, path: PathLike, loop: bool) -> SoundInfo:
        """Load a sound under key unless one is already there."""
        existing = self.find_sound(key)
        if existing is not None:
            return existing
        full_path = self._resolve(path)
        if not full_path.is_file():
            raise FileNotFoundError(f"sound not found: {full_path}")
        sound = pygame.mixer.Sound(str(full_path)) if self._sound_enabled else None
        info = SoundInfo(sound, loop)
        self._sounds[key] = info
        return info

    def find_sound(self, key: str) -> Optional[SoundInfo]:
        return self._sounds.get(key)

    def active_channel(self, channel: SoundChannel) -> Any:
        """The mixer channel last used for the given sound channel, or None."""
        return self._channels.get(channel)

    def play(self, key: str) -> None:
        """Play a sound: looping sounds on the BGM channel, others as effects."""
        info = self.find_sound(key)
        if info is None or info.sound is None:
            return
        channel = SoundChannel.BGM if info.loop else SoundChannel.EFFECT
        played = info.sound.play(loops=-1 if info.loop else 0)
        if played is not None:
            self._channels[channel] = played

    def stop(self, channel: SoundChannel) -> None:
        active = self._channels.get(channel)
        if active is not None:
            active.stop()

    def volume(self, channel: SoundChannel, volume: float) -> None:
        """Set a channel's volume, from 0.0 to 1.0."""
        active = self._channels.get(channel)
        if active is not None:
            active.set_volume(volume)

    def pause(self, channel: SoundChannel, paused: bool) -> None:
        active = self._channels.get(channel)
        if active is None:
            return
        if paused:
            active.pause()
        else:
            active.unpause()