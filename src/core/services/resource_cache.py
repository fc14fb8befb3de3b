"""
resource_cache.py
-----------------
Image loading and caching keyed by asset path.

Loading is split from lookup: `load()` queues keys and hands back a handle,
`await_ready()` makes them resident and fires the ready callbacks, and only
then may `get()` be used. The frame loop is started from a ready callback, so
no frame is ever drawn with a half-loaded cache.
"""

import os
import zlib

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Assets


class ResourceError(Exception):
    """Raised for unknown keys or (in strict mode) unreadable images."""


# ===========================================================
# Load Handle
# ===========================================================

class LoadHandle:
    """Completion signal for one `load()` request."""

    __slots__ = ("keys", "_cache")

    def __init__(self, keys, cache):
        self.keys = tuple(keys)
        self._cache = cache

    @property
    def ready(self) -> bool:
        return all(self._cache.is_loaded(key) for key in self.keys)


# ===========================================================
# Resource Cache
# ===========================================================

class ResourceCache:
    """Loads images from disk once and serves them by key."""

    def __init__(self, root: str = Assets.ROOT, strict: bool = Assets.STRICT):
        """
        Args:
            root: Directory asset keys are resolved against
            strict: Raise on unreadable images instead of using a placeholder
        """
        self.root = root
        self.strict = strict
        self.images = {}
        self._pending = []
        self._ready_callbacks = []

        DebugLogger.init_entry("ResourceCache")

    # ===========================================================
    # Loading
    # ===========================================================

    def load(self, keys) -> LoadHandle:
        """
        Queue images for loading.

        Args:
            keys: Iterable of asset paths relative to `root`

        Returns:
            LoadHandle: Becomes ready once every key is resident
        """
        keys = list(keys)
        for key in keys:
            if key not in self.images and key not in self._pending:
                self._pending.append(key)

        DebugLogger.system(f"Queued {len(self._pending)} image(s)", category="loading")
        return LoadHandle(keys, self)

    def await_ready(self, handle: LoadHandle = None) -> None:
        """
        Make queued images resident, then notify ready listeners.

        Args:
            handle: Optional handle; every queued key is loaded regardless

        Raises:
            ResourceError: strict mode and an image could not be read
        """
        while self._pending:
            key = self._pending.pop(0)
            self.images[key] = self._load_image(key)

        if handle is not None and not handle.ready:
            missing = [k for k in handle.keys if not self.is_loaded(k)]
            raise ResourceError(f"Images never loaded: {missing}")

        DebugLogger.action(f"{len(self.images)} image(s) resident", category="loading")
        self._fire_ready()

    def on_ready(self, callback) -> None:
        """
        Call `callback` once everything queued is resident.

        Fires immediately if the cache is already ready.
        """
        self._ready_callbacks.append(callback)
        if self.images and self.is_ready():
            self._fire_ready()

    def is_ready(self) -> bool:
        return not self._pending

    def is_loaded(self, key) -> bool:
        return key in self.images

    # ===========================================================
    # Lookup
    # ===========================================================

    def get(self, key) -> pygame.Surface:
        """
        Retrieve a resident image.

        Raises:
            ResourceError: Key was never loaded (or loading has not finished)
        """
        try:
            return self.images[key]
        except KeyError:
            raise ResourceError(f"Image '{key}' is not loaded") from None

    # ===========================================================
    # Internals
    # ===========================================================

    def _fire_ready(self):
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()

    def _load_image(self, key) -> pygame.Surface:
        path = os.path.join(self.root, key)
        try:
            img = pygame.image.load(path)
        except (FileNotFoundError, pygame.error) as e:
            if self.strict:
                DebugLogger.fail(f"Failed to load {path}: {e}", category="loading")
                raise ResourceError(f"Cannot load image '{key}'") from e
            DebugLogger.warn(f"Missing image at {path}, using placeholder", category="loading")
            return self._generate_placeholder(key)

        # convert_alpha needs a video mode; headless callers keep the raw surface
        if pygame.display.get_surface() is not None:
            img = img.convert_alpha()

        DebugLogger.trace(f"Loaded '{key}' {img.get_size()}", category="loading")
        return img

    @staticmethod
    def _generate_placeholder(key) -> pygame.Surface:
        """Solid tile with a per-key color so missing art stays distinguishable."""
        seed = zlib.crc32(key.encode("utf-8"))
        color = (64 + seed % 160, 64 + (seed >> 8) % 160, 64 + (seed >> 16) % 160)
        img = pygame.Surface(Assets.PLACEHOLDER_SIZE, pygame.SRCALPHA)
        img.fill(color)
        return img
