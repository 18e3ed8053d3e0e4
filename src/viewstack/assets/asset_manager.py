"""
asset_manager.py
----------------
Path-keyed cache of images, sounds and fonts.

Views typically fill the cache from load_assets and read it back in init()
and draw():

    def load_assets(self):
        yield from self.assets.preload_all([("image", "title.png"), ("sound", "click.wav")])

    def init(self):
        self.title = self.assets.get_image("title.png")
"""

import os

import pygame

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.errors import AssetNotLoadedError, raise_logged
from viewstack.core.runtime.settings import Assets


# ===========================================================
# Default Loaders
# ===========================================================

def _load_image(path):
    image = pygame.image.load(path)
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_sound(path):
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def _load_font(path):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, Assets.FONT_SIZE)


DEFAULT_LOADERS = {
    "image": _load_image,
    "sound": _load_sound,
    "font": _load_font,
}


class AssetManager:
    """Loads assets once and serves them from memory until unloaded."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, root=None, loaders=None):
        """
        Args:
            root: Directory holding the asset folders (Assets.ROOT if None)
            loaders: Optional {kind: loader(path)} overrides
        """
        self.root = root if root is not None else Assets.ROOT
        self._loaders = dict(DEFAULT_LOADERS)
        if loaders:
            self._loaders.update(loaders)
        self._assets = {}

        DebugLogger.init_entry("AssetManager")

    # ===========================================================
    # Path Resolution
    # ===========================================================

    def get_path(self, kind: str, name: str) -> str:
        directories = {
            "image": Assets.IMAGE_DIR,
            "sound": Assets.AUDIO_DIR,
            "font": Assets.FONT_DIR,
        }
        if kind not in directories:
            raise ValueError(f"Unknown asset kind: {kind}")
        return os.path.join(self.root, directories[kind], name)

    # ===========================================================
    # Generic API
    # ===========================================================

    def is_loaded(self, kind: str, name: str) -> bool:
        return self.get_path(kind, name) in self._assets

    def preload(self, kind: str, name: str) -> None:
        """Load an asset into the cache unless it is already there."""
        path = self.get_path(kind, name)
        if path in self._assets:
            return
        self._assets[path] = self._loaders[kind](path)
        DebugLogger.action(f"Loaded {kind} {path}", category="assets")

    def load(self, kind: str, name: str, on_complete=None):
        """Load (or fetch) an asset, pass it to on_complete and return it."""
        self.preload(kind, name)
        asset = self.get(kind, name)
        if on_complete is not None:
            on_complete(asset)
        return asset

    def get(self, kind: str, name: str):
        """
        Fetch a cached asset.

        Raises:
            AssetNotLoadedError: the asset was never loaded or was unloaded
        """
        path = self.get_path(kind, name)
        if path not in self._assets:
            raise_logged(AssetNotLoadedError, f"Asset has not been loaded: {path}", category="assets")
        return self._assets[path]

    def unload(self, kind: str, name: str) -> None:
        self._assets.pop(self.get_path(kind, name), None)

    def unload_all(self) -> None:
        self._assets.clear()
        DebugLogger.action("Unloaded all assets", category="assets")

    def preload_all(self, requests):
        """
        Generator loading several assets, yielding progress after each one.

        Args:
            requests: Iterable of (kind, name) pairs
        """
        requests = list(requests)
        total = len(requests)
        for loaded, (kind, name) in enumerate(requests, start=1):
            self.preload(kind, name)
            yield loaded / total

    # ===========================================================
    # Typed Shortcuts
    # ===========================================================

    def preload_image(self, name):
        self.preload("image", name)

    def preload_sound(self, name):
        self.preload("sound", name)

    def preload_font(self, name):
        self.preload("font", name)

    def load_image(self, name, on_complete=None):
        return self.load("image", name, on_complete)

    def load_sound(self, name, on_complete=None):
        return self.load("sound", name, on_complete)

    def load_font(self, name, on_complete=None):
        return self.load("font", name, on_complete)

    def get_image(self, name):
        return self.get("image", name)

    def get_sound(self, name):
        return self.get("sound", name)

    def get_font(self, name):
        return self.get("font", name)

    def unload_image(self, name):
        self.unload("image", name)

    def unload_sound(self, name):
        self.unload("sound", name)

    def unload_font(self, name):
        self.unload("font", name)

    def __len__(self):
        return len(self._assets)
