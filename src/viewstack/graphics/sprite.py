"""
sprite.py
---------
Frame animator for sprite sheets.

Frames are read left to right, top to bottom from a sheet of cols x rows
equally sized cells and advanced by elapsed time at a fixed frame rate.
"""

import math

import pygame

from viewstack.core.debug.debug_logger import DebugLogger


class Sprite:
    """
    Animated sprite sheet.

    Attributes:
        sheet: pygame.Surface holding every frame
        cols, rows: Grid dimensions of the sheet
        frame_rate: Frames per second
        loop: Restart after the last frame instead of holding it
        frame_time: Seconds into the current loop
        is_complete: True once a non-looping animation reached its end
    """

    @classmethod
    def load(cls, path, cols, rows, frame_rate, loop=True, asset_manager=None):
        """
        Build a sprite from an image file.

        Args:
            path: Image path, or an image name when asset_manager is given
            asset_manager: Optional AssetManager used to load and cache the sheet
        """
        if asset_manager is not None:
            sheet = asset_manager.load_image(path)
        else:
            sheet = pygame.image.load(path)
        return cls(sheet, cols, rows, frame_rate, loop)

    def __init__(self, sheet, cols: int, rows: int, frame_rate: float, loop: bool = True):
        if cols < 1 or rows < 1:
            raise ValueError(f"Sprite grid must be at least 1x1, got {cols}x{rows}")
        if frame_rate <= 0:
            raise ValueError(f"Sprite frame rate must be positive, got {frame_rate}")

        self.sheet = sheet
        self.cols = cols
        self.rows = rows
        self.frame_rate = frame_rate
        self.loop = loop

        self.frame_time = 0.0
        self.is_complete = False

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def frame_width(self) -> int:
        return self.sheet.get_width() // self.cols

    @property
    def frame_height(self) -> int:
        return self.sheet.get_height() // self.rows

    @property
    def frame_count(self) -> int:
        return self.cols * self.rows

    @property
    def loop_time(self) -> float:
        return self.frame_count / self.frame_rate

    @property
    def current_frame(self) -> int:
        return min(int(math.floor(self.frame_time * self.frame_rate)), self.frame_count - 1)

    # ===========================================================
    # Update & Draw
    # ===========================================================

    def reset(self):
        self.frame_time = 0.0
        self.is_complete = False

    def update(self, dt: float):
        """Advance the animation by dt seconds."""
        if self.is_complete:
            return

        self.frame_time += dt
        if self.frame_time < self.loop_time:
            return

        if self.loop:
            self.frame_time %= self.loop_time
        else:
            self.frame_time = self.loop_time
            self.is_complete = True
            DebugLogger.trace("Animation complete", category="sprite")

    def frame_surface(self):
        """Return the current frame as a subsurface of the sheet."""
        index = self.current_frame
        width, height = self.frame_width, self.frame_height
        rect = pygame.Rect((index % self.cols) * width, (index // self.cols) * height, width, height)
        return self.sheet.subsurface(rect)

    def draw(self, draw_manager, x, y, width=None, height=None, rotation=0.0, layer=0):
        """
        Queue the current frame centered on (x, y).

        Args:
            width, height: Target size (frame size if None)
            rotation: Counter-clockwise rotation in degrees
        """
        frame = self.frame_surface()

        size = (width or self.frame_width, height or self.frame_height)
        if size != frame.get_size():
            frame = pygame.transform.scale(frame, size)
        if rotation:
            frame = pygame.transform.rotate(frame, rotation)

        draw_manager.queue_draw(frame, frame.get_rect(center=(x, y)), layer)
