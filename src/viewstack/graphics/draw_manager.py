"""
draw_manager.py
---------------
Layered draw queue shared by every view.

Responsibilities:
- Maintain per-layer queues of surfaces and shapes
- Scope each view layer's draws with push()/pop() so local layers never
  interleave with another view layer's
- Render text and translucent full-screen overlays
- Render queued items in layer order
"""

from contextlib import contextmanager

import pygame

from viewstack.core.debug.debug_logger import DebugLogger
from viewstack.core.errors import RenderStateError, raise_logged
from viewstack.core.runtime.settings import Display, Layers


class DrawManager:
    """Handles rendering with layered batching and per-view-layer draw scopes."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, width=None, height=None):
        """
        Args:
            width: Logical screen width (Display.WIDTH if None)
            height: Logical screen height (Display.HEIGHT if None)
        """
        self.width = width or Display.WIDTH
        self.height = height or Display.HEIGHT

        # Layer queues
        self.surface_layers = {}  # {layer: [(surface, rect), ...]}
        self.shape_layers = {}    # {layer: [(shape_type, rect, color, kwargs), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        # Saved draw state: base layer of each open scope
        self._scope_stack = []

        self._fonts = {}
        self._overlay_cache = None

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Draw State
    # ===========================================================

    @property
    def base_layer(self) -> int:
        return self._scope_stack[-1] if self._scope_stack else 0

    @property
    def scope_depth(self) -> int:
        return len(self._scope_stack)

    def push(self, view_layer: int = 0):
        """Save draw state and offset subsequent draws into a view layer's band."""
        self._scope_stack.append(view_layer * Layers.SPAN)

    def pop(self):
        """Restore the draw state saved by the matching push()."""
        if not self._scope_stack:
            raise_logged(RenderStateError, "pop() called without a matching push()", category="render")
        self._scope_stack.pop()

    @contextmanager
    def layer_scope(self, view_layer: int = 0):
        """Context manager pairing push() and pop()."""
        self.push(view_layer)
        try:
            yield self
        finally:
            self.pop()

    def _absolute(self, layer: int) -> int:
        """Offset a local layer into the current band, clamped to [0, Layers.SPAN)."""
        if not 0 <= layer < Layers.SPAN:
            clamped = max(0, min(Layers.SPAN - 1, layer))
            DebugLogger.warn(
                f"Local layer {layer} outside 0..{Layers.SPAN - 1}, clamped to {clamped}",
                category="render"
            )
            layer = clamped
        return self.base_layer + layer

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()
        for layer_items in self.shape_layers.values():
            layer_items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            rect: Position rectangle or (x, y) tuple
            layer: Local render layer (lower = first)
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return

        layer = self._absolute(layer)
        if layer not in self.surface_layers:
            self.surface_layers[layer] = []
            self._layers_dirty = True

        self.surface_layers[layer].append((surface, rect))

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """
        Queue a primitive shape.

        Args:
            shape_type: "rect", "circle", "ellipse", "line" or "overlay"
            rect: Position and dimensions
            color: RGB or RGBA tuple
            layer: Local render layer
            **kwargs: Shape-specific params
        """
        layer = self._absolute(layer)
        if layer not in self.shape_layers:
            self.shape_layers[layer] = []
            self._layers_dirty = True

        self.shape_layers[layer].append((shape_type, rect, color, kwargs))

    def queue_overlay(self, color=(0, 0, 0), alpha=255, layer=Layers.FADE_OVERLAY):
        """Queue a translucent rectangle covering the whole screen."""
        alpha = max(0, min(255, int(alpha)))
        if alpha == 0:
            return
        self.queue_shape("overlay", None, color, layer, alpha=alpha)

    def queue_text(self, text, center, size=24, color=(255, 255, 255), alpha=255, bold=False, layer=0):
        """
        Render text and queue it centered on a point.

        Returns:
            pygame.Surface: The rendered text surface
        """
        font = self._get_font(size, bold)
        surface = font.render(text, True, color)
        if alpha < 255:
            surface.set_alpha(max(0, int(alpha)))
        self.queue_draw(surface, surface.get_rect(center=center), layer)
        return surface

    def _get_font(self, size, bold):
        key = (int(size), bool(bold))
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, max(1, int(size)))
            font.set_bold(bold)
            self._fonts[key] = font
        return self._fonts[key]

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface, debug=False):
        """
        Render all queued items to target surface.

        Args:
            target_surface: Main display surface
            debug: Log render stats if True
        """
        if self._scope_stack:
            DebugLogger.warn(f"Rendering with {len(self._scope_stack)} unclosed draw scopes", category="render")

        target_surface.fill(Display.BACKGROUND_COLOR)

        if self._layers_dirty:
            all_layers = set(self.surface_layers.keys()) | set(self.shape_layers.keys())
            self._layer_keys_cache = sorted(all_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            if self.surface_layers.get(layer):
                target_surface.blits(self.surface_layers[layer])

            for shape_type, rect, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, rect, color, **kwargs)

        if debug:
            surface_count = sum(len(items) for items in self.surface_layers.values())
            shape_count = sum(len(items) for items in self.shape_layers.values())
            DebugLogger.state(f"Rendered {surface_count} surfaces and {shape_count} shapes", category="render")

    def _draw_shape(self, surface, shape_type, rect, color, **kwargs):
        width = kwargs.get("width", 0)

        if shape_type == "overlay":
            self._draw_overlay(surface, color, kwargs.get("alpha", 255))
        elif shape_type == "rect":
            pygame.draw.rect(surface, color, rect, width)
        elif shape_type == "circle":
            pygame.draw.circle(surface, color, rect.center, rect.width // 2, width)
        elif shape_type == "ellipse":
            pygame.draw.ellipse(surface, color, rect, width)
        elif shape_type == "line":
            start = kwargs.get("start_pos")
            end = kwargs.get("end_pos")
            if start and end:
                pygame.draw.line(surface, color, start, end, max(width, 1))
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="render")

    def _draw_overlay(self, surface, color, alpha):
        size = surface.get_size()
        if self._overlay_cache is None or self._overlay_cache.get_size() != size:
            self._overlay_cache = pygame.Surface(size, pygame.SRCALPHA)
        self._overlay_cache.fill((*color[:3], alpha))
        surface.blit(self._overlay_cache, (0, 0))
