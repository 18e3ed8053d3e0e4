"""
settings.py
-----------
Centralized constants for the view stack, input routing and frame loop.

Every group can be overridden at startup through config_manager.configure().
"""


# ===========================================================
# Display & Frame Loop
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "viewstack"
    BACKGROUND_COLOR = (0, 0, 0)


class Timing:
    """Frame timing."""
    # Replaces dt on the first frame after the window becomes visible again
    NOMINAL_FRAME_TIME: float = 1 / 60


# ===========================================================
# View Transitions
# ===========================================================

class Transition:
    """Default enter/exit timing for views, in seconds."""
    ENTER_TIME: float = 0.25
    EXIT_TIME: float = 0.25
    ENTER_FADE: bool = True
    EXIT_FADE: bool = True
    FADE_COLOR = (0, 0, 0)


# ===========================================================
# Input
# ===========================================================

class Input:
    """Pointer lock and click detection."""
    POINTER_LOCK_COOLDOWN_MS: int = 1500
    DOUBLE_CLICK_MS: int = 400
    DOUBLE_CLICK_DISTANCE: int = 6
    # Key that releases pointer lock (pygame.K_ESCAPE); None disables it
    RELEASE_LOCK_KEY = 27


# ===========================================================
# Layers
# ===========================================================

class Layers:
    """View layer indices and draw-order spacing."""
    BASE: int = 0
    POPUP: int = 1

    # Draw order: absolute layer = view layer index * SPAN + local layer
    SPAN: int = 1000
    FADE_OVERLAY: int = 999


# ===========================================================
# Loading Indicator
# ===========================================================

class Loading:
    """Default loading indicator appearance."""
    TEXT: str = "Loading..."
    COLOR = (200, 200, 200)
    FADE_TIME: float = 0.25
    TEXT_SCALE: float = 1 / 20    # Font size as a fraction of screen height
    BOLD: bool = True


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset directory layout, relative to the asset root."""
    ROOT: str = "."
    IMAGE_DIR: str = "assets/images"
    AUDIO_DIR: str = "assets/audio"
    FONT_DIR: str = "assets/fonts"
    FONT_SIZE: int = 24
