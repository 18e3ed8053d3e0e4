"""
loading_indicator.py
--------------------
Default indicator drawn while a layer waits for its view's assets.
"""

from viewstack.core.runtime.settings import Loading


class LoadingIndicator:
    """Centered "Loading..." text that fades in over Loading.FADE_TIME."""

    def __init__(self):
        self.alpha_pos = 0.0

    def reset(self):
        self.alpha_pos = 0.0

    def update(self, dt: float):
        if Loading.FADE_TIME <= 0:
            self.alpha_pos = 1.0
        else:
            self.alpha_pos = min(1.0, self.alpha_pos + dt / Loading.FADE_TIME)

    def draw(self, draw_manager, progress: float = 0.0):
        height = draw_manager.height
        text = Loading.TEXT
        if 0.0 < progress < 1.0:
            text = f"{text} {int(progress * 100)}%"

        draw_manager.queue_text(
            text,
            center=(draw_manager.width // 2, height // 2),
            size=max(1, int(height * Loading.TEXT_SCALE)),
            color=Loading.COLOR,
            alpha=255 * self.alpha_pos,
            bold=Loading.BOLD,
        )
