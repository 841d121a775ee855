"""
Heart Catch - pygame view.

Draws a SessionSnapshot and plays short pop effects for caught hearts. The
view only reads: it learns about catches from SessionEvents and never calls
back into the session.
"""

from typing import List, Optional

import pygame

from celebration.games import GameState
from models import HeartSnapshot, SessionEvent, SessionEventKind, SessionSnapshot
from games.HeartCatch import config


class PopEffect:
    """Expanding ring where a heart was caught."""

    def __init__(self, x: float, y: float, size: float, lifetime: float = config.POP_DURATION):
        self.x = x
        self.y = y
        self.max_radius = size
        self.lifetime = lifetime
        self.elapsed = 0.0

    @property
    def progress(self) -> float:
        return min(1.0, self.elapsed / self.lifetime) if self.lifetime > 0 else 1.0

    def update(self, dt: float) -> bool:
        """Update effect. Returns False when effect is done."""
        self.elapsed += dt
        return self.elapsed < self.lifetime

    def render(self, screen: pygame.Surface) -> None:
        radius = max(1, int(self.max_radius * (0.5 + self.progress * 0.5)))
        alpha = int(255 * (1 - self.progress))

        surf = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(surf, (*config.POP_COLOR, alpha), (radius, radius), radius, 3)
        screen.blit(surf, (int(self.x - radius), int(self.y - radius)))


class HeartCatchView:
    """Renders the session and its transient effects."""

    def __init__(self, heart_size: float = config.HEART_SIZE):
        self._heart_size = heart_size
        self._effects: List[PopEffect] = []
        self._font: Optional[pygame.font.Font] = None
        self._font_small: Optional[pygame.font.Font] = None
        self.prompt: Optional[str] = None  # Text shown in the unlock box, None hides it
        self.banner: Optional[str] = None

    @property
    def effects(self) -> List[PopEffect]:
        return self._effects

    def on_event(self, event: SessionEvent) -> None:
        """Session listener: start a pop effect for each catch."""
        if event.kind == SessionEventKind.CAUGHT and event.position is not None:
            half = self._heart_size / 2
            self._effects.append(PopEffect(
                event.position.x + half, event.position.y + half, self._heart_size
            ))
        elif event.kind in (SessionEventKind.RESET, SessionEventKind.STARTED):
            self._effects.clear()

    def update(self, dt: float) -> None:
        self._effects = [e for e in self._effects if e.update(dt)]

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 40)
        return self._font

    def _get_font_small(self) -> pygame.font.Font:
        if self._font_small is None:
            self._font_small = pygame.font.Font(None, 28)
        return self._font_small

    def render(self, screen: pygame.Surface, snapshot: SessionSnapshot) -> None:
        screen.fill(config.BACKGROUND_COLOR)

        for heart in snapshot.hearts:
            self._render_heart(screen, heart)

        for effect in self._effects:
            effect.render(screen)

        self._render_ui(screen, snapshot)

    def _render_heart(self, screen: pygame.Surface, heart: HeartSnapshot) -> None:
        x, y, s = heart.position.x, heart.position.y, heart.size
        r = s / 4
        # Two lobes and a point
        pygame.draw.circle(screen, config.HEART_COLOR, (int(x + r), int(y + r + 2)), int(r + 1))
        pygame.draw.circle(screen, config.HEART_COLOR, (int(x + 3 * r), int(y + r + 2)), int(r + 1))
        pygame.draw.polygon(screen, config.HEART_COLOR, [
            (x, y + r + 4),
            (x + s, y + r + 4),
            (x + s / 2, y + s),
        ])
        pygame.draw.circle(screen, config.HEART_HIGHLIGHT_COLOR, (int(x + r * 0.8), int(y + r)), max(2, int(r / 3)))

    def _render_ui(self, screen: pygame.Surface, snapshot: SessionSnapshot) -> None:
        font = self._get_font()
        small = self._get_font_small()
        width, height = screen.get_size()

        score_text = font.render(f"Score: {snapshot.score}", True, config.TEXT_COLOR)
        screen.blit(score_text, (12, 10))

        if snapshot.message:
            msg_text = small.render(snapshot.message, True, config.TEXT_COLOR)
            screen.blit(msg_text, (12, 50))

        hint = "S: start   R: reset   ESC: quit"
        if snapshot.state == GameState.STOPPED:
            hint += "   U: unlock surprise"
        hint_text = small.render(hint, True, config.TEXT_COLOR)
        screen.blit(hint_text, (12, height - 34))

        if self.prompt is not None:
            box = pygame.Rect(width // 2 - 200, height // 2 - 30, 400, 60)
            pygame.draw.rect(screen, (255, 255, 255), box, border_radius=8)
            pygame.draw.rect(screen, config.HEART_COLOR, box, 2, border_radius=8)
            text = font.render("*" * len(self.prompt) or "password", True, config.TEXT_COLOR)
            screen.blit(text, text.get_rect(center=box.center))

        if self.banner:
            banner = font.render(self.banner, True, config.HEART_COLOR)
            screen.blit(banner, banner.get_rect(center=(width // 2, height // 2 + 60)))
