"""
renderer.py: Draws engine snapshots with pygame.
"""

from typing import Dict, Optional, Tuple

import pygame

from .constants import (
    CAT_WIDTH, CAT_HEIGHT, PIPE_WIDTH, DEFAULT_LOCALE,
    SKY_TOP_COLOR, SKY_BOTTOM_COLOR, PIPE_COLOR, CAT_COLOR, CAT_DETAIL_COLOR,
    TEXT_COLOR, OVERLAY_COLOR, START_OVERLAY_ALPHA, GAME_OVER_OVERLAY_ALPHA,
    BUTTON_COLOR, BUTTON_HOVER_COLOR
)
from .data_models import GamePhase, GameSnapshot, Obstacle, Viewport
from .localization import get_text, get_title

BUTTON_SIZE = (220, 48)


class Renderer:
    """Maps a GameSnapshot onto a pygame surface. Holds no game state."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._background: Optional[pygame.Surface] = None
        self._cat_sprite: Optional[pygame.Surface] = None

    # ----------------- Resources -----------------

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def background(self, size: Tuple[int, int]) -> pygame.Surface:
        """Vertical sky gradient, rebuilt only when the size changes."""
        if self._background is None or self._background.get_size() != size:
            width, height = size
            surface = pygame.Surface(size)
            for row in range(height):
                t = row / max(height - 1, 1)
                color = tuple(
                    round(top + (bottom - top) * t)
                    for top, bottom in zip(SKY_TOP_COLOR, SKY_BOTTOM_COLOR)
                )
                pygame.draw.line(surface, color, (0, row), (width, row))
            self._background = surface
        return self._background

    def cat_sprite(self) -> pygame.Surface:
        if self._cat_sprite is None:
            sprite = pygame.Surface((CAT_WIDTH, CAT_HEIGHT), pygame.SRCALPHA)
            ear = CAT_HEIGHT // 3
            pygame.draw.ellipse(sprite, CAT_COLOR, (0, ear // 2, CAT_WIDTH, CAT_HEIGHT - ear // 2))
            pygame.draw.polygon(sprite, CAT_COLOR, [(4, ear), (9, 0), (15, ear)])
            pygame.draw.polygon(sprite, CAT_COLOR, [(CAT_WIDTH - 15, ear), (CAT_WIDTH - 9, 0),
                                                    (CAT_WIDTH - 4, ear)])
            eye_y = CAT_HEIGHT // 2
            pygame.draw.circle(sprite, CAT_DETAIL_COLOR, (CAT_WIDTH // 2 - 7, eye_y), 3)
            pygame.draw.circle(sprite, CAT_DETAIL_COLOR, (CAT_WIDTH // 2 + 7, eye_y), 3)
            self._cat_sprite = sprite
        return self._cat_sprite

    # ----------------- Layout -----------------

    @staticmethod
    def pipe_rects(pipe: Obstacle, viewport: Viewport) -> Tuple[pygame.Rect, pygame.Rect]:
        """The solid (top, bottom) rectangles of a pipe."""
        x = round(pipe.horizontal_position)
        top = pygame.Rect(x, 0, PIPE_WIDTH, max(round(pipe.gap_top_height), 0))
        bottom_y = round(pipe.gap_bottom_height)
        bottom = pygame.Rect(x, bottom_y, PIPE_WIDTH, max(round(viewport.height) - bottom_y, 0))
        return top, bottom

    @staticmethod
    def restart_button_rect(viewport: Viewport) -> pygame.Rect:
        rect = pygame.Rect((0, 0), BUTTON_SIZE)
        rect.center = (round(viewport.width / 2), round(viewport.height / 2 + 90))
        return rect

    # ----------------- Drawing -----------------

    def draw(self, surface: pygame.Surface, snapshot: GameSnapshot,
             mouse_pos: Optional[Tuple[int, int]] = None):
        """Renders one frame. Does not flip the display."""
        surface.blit(self.background(surface.get_size()), (0, 0))

        for pipe in snapshot.obstacles:
            for rect in self.pipe_rects(pipe, snapshot.viewport):
                pygame.draw.rect(surface, PIPE_COLOR, rect)

        self._draw_cat(surface, snapshot)

        score_surf = self.font(56).render(str(snapshot.score), True, TEXT_COLOR)
        surface.blit(score_surf, (surface.get_width() - score_surf.get_width() - 16, 16))

        if snapshot.phase is GamePhase.NOT_STARTED:
            self._draw_start_overlay(surface)
        elif snapshot.phase is GamePhase.OVER:
            self._draw_game_over_overlay(surface, snapshot, mouse_pos)

    def _draw_cat(self, surface: pygame.Surface, snapshot: GameSnapshot):
        character = snapshot.character
        # pygame rotates counterclockwise; positive angles mean nose-down here
        sprite = pygame.transform.rotate(self.cat_sprite(), -character.rotation_angle)
        center = (round(snapshot.viewport.midpoint),
                  round(character.vertical_position + CAT_HEIGHT / 2))
        surface.blit(sprite, sprite.get_rect(center=center))

    def _overlay(self, surface: pygame.Surface, alpha: int):
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill((*OVERLAY_COLOR, alpha))
        surface.blit(shade, (0, 0))

    def _blit_centered(self, surface: pygame.Surface, text: str, size: int, y: float):
        text_surf = self.font(size).render(text, True, TEXT_COLOR)
        surface.blit(text_surf, text_surf.get_rect(center=(surface.get_width() // 2, round(y))))

    def _draw_start_overlay(self, surface: pygame.Surface):
        self._overlay(surface, START_OVERLAY_ALPHA)
        mid_y = surface.get_height() / 2
        self._blit_centered(surface, get_text("game_name", self.locale), 72, mid_y - 80)
        self._blit_centered(surface, get_text("start_prompt", self.locale), 28, mid_y)
        sprite = pygame.transform.scale2x(self.cat_sprite())
        surface.blit(sprite, sprite.get_rect(center=(surface.get_width() // 2, round(mid_y + 80))))

    def _draw_game_over_overlay(self, surface: pygame.Surface, snapshot: GameSnapshot,
                                mouse_pos: Optional[Tuple[int, int]]):
        self._overlay(surface, GAME_OVER_OVERLAY_ALPHA)
        mid_y = surface.get_height() / 2
        self._blit_centered(surface, get_text("game_over", self.locale), 56, mid_y - 80)
        self._blit_centered(surface, get_text("score", self.locale, score=snapshot.score), 36, mid_y - 30)
        title = get_title(snapshot.score, self.locale)
        self._blit_centered(surface, get_text("title", self.locale, title=title), 30, mid_y + 10)

        button = self.restart_button_rect(snapshot.viewport)
        hovered = mouse_pos is not None and button.collidepoint(mouse_pos)
        pygame.draw.rect(surface, BUTTON_HOVER_COLOR if hovered else BUTTON_COLOR, button,
                         border_radius=6)
        label = self.font(30).render(get_text("restart", self.locale), True, TEXT_COLOR)
        surface.blit(label, label.get_rect(center=button.center))
