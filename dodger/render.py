import math

import numpy as np
import pygame
import pygame.gfxdraw

from .state import Phase


class Renderer:
    """Draws a state snapshot onto a pygame surface."""

    COLOR_BG = (6, 9, 20)
    COLOR_SPECK = (40, 52, 84)
    COLOR_PLAYER = (105, 224, 255)
    COLOR_PLAYER_GLOW = (105, 224, 255, 60)
    COLOR_COCKPIT = (11, 34, 48)
    COLOR_THRUSTER = (255, 207, 89)
    COLOR_ASTEROID = (43, 47, 58)
    COLOR_ASTEROID_EDGE = (78, 84, 102)
    COLOR_STAR = (255, 207, 89)
    COLOR_TEXT = (233, 238, 247)
    SPECK_COUNT = 18

    def __init__(self, config, seed=None, pause_key="P"):
        self.config = config
        self.pause_key = pause_key
        # Cosmetic jitter only; kept apart from the spawner's generator.
        self.np_random = np.random.default_rng(seed)
        pygame.font.init()
        self.font_hud = pygame.font.Font(None, 24)
        self.font_title = pygame.font.Font(None, 40)
        self.font_small = pygame.font.Font(None, 20)

    def draw(self, surface, snapshot):
        surface.fill(self.COLOR_BG)
        self._render_background(surface, snapshot.elapsed)
        for star in snapshot.stars:
            self._render_star(surface, star)
        for asteroid in snapshot.asteroids:
            self._render_asteroid(surface, asteroid)
        self._render_player(surface, snapshot)
        self._render_flash(surface, snapshot.flash)
        self._render_ui(surface, snapshot)

    # --- World ---

    def _render_background(self, surface, elapsed):
        w, h = self.config.WIDTH, self.config.HEIGHT
        for i in range(self.SPECK_COUNT):
            y = (elapsed * 20 + i * 40) % h
            pygame.draw.rect(surface, self.COLOR_SPECK, (int((i * 19) % w), int(y), 2, 2))

    def _render_star(self, surface, star):
        points = []
        for i in range(5):
            angle = i * 2 * math.pi / 5 - math.pi / 2
            outer, inner = star.radius, star.radius * 0.45
            points.append((int(star.x + math.cos(angle) * outer), int(star.y + math.sin(angle) * outer)))
            points.append((int(star.x + math.cos(angle + math.pi / 5) * inner),
                           int(star.y + math.sin(angle + math.pi / 5) * inner)))
        alpha = int(255 * max(0.0, min(1.0, star.glow)))
        pos = (int(star.x), int(star.y))
        pygame.gfxdraw.filled_circle(surface, pos[0], pos[1], int(star.radius * 1.6), (*self.COLOR_STAR, alpha // 5))
        pygame.gfxdraw.filled_polygon(surface, points, (*self.COLOR_STAR, alpha))
        pygame.gfxdraw.aapolygon(surface, points, (*self.COLOR_STAR, alpha))

    def _render_asteroid(self, surface, asteroid):
        cos_r, sin_r = math.cos(asteroid.rotation), math.sin(asteroid.rotation)
        points = []
        for i in range(8):
            angle = i / 8 * 2 * math.pi
            rr = asteroid.radius * self.np_random.uniform(0.8, 1.2)
            px, py = math.cos(angle) * rr, math.sin(angle) * rr
            points.append((int(asteroid.x + px * cos_r - py * sin_r), int(asteroid.y + px * sin_r + py * cos_r)))
        pygame.gfxdraw.filled_polygon(surface, points, self.COLOR_ASTEROID)
        pygame.gfxdraw.aapolygon(surface, points, self.COLOR_ASTEROID_EDGE)

    def _render_player(self, surface, snapshot):
        if snapshot.phase is Phase.IDLE:
            return
        x, y, r = snapshot.player_x, snapshot.player_y, snapshot.player_radius
        body = [(int(px), int(py)) for px, py in ((x, y - r), (x + r, y + r), (x, y + r * 0.5), (x - r, y + r))]

        pygame.gfxdraw.filled_circle(surface, int(x), int(y), int(r + 6), self.COLOR_PLAYER_GLOW)
        pygame.gfxdraw.filled_polygon(surface, body, self.COLOR_PLAYER)
        pygame.gfxdraw.aapolygon(surface, body, self.COLOR_PLAYER)
        pygame.gfxdraw.filled_circle(surface, int(x), int(y), 4, self.COLOR_COCKPIT)

        if snapshot.phase is Phase.RUNNING:
            flame_tip = (x + self.np_random.uniform(-3, 3), y + r + self.np_random.uniform(12, 18))
            pygame.draw.line(surface, self.COLOR_THRUSTER, (x, y + r * 0.6), flame_tip, 2)

    def _render_flash(self, surface, flash):
        if flash is None:
            return
        strength = flash.remaining / self.config.FLASH_DURATION
        alpha = int(255 * self.config.FLASH_ALPHA * max(0.0, min(1.0, strength)))
        overlay = pygame.Surface((self.config.WIDTH, self.config.HEIGHT), pygame.SRCALPHA)
        overlay.fill((*flash.color, alpha))
        surface.blit(overlay, (0, 0))

    # --- HUD & overlays ---

    def _render_ui(self, surface, snapshot):
        score_text = self.font_hud.render(f"SCORE: {snapshot.score}", True, self.COLOR_TEXT)
        surface.blit(score_text, (10, 10))
        lives_text = self.font_hud.render(f"LIVES: {snapshot.lives}", True, self.COLOR_TEXT)
        surface.blit(lives_text, (self.config.WIDTH - lives_text.get_width() - 10, 10))

        if snapshot.phase is Phase.PAUSED:
            self._overlay(surface, 0.35, [f"Paused - press {self.pause_key} to resume"], self.font_hud)
        elif snapshot.phase is Phase.GAME_OVER:
            self._overlay(surface, 0.45, [
                "Game Over",
                f"Final Score: {snapshot.final_score}",
                "Press Enter to restart",
            ], self.font_hud)
        elif snapshot.phase is Phase.IDLE:
            self._overlay(surface, 0.45, [
                "Asteroid Dodger",
                "Move with arrows or A/D, or drag.",
                f"Press {self.pause_key} to pause.",
                "Press Enter to start",
            ], self.font_small, title_font=self.font_title)

    def _overlay(self, surface, darkness, lines, font, title_font=None):
        shade = pygame.Surface((self.config.WIDTH, self.config.HEIGHT), pygame.SRCALPHA)
        shade.fill((0, 0, 0, int(255 * darkness)))
        surface.blit(shade, (0, 0))

        y = self.config.HEIGHT / 2 - 14 * (len(lines) - 1)
        for i, line in enumerate(lines):
            line_font = title_font if (title_font is not None and i == 0) else font
            text = line_font.render(line, True, self.COLOR_TEXT)
            surface.blit(text, text.get_rect(center=(self.config.WIDTH / 2, y)))
            y += 28
