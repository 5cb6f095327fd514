import logging

import pygame

from config import *
from .audio import SoundPool
from .direction import DOWN, LEFT, RIGHT, UP
from .engine import SnakeSimulation
from .grid import Grid
from .state import EATEN, GAME_OVER, HEAD

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


def direction_for_key(key):
    """Map a pygame key code to a direction, or None for other keys."""
    return KEY_TO_DIRECTION.get(key)


class SnakeApp:
    """pygame window around a SnakeSimulation.

    Owns the window, the clock, and the sound pool. Every frame it feeds key
    presses to the simulation, advances it by the elapsed time, plays a
    sound for each EATEN event, and stops on GAME_OVER.
    """

    def __init__(self, grid=None, timestep=TIMESTEP, seed=None, muted=False):
        pygame.init()
        self.grid = grid if grid is not None else Grid()
        board_w, board_h = self.grid.pixel_size
        self.screen = pygame.display.set_mode((board_w, board_h + INFO_PANEL_HEIGHT))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.small_font = pygame.font.Font(None, 24)

        self.sim = SnakeSimulation(grid=self.grid, timestep=timestep, seed=seed)
        self.sounds = SoundPool()

        self.running = True
        self.paused = False
        self.muted = muted
        self.death_reason = None

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    logger.info("Quit requested")
                    self.running = False
                elif event.key == pygame.K_p or event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_m:
                    self.muted = not self.muted
                else:
                    direction = direction_for_key(event.key)
                    if direction is not None and not self.paused:
                        self.sim.request_direction(direction)

    def handle_results(self, results):
        for result in results:
            if EATEN in result.events and not self.muted:
                self.sounds.play_random()
            if GAME_OVER in result.events:
                self.death_reason = result.death_reason
                self.running = False

    def draw_cell(self, cell, color):
        x, y = self.grid.to_screen(cell)
        size = self.grid.cell_size
        pygame.draw.rect(self.screen, color, (x, y, size, size))

    def draw_board(self):
        board_w, board_h = self.grid.pixel_size
        self.screen.fill(BACKGROUND_COLOR, pygame.Rect(0, 0, board_w, board_h))
        cell = self.grid.cell_size
        for x in range(0, board_w + 1, cell):
            pygame.draw.line(self.screen, GRID_LINE_COLOR, (x, 0), (x, board_h))
        for y in range(0, board_h + 1, cell):
            pygame.draw.line(self.screen, GRID_LINE_COLOR, (0, y), (board_w, y))

        if self.sim.food is not None:
            self.draw_cell(self.sim.food, FOOD_COLOR)
        for cell, role in reversed(self.sim.render_cells()):
            self.draw_cell(cell, HEAD_COLOR if role == HEAD else BODY_COLOR)

    def draw_hud(self):
        board_w, board_h = self.grid.pixel_size
        self.screen.fill(DARK_GREY, pygame.Rect(0, board_h, board_w, INFO_PANEL_HEIGHT))
        text = f"Length: {self.sim.length}"
        if self.paused:
            text += "  PAUSED"
        if self.muted:
            text += "  MUTED"
        surf = self.small_font.render(text, True, WHITE)
        self.screen.blit(surf, (8, board_h + (INFO_PANEL_HEIGHT - surf.get_height()) // 2))

    def run(self):
        """Main loop. Returns the death reason, or None if the player quit."""
        try:
            while self.running:
                dt = self.clock.tick(FPS) / 1000.0
                self.handle_events()
                if not self.running:
                    break
                if not self.paused:
                    self.handle_results(self.sim.frame(dt))

                self.draw_board()
                self.draw_hud()
                pygame.display.flip()
        finally:
            self.cleanup()

        if self.death_reason is not None:
            logger.info("Final length %d (%s collision)", self.sim.length, self.death_reason)
        return self.death_reason

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()
