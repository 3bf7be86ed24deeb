# visualization.py
"""
Handles the visualization of the force simulation using Pygame.

The world is projected orthographically onto the y/z plane, as seen by a
camera looking down the -x axis with z up. Spring debug lines are read back
from the LineBuffer the forces draw into.
"""
import logging
import pygame
import numpy as np
from typing import Optional, Tuple

from constants import (
    BACKGROUND_COLOR, DEFAULT_PARTICLE_RADIUS, DEFAULT_WORLD_SCALE, FPS,
    GOAL_COLOR, PARTICLE_COLOR, PREDATOR_COLOR, UI_PANEL_WIDTH,
    WINDOW_HEIGHT, WINDOW_WIDTH
)
from engine import ForceEngine
from line_buffer import LineBuffer
from state import StateBuffer

# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, engine: ForceEngine, vis_params: Optional[dict] = None):
#     - Inputs:
#       - engine: The ForceEngine whose forces are listed and toggled.
#       - vis_params: "visualization" config section.
#         - "scale": pixels per world unit
#         - "particle_radius": int
#         - "width", "height": window size
#     - Side Effects: Initializes Pygame, creates a display surface, and a
#       LineBuffer with one slot per force.
#
#   - draw(self, state, predator_index=None, goal=None) -> bool:
#     - Outputs: False if the user has quit, True otherwise.
#     - Side Effects: Refreshes force debug geometry, renders particles,
#       lines and the force panel, and toggles forces on number keys.


class Visualizer:
    """
    Renders the particles, spring lines and a force toggle panel.
    """
    def __init__(self, engine: ForceEngine, vis_params: Optional[dict] = None):
        """
        Initializes Pygame and the display window.
        """
        vis_params = vis_params if vis_params is not None else {}
        pygame.init()
        pygame.font.init()

        width = int(vis_params.get('width', WINDOW_WIDTH))
        height = int(vis_params.get('height', WINDOW_HEIGHT))
        self.screen = pygame.display.set_mode((width, height))

        # The simulation area is the total width minus the UI panel
        self.sim_width = width - UI_PANEL_WIDTH
        self.sim_height = height
        self.sim_surface = pygame.Surface((self.sim_width, self.sim_height))
        self.ui_panel_surface = pygame.Surface((UI_PANEL_WIDTH, self.sim_height), pygame.SRCALPHA)
        self.ui_panel_surface.fill((40, 40, 40, 100))

        pygame.display.set_caption("Particle Forces")
        self.clock = pygame.time.Clock()

        self.engine = engine
        self.line_buffer = LineBuffer(len(engine))
        self.scale = float(vis_params.get('scale', DEFAULT_WORLD_SCALE))
        self.particle_radius = int(vis_params.get('particle_radius', DEFAULT_PARTICLE_RADIUS))
        self.show_lines = True

        try:
            self.font_title = pygame.font.SysFont("Segoe UI", 16, bold=True)
            self.font_main = pygame.font.SysFont("Segoe UI", 14)
        except pygame.error:
            logging.warning("Segoe UI font not found, falling back to default sans-serif.")
            self.font_title = pygame.font.SysFont(None, 20, bold=True)
            self.font_main = pygame.font.SysFont(None, 18)

        self.text_color_title = (255, 255, 255)
        self.text_color_on = (0, 255, 102)
        self.text_color_off = (120, 120, 120)

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def project(self, point: np.ndarray) -> Tuple[int, int]:
        """World (x, y, z) to screen pixels; x is the depth axis and is dropped."""
        return (
            int(self.sim_width / 2 + point[1] * self.scale),
            int(self.sim_height / 2 - point[2] * self.scale),
        )

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False
                if event.key == pygame.K_l:
                    self.show_lines = not self.show_lines
                    logging.info(f"Force lines {'shown' if self.show_lines else 'hidden'}.")
                # Keys 1-9 toggle the force in that slot
                slot = event.key - pygame.K_1
                if 0 <= slot < min(9, len(self.engine)):
                    self.engine.toggle(slot)
        return True

    def _draw_force_panel(self):
        """Lists every force with its slot key and on/off state."""
        x = self.sim_width + 20
        y = 20
        title = self.font_title.render("Forces", True, self.text_color_title)
        self.screen.blit(title, (x, y))
        y += title.get_height() + 10
        for index, force in enumerate(self.engine):
            key = str(index + 1) if index < 9 else " "
            color = self.text_color_on if force.enabled else self.text_color_off
            label = self.font_main.render(f"[{key}] {force.name}", True, color)
            self.screen.blit(label, (x, y))
            y += self.font_main.get_linesize() + 4
        hint = self.font_main.render("[L] toggle lines  [ESC] quit", True, self.text_color_off)
        self.screen.blit(hint, (x, self.sim_height - hint.get_height() - 20))

    def draw(self, state: StateBuffer, predator_index: Optional[int] = None,
             goal: Optional[np.ndarray] = None) -> bool:
        """
        Draws all particles and UI, and handles events.

        Returns:
            bool: False if the simulation should exit, True otherwise.
        """
        if not self._handle_events():
            return False

        self.sim_surface.fill(BACKGROUND_COLOR)

        # 1. Debug lines, pushed by the forces into the line buffer
        self.line_buffer.fit(len(self.engine))
        self.engine.draw_all(self.line_buffer, state, self.show_lines)
        for p0, p1, color, enabled in self.line_buffer.lines():
            if not enabled:
                continue
            rgb = tuple(int(255 * max(0.0, min(1.0, c))) for c in color)
            pygame.draw.line(self.sim_surface, rgb, self.project(p0), self.project(p1), 1)

        # 2. Particles
        positions = state.positions()
        for i in range(state.particle_count):
            color = PREDATOR_COLOR if i == predator_index else PARTICLE_COLOR
            pygame.draw.circle(self.sim_surface, color, self.project(positions[i]), self.particle_radius)

        # 3. Goal marker
        if goal is not None:
            pygame.draw.circle(self.sim_surface, GOAL_COLOR, self.project(goal), self.particle_radius + 3, 1)

        self.screen.blit(self.sim_surface, (0, 0))
        self.screen.blit(self.ui_panel_surface, (self.sim_width, 0))
        self._draw_force_panel()

        pygame.display.flip()
        self.clock.tick(FPS)
        return True

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
