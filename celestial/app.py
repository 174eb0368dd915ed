import logging

import pygame
import pygame.gfxdraw

from . import __version__
from . import constants as C
from .analysis import total_mass
from .camera import Camera
from .config import SimulationConfig
from .simulation import Simulation

logger = logging.getLogger(__name__)


class App:
    """Interactive pygame window around a :class:`Simulation`."""

    def __init__(self, config: SimulationConfig = None, init_pygame: bool = True):
        self.simulation = Simulation(config)
        self.camera = Camera()
        self.running = False

        if init_pygame:
            pygame.init()
            cfg = self.simulation.config
            self.screen = pygame.display.set_mode((int(cfg.width), int(cfg.height)))
            pygame.display.set_caption(f"Celestial v{__version__}")
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, 18)
        else:
            self.screen = None
            self.clock = None
            self.font = None

    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.simulation.toggle_pause()
                logger.info("Paused" if self.simulation.paused else "Resumed")
            elif event.key == pygame.K_r:
                self.simulation.initialize()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            self.simulation.click((float(x), float(y)))

    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    # ------------------------------------------------------------------
    def update(self, keys=None) -> None:
        """Advance one fixed time step, panning with the arrow keys."""
        dt = self.simulation.config.time_step
        offset = None
        if keys is not None:
            offset = self.camera.offset(
                keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN], dt
            )
        self.simulation.tick(dt, camera_offset=offset)

    # ------------------------------------------------------------------
    def draw(self) -> None:
        if self.screen is None:
            return
        self.screen.fill(C.BLACK)
        drawables, orbit = self.simulation.render_snapshot()
        if len(orbit) > 1:
            pygame.draw.aalines(self.screen, C.ORBIT_COLOR, False, orbit)
        for d in drawables:
            x, y = int(d.position[0]), int(d.position[1])
            radius = max(1, int(round(d.radius)))
            if d.select_marker:
                pygame.gfxdraw.aacircle(
                    self.screen, x, y, radius + C.SELECTION_MARKER_PADDING, C.SELECTION_COLOR
                )
                continue
            color = C.SUN_COLOR if d.sun else C.WHITE
            pygame.gfxdraw.filled_circle(self.screen, x, y, radius, color)
            pygame.gfxdraw.aacircle(self.screen, x, y, radius, color)
        self._draw_hud()
        pygame.display.flip()

    def _draw_hud(self) -> None:
        store = self.simulation.store
        text = f"bodies {len(store)}  mass {total_mass(store):.0f}"
        if self.simulation.paused:
            text += "  PAUSED"
        self.screen.blit(self.font.render(text, True, C.HUD_COLOR), (10, 5))

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main application loop."""
        if self.screen is None or self.clock is None:
            raise RuntimeError("App cannot run without pygame initialized")
        self.simulation.initialize()
        self.running = True
        while self.running:
            self.clock.tick(C.FPS)
            self.handle_events()
            self.update(pygame.key.get_pressed())
            self.draw()
        pygame.quit()
