"""
Desktop simulator window using pygame.

Hosts a single game: shows its surface, title, score, control strip,
and toast notifications, and drives it with the frame clock.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass

from ..core.events import EventBus, EventType, Event, button_press_event
from ..games.base import BaseGame
from ..games.spin_wheel import SpinWheelGame
from ..graphics.surface import BufferSurface
from ..notifications import ToastCenter

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    width: int = 900
    height: int = 640
    title: str = "Habit Arcade"
    fps: int = 50
    scale: int = 1

    # Colors
    bg_color: tuple[int, int, int] = (15, 20, 30)
    panel_color: tuple[int, int, int] = (42, 51, 67)
    text_color: tuple[int, int, int] = (220, 225, 235)
    accent_color: tuple[int, int, int] = (76, 201, 240)
    muted_color: tuple[int, int, int] = (110, 120, 140)


class SimulatorWindow:
    """
    Window hosting one game.

    Keyboard Mapping:
        RETURN: Start game
        SPACE: Spin
        E: End game
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        game: BaseGame,
        surface: BufferSurface,
        event_bus: EventBus,
        config: WindowConfig | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.game = game
        self.surface = surface
        self.event_bus = event_bus
        self.toasts = ToastCenter(event_bus)

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._running = False

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._screen = pygame.display.set_mode((self.config.width, self.config.height))
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 32)
        self._small_font = pygame.font.SysFont(None, 22)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_RETURN:
            self.game.handle_input(Event(EventType.START_REQUEST, source="keyboard"))
        elif key == pygame.K_SPACE:
            self.game.handle_input(button_press_event(source="keyboard"))
        elif key == pygame.K_e:
            self.game.handle_input(Event(EventType.END_REQUEST, source="keyboard"))

    def _render(self) -> None:
        """Render all UI elements."""
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)
        self._render_header()
        self._render_game_surface()
        self._render_controls()
        self._render_toasts()
        pygame.display.flip()

    def _text(self, text: str, pos: tuple[int, int], color, small: bool = False) -> None:
        font = self._small_font if small else self._font
        if font and self._screen:
            self._screen.blit(font.render(text, True, color), pos)

    def _render_header(self) -> None:
        self._text(self.game.title, (30, 20), self.config.text_color)
        self._text(self.game.description, (30, 52), self.config.muted_color, small=True)
        self._text(f"Score: {self.game.score}", (self.config.width - 200, 20), self.config.accent_color)

    def _render_game_surface(self) -> None:
        buffer = self.surface.get_buffer()
        image = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            size = (self.surface.width * self.config.scale, self.surface.height * self.config.scale)
            image = pygame.transform.scale(image, size)

        rect = image.get_rect(center=(self.config.width // 2, self.config.height // 2))
        pygame.draw.rect(self._screen, self.config.panel_color, rect.inflate(8, 8), border_radius=6)
        self._screen.blit(image, rect.topleft)

        if not self.game.is_started:
            hint = "Game over - RETURN to play again" if self.game.is_over else "Press RETURN to start"
            self._text(hint, (rect.x, rect.bottom + 16), self.config.accent_color, small=True)

    def _render_controls(self) -> None:
        if not isinstance(self.game, SpinWheelGame) or not self.game.is_started:
            return

        keys = {"spin": "SPACE", "end": "E"}
        y = self.config.height - 60
        x = 30
        for control in self.game.controls():
            color = self.config.accent_color if control.enabled else self.config.muted_color
            label = f"[{keys.get(control.key, '?')}] {control.label}"
            self._text(label, (x, y), color)
            x += 260

        segment = self.game.wheel[self.game.simulator.index_under_pointer]
        self._text(f"Pointer: {segment.label}", (x, y), self.config.muted_color, small=True)

    def _render_toasts(self) -> None:
        y = 90
        for toast in self.toasts.visible():
            self._text(toast.title, (self.config.width - 260, y), self.config.accent_color, small=True)
            self._text(toast.message, (self.config.width - 260, y + 20), self.config.text_color, small=True)
            y += 50

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True
        self.game.repaint()

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            if self._clock:
                self.game.update(self._clock.get_time())

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Release the game and pygame resources."""
        self.game.teardown()
        self.toasts.close()
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
