"""
Main entry point for Habit Arcade.

Launches the pygame simulator window, or plays a headless session on a
real-time tick driver and logs the outcome.
"""

import asyncio
import logging
import sys
from typing import Optional

from habitarcade.core.events import EventBus, EventType, Event
from habitarcade.core.ticker import TickDriver
from habitarcade.games.base import GameContext, GameResult
from habitarcade.games.spin_wheel import SpinWheelGame
from habitarcade.graphics.surface import BufferSurface
from habitarcade.notifications import ToastCenter
from habitarcade.settings import Settings, get_settings
from habitarcade.wheel.simulator import RandomSource

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_game(settings: Settings, rng: Optional[RandomSource] = None) -> SpinWheelGame:
    """Wire a spin wheel game to a fresh bus and surface."""
    context = GameContext(
        event_bus=EventBus(),
        surface=BufferSurface(settings.display.width, settings.display.height),
    )
    return SpinWheelGame(context, rng=rng, settings=settings.wheel)


async def play_spin(game: SpinWheelGame) -> None:
    """Spin once and drive ticks on a timer until the wheel stops.

    The timer is cancelled when the spin lands and also when it is halted
    because the game ended or was torn down.
    """
    driver = TickDriver(game.update, interval_ms=game.tick_interval_ms)

    def on_stopped(event: Event) -> None:
        driver.stop()

    bus = game.context.event_bus
    unsubscribers = [
        bus.subscribe(EventType.SPIN_RESOLVED, on_stopped),
        bus.subscribe(EventType.SPIN_HALTED, on_stopped),
    ]
    try:
        if not game.spin():
            return
        driver.start()
        await driver.wait()
    finally:
        driver.stop()
        for unsubscribe in unsubscribers:
            unsubscribe()


async def run_headless(
    settings: Settings,
    spins: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> GameResult:
    """Play one session of ``spins`` spins and end it."""
    game = build_game(settings, rng=rng)
    toasts = ToastCenter(game.context.event_bus)

    try:
        game.start()
        for _ in range(spins or settings.headless_spins):
            await play_spin(game)
            logger.info(f"Landed on {game.last_result} XP (score {game.score})")

        result = game.end()
        for toast in toasts.history:
            logger.info(f"{toast.title} {toast.message}")
        return result
    finally:
        toasts.close()
        game.teardown()


async def run_simulator(settings: Settings) -> None:
    """Run the desktop simulator."""
    from habitarcade.simulator.window import SimulatorWindow, WindowConfig

    game = build_game(settings)
    config = WindowConfig(
        width=settings.window_width,
        height=settings.window_height,
        fps=settings.display.fps,
        scale=settings.window_scale,
    )
    window = SimulatorWindow(
        game=game,
        surface=game.context.surface,
        event_bus=game.context.event_bus,
        config=config,
    )
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    load_dotenv()
    settings = get_settings()

    setup_logging(settings.debug)
    logger.info("Habit Arcade starting...")

    try:
        if settings.env == "simulator":
            logger.info("Running in simulator mode")
            asyncio.run(run_simulator(settings))
        else:
            logger.info("Running headless")
            asyncio.run(run_headless(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Habit Arcade stopped")


if __name__ == "__main__":
    main()
