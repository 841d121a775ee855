#!/usr/bin/env python3
"""
Heart Catch - Standalone entry point.

Run this to play Heart Catch with the mouse.

Usage:
    python main.py
    python main.py --fullscreen
    python main.py --width 1280 --height 720 --seed 18
"""

import argparse
import os
import random
import sys

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from celebration.games import GameState
from celebration.games.input import InputManager
from celebration.games.input.sources import MouseInputSource
from celebration.logging import close_all_sinks, create_sink_for_environment, get_logger, register_sink
from celebration.scheduler import Scheduler
from models import Resolution, SessionEventKind
from games.HeartCatch.config import SCREEN_WIDTH, SCREEN_HEIGHT, default_config
from games.HeartCatch.game_mode import mount_heart_catch
from games.HeartCatch.surprise import SurpriseLock
from games.HeartCatch.view import HeartCatchView

log = get_logger('heartcatch.main')


def main():
    """Run Heart Catch."""
    parser = argparse.ArgumentParser(description="Heart Catch")
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for repeatable sessions')
    parser.add_argument('--win-score', type=int, default=None, help='Catches needed to win')
    args = parser.parse_args()

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Heart Catch")
    width, height = screen.get_size()

    register_sink('heartcatch', create_sink_for_environment('heartcatch'))

    game_config = default_config()
    if args.win_score is not None:
        game_config = game_config.model_copy(update={'win_score': args.win_score})

    scheduler = Scheduler()
    game = mount_heart_catch(
        Resolution(width=width, height=height),
        scheduler,
        config=game_config,
        rng=random.Random(args.seed),
    )
    if game is None:
        pygame.quit()
        return 1

    view = HeartCatchView(heart_size=game_config.heart_size)
    game.add_listener(view.on_event)

    def on_session_event(event):
        if event.kind == SessionEventKind.WON:
            view.banner = event.message

    game.add_listener(on_session_event)

    lock = SurpriseLock()
    input_manager = InputManager(MouseInputSource())
    clock = pygame.time.Clock()
    running = True

    print("=" * 50)
    print("HEART CATCH")
    print("=" * 50)
    print("\nClick the hearts before they fade away!")
    print("\nControls:")
    print("  - S to start")
    print("  - R to reset")
    print("  - U to unlock the surprise after a game")
    print("  - ESC to quit")
    print("=" * 50)

    while running:
        dt = clock.tick(60) / 1000.0

        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                game.resize(max(1, event.w), max(1, event.h))
            elif event.type == pygame.KEYDOWN:
                if view.prompt is not None:
                    if event.key == pygame.K_ESCAPE:
                        view.prompt = None
                    elif event.key == pygame.K_RETURN:
                        result = lock.try_unlock(view.prompt)
                        view.prompt = None if result.unlocked else ''
                        view.banner = "Happy Birthday ❤️" if result.unlocked else result.hint
                    elif event.key == pygame.K_BACKSPACE:
                        view.prompt = view.prompt[:-1]
                    elif event.unicode and event.unicode.isprintable():
                        view.prompt += event.unicode
                elif event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_s:
                    view.banner = None
                    game.start()
                elif event.key == pygame.K_r:
                    view.banner = None
                    game.reset()
                elif event.key == pygame.K_u and game.state == GameState.STOPPED:
                    view.prompt = ''

        game.handle_input(input_manager.get_events())
        scheduler.advance(dt)
        view.update(dt)

        view.render(screen, game.snapshot())
        pygame.display.flip()

    log.info("exiting with score %d", game.score)
    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
