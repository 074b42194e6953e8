#!/usr/bin/env python3
"""Pong - Standalone Entry Point.

Two players on one keyboard: W/S move the left paddle, the arrow keys
the right one. P or Space pauses, M toggles the music.

Usage:
    pong
    pong --difficulty hard
    pong --difficulty-left easy --difficulty-right difficult
    pong --config settings.yaml --no-audio
    python -m pong
"""

import argparse
import sys
from typing import List, Optional

import pygame
from pydantic import ValidationError

from pong.config import (
    FPS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    GameSettings,
    load_settings,
)
from pong.game.audio import AudioPlayer, NullAudio, PygameAudio
from pong.game.input import build_default_router
from pong.game.loop import GameLoop
from pong.game.skins import GeometricSkin
from pong.game.world import build_world
from pong.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pong - two players, one keyboard")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')

    # Game options
    parser.add_argument('--config', type=str, default=None,
                        help='YAML settings file')
    parser.add_argument('--difficulty', type=str, default=None,
                        help='Difficulty for both paddles (baby, easy, default, hard, difficult)')
    parser.add_argument('--difficulty-left', type=str, default=None,
                        help='Difficulty for the left paddle')
    parser.add_argument('--difficulty-right', type=str, default=None,
                        help='Difficulty for the right paddle')

    # Audio and diagnostics
    parser.add_argument('--no-audio', action='store_true',
                        help='Do not initialise the audio device at all')
    parser.add_argument('--log-level', type=str, default=None,
                        help='TRACE, DEBUG, INFO, WARNING, ERROR or OFF')
    return parser


def resolve_settings(args: argparse.Namespace) -> GameSettings:
    """Settings from the config file with CLI difficulty overrides applied."""
    settings = load_settings(args.config) if args.config else GameSettings()

    updates = {}
    if args.difficulty is not None:
        updates['difficulty_left'] = args.difficulty
        updates['difficulty_right'] = args.difficulty
    if args.difficulty_left is not None:
        updates['difficulty_left'] = args.difficulty_left
    if args.difficulty_right is not None:
        updates['difficulty_right'] = args.difficulty_right

    if updates:
        settings = settings.model_copy(update=updates)
    return settings


def create_audio(args: argparse.Namespace, settings: GameSettings) -> AudioPlayer:
    if args.no_audio:
        return NullAudio()
    return PygameAudio(sound_files=settings.sounds, sfx_volume=settings.sfx_volume)


def main(argv: Optional[List[str]] = None) -> int:
    """Run Pong standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        settings = resolve_settings(args)
    except (FileNotFoundError, ValidationError) as e:
        log.error("Invalid settings: %s", e)
        return 1

    pygame.init()
    pygame.font.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width, height = args.width, args.height
        screen = pygame.display.set_mode((width, height))

    pygame.display.set_caption("PONG")

    skin = GeometricSkin(screen)
    world = build_world(
        settings,
        screen_width=width,
        screen_height=height,
        skin=skin,
        audio=create_audio(args, settings),
    )
    router = build_default_router(world, settings.keys)
    loop = GameLoop(world, time_source=pygame.time.get_ticks)
    clock = pygame.time.Clock()

    running = True

    def handle_events() -> None:
        nonlocal running
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    router.press(pygame.key.name(event.key))
            elif event.type == pygame.KEYUP:
                router.release(pygame.key.name(event.key))

    def present() -> None:
        # Paused frames are not drawn by the world; keep the HUD current
        if world.paused:
            skin.render_static()
        pygame.display.flip()
        clock.tick(args.fps)

    print("\n" + "=" * 50)
    print("PONG")
    print("=" * 50)
    print("Controls:")
    print("  - W / S: left paddle")
    print("  - Up / Down: right paddle")
    print("  - P or Space: pause")
    print("  - M: music on/off")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    frames = loop.run(lambda: running, before_frame=handle_events, after_frame=present)
    log.info("Final score %d : %d after %d frames",
             world.score.left, world.score.right, frames)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
