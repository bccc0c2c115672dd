from __future__ import annotations

import argparse
from typing import Dict, Optional

import pygame

from polyomino_bridge.game import Action, GameConfig, Scene, Session
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.ROTATE_LEFT,
    pygame.K_RIGHT: Action.ROTATE_RIGHT,
    pygame.K_SPACE: Action.DROP,
}


def run(seed: Optional[int] = None, fps: int = 60) -> None:
    pygame.init()
    try:
        session = Session(GameConfig(random_seed=seed))
        renderer = Renderer(lane_height=session.config.lane_height)
        screen = pygame.display.set_mode((renderer.width, renderer.height))
        pygame.display.set_caption("Polyomino Bridge")
        clock = pygame.time.Clock()

        while session.running:
            # Input handling; one action per key press
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.quit()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        session.quit()
                    elif session.scene == Scene.GAME:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            session.handle(action)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if session.scene == Scene.TITLE:
                        if renderer.start_button.collidepoint(event.pos):
                            session.start_game()
                        elif renderer.exit_button.collidepoint(event.pos):
                            session.quit()

            # Fall clock
            elapsed = clock.tick(fps) / 1000.0
            session.update(elapsed)

            renderer.draw(screen, session, pygame.mouse.get_pos())
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Polyomino Bridge")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run(args.seed, args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
