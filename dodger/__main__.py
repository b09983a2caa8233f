import argparse
import os

import pygame

from . import DodgerError
from .config import GameConfig, seed_from_env
from .controls import LEFT, RIGHT
from .game import Game
from .logs import setup_logging
from .policy import policy
from .state import Phase


def apply_action(game, action):
    """Feed a policy action ([movement, space, shift]) into the game's controls."""
    movement = action[0]
    if movement == 3:
        game.controls.press(LEFT)
        game.controls.release(RIGHT)
    elif movement == 4:
        game.controls.press(RIGHT)
        game.controls.release(LEFT)
    else:
        game.controls.release(LEFT)
        game.controls.release(RIGHT)


def run_headless(game, ticks, auto):
    dt = 1.0 / game.config.FPS
    game.controls.start()
    for tick in range(ticks):
        if auto:
            apply_action(game, policy(game))
        game.tick(dt=dt)
        if game.state.phase is Phase.GAME_OVER:
            break
    snap = game.snapshot()
    print(f"phase   : {snap.phase.value}")
    print(f"ticks   : {tick + 1}")
    print(f"elapsed : {snap.elapsed:.2f}s")
    print(f"score   : {snap.score}")
    print(f"lives   : {snap.lives}")
    return snap


def run_window(game, auto, scale):
    from .render import Renderer

    cfg = game.config
    pygame.init()
    window = pygame.display.set_mode((int(cfg.WIDTH * scale), int(cfg.HEIGHT * scale)))
    pygame.display.set_caption("Asteroid Dodger")
    canvas = pygame.Surface((cfg.WIDTH, cfg.HEIGHT))
    renderer = Renderer(cfg)
    frame_clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                running = False
            else:
                game.controls.handle_event(event)

        if auto:
            if game.state.phase in (Phase.IDLE, Phase.GAME_OVER):
                game.controls.start()
            apply_action(game, policy(game))

        game.tick(now=pygame.time.get_ticks() / 1000.0)

        renderer.draw(canvas, game.snapshot())
        if scale == 1:
            window.blit(canvas, (0, 0))
        else:
            window.blit(pygame.transform.smoothscale(canvas, window.get_size()), (0, 0))
        pygame.display.flip()
        frame_clock.tick(60)

    pygame.quit()


def main(argv=None):
    ap = argparse.ArgumentParser(prog="asteroid-dodger", description="Dodge asteroids, collect stars.")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--auto", action="store_true", help="let the built-in policy play")
    ap.add_argument("--headless", action="store_true", help="run without a window")
    ap.add_argument("--ticks", type=int, default=3000, help="tick limit for --headless")
    ap.add_argument("--scale", type=float, default=1.0, help="window scale factor")
    ap.add_argument("--log-level", default=None)
    ap.add_argument("--log-file", default=None)
    args = ap.parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    try:
        config = GameConfig.from_env()
        seed = args.seed if args.seed is not None else seed_from_env()
    except DodgerError as e:
        ap.error(str(e))

    if args.headless:
        os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        game = Game(config, seed=seed)
        run_headless(game, max(1, args.ticks), args.auto)
        return

    game = Game(config, seed=seed, scale_x=1.0 / args.scale)
    run_window(game, args.auto, args.scale)


if __name__ == "__main__":
    main()
