import os

import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from .config import DEFAULT_CONFIG
from .controls import InputState
from .render import Renderer
from .simulation import ASTEROID_HIT, GAME_OVER, STAR_COLLECTED, step
from .state import GameState, Phase

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    user_guide = (
        "Controls: ←→ to steer the ship. Press Space to pause or resume."
    )

    game_description = (
        "Dodge falling asteroids and catch stars. Three hits and the run is over; rocks fall faster the longer you last."
    )

    auto_advance = True

    def __init__(self, render_mode="rgb_array", config=DEFAULT_CONFIG):
        super().__init__()
        self.render_mode = render_mode
        self.config = config.validate()

        self.WIDTH, self.HEIGHT = config.WIDTH, config.HEIGHT
        self.FPS = config.FPS
        self.MAX_STEPS = 10000

        # Rewards
        self.REWARD_SURVIVE = 0.1
        self.REWARD_STAR = 1.0
        self.REWARD_HIT = -5.0
        self.REWARD_GAME_OVER = -10.0

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.screen = pygame.Surface((self.WIDTH, self.HEIGHT))
        self.renderer = Renderer(config, pause_key="Space")

        # Game state is built in reset()
        self.state = None
        self.steps = 0
        self.prev_space_held = False

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.renderer.np_random = np.random.default_rng(seed)

        self.state = GameState(self.config, self.np_random)
        self.state.start()
        self.steps = 0
        self.prev_space_held = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.state.phase is Phase.GAME_OVER:
            return self._get_observation(), 0, True, False, self._get_info()

        movement, space_held = action[0], action[1] == 1
        dt = 1.0 / self.FPS

        self.state.flash.decay(dt)
        if space_held and not self.prev_space_held:
            self.state.toggle_pause()
        self.prev_space_held = space_held

        inputs = InputState(left=movement == 3, right=movement == 4)
        events = step(self.state, inputs, dt)
        self.steps += 1

        reward = self.REWARD_SURVIVE if self.state.running else 0.0
        for event in events:
            if event.kind == STAR_COLLECTED:
                reward += self.REWARD_STAR
            elif event.kind == ASTEROID_HIT:
                reward += self.REWARD_HIT
            elif event.kind == GAME_OVER:
                reward += self.REWARD_GAME_OVER

        terminated = self.state.phase is Phase.GAME_OVER
        truncated = not terminated and self.steps >= self.MAX_STEPS

        return self._get_observation(), float(reward), terminated, truncated, self._get_info()

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.screen, self.state.snapshot())
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.state.display_score,
            "lives": self.state.lives,
            "steps": self.steps,
            "elapsed": self.state.elapsed,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(info, dict)
        assert self.state.phase is Phase.RUNNING
        assert info["lives"] == self.config.START_LIVES and info["score"] == 0

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)
        assert 0 <= info["lives"] <= self.config.START_LIVES
        assert info["steps"] == 1

        # Test pause toggle on a fresh space press
        self.reset()
        self.step([0, 1, 0])
        assert self.state.phase is Phase.PAUSED
        self.step([0, 0, 0])
        self.step([0, 1, 0])
        assert self.state.phase is Phase.RUNNING
