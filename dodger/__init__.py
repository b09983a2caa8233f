import numpy as np

__all__ = ["__version__", "init_rng", "DodgerError"]
__version__ = "0.1.0"


class DodgerError(Exception):
    """Raised when the game is configured or driven incorrectly."""


def init_rng(seed=None):
    """Return the random source shared by the spawner and the renderer."""
    return np.random.default_rng(seed)
