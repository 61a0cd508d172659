from .base import Scene
from .garden_scene import GardenScene
from .manager import SceneManager

__all__ = ["Scene", "GardenScene", "SceneManager"]
