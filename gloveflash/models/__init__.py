from .base import GloveflashBaseModel
from .results import BaseResult, FlashResult


__all__ = ["GloveflashBaseModel", "BaseResult", "FlashResult"]
