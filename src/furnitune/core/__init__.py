# Core package
from .config import FurnituneConfig

__all__ = ['FurnituneConfig']
