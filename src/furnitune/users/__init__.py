# Users package
from .profile_service import ProfileService

__all__ = ['ProfileService']
