# Skeletonne API

from .main import app, create_app
from .config import get_settings, Settings

__all__ = [
    'app',
    'create_app',
    'get_settings',
    'Settings',
]
