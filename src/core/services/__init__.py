"""
Core services exports.

Provides input routing, image caching, and configuration loading.
"""

from src.core.services.config_manager import load_config
from src.core.services.input_bridge import InputBridge
from src.core.services.resource_cache import ResourceCache, ResourceError, LoadHandle

__all__ = [
    # Config
    'load_config',
    # Input
    'InputBridge',
    # Resources
    'ResourceCache',
    'ResourceError',
    'LoadHandle',
]
