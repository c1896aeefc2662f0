"""
Utility modules for the store integration
"""
from .store_config_loader import StoreSettings, load_store_settings

__all__ = [
    'StoreSettings',
    'load_store_settings',
]
