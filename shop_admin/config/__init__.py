"""
Config package for shop_admin.

Responsible for:
- config models (GlobalConfig, TableConfig, AuthConfig)
- config I/O helpers (load_global_config / load_table_registry)
"""

from .model import AuthConfig, GlobalConfig, TableConfig
from .loader import load_global_config, load_table_registry
