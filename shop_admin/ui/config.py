from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from shop_admin.config.model import GlobalConfig
from shop_admin.services.auth_service import AuthService
from shop_admin.services.catalog_service import CatalogService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config, the catalog that owns the table
    datasets, and the auth stub. Passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    catalog: Optional[CatalogService] = None
    auth_service: Optional[AuthService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.catalog is None:
            raise RuntimeError("AppConfig.catalog must be initialized.")
        if self.auth_service is None:
            raise RuntimeError("AppConfig.auth_service must be initialized.")
