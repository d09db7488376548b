from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from shop_admin.config.model import (
    DEFAULT_PAGE_SIZE_OPTIONS,
    AuthConfig,
    GlobalConfig,
    TableConfig,
)
from shop_admin.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            tables/
                products.json
                categories.json
                ...

    Each file in 'tables/' is parsed into a TableConfig. A table file that
    fails to parse is logged and skipped so one bad file doesn't take the
    whole admin down.

    :param root: Directory containing 'global.json' and optionally 'tables/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open(encoding="utf-8") as f:
        raw_global = json.load(f)

    tables_dir = root / "tables"
    tables: List[TableConfig] = []

    if tables_dir.is_dir():
        logger.info(f"Scanning for table configurations in: {tables_dir}")

        files = sorted(tables_dir.glob("*.json"))
        if not files:
            logger.warning(f"No .json files found in {tables_dir}")

        for idx, config_file in enumerate(files):
            logger.info(f"Loading table config: {config_file.name}")
            try:
                with config_file.open(encoding="utf-8") as f:
                    raw = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Failed to load {config_file.name}: {e}")
                continue
            tables.append(TableConfig.from_raw(raw, source_path=config_file, index=idx))
    else:
        logger.warning(f"Tables directory not found at: {tables_dir}")

    raw_auth = raw_global.get("auth") or {}
    auth = AuthConfig(
        demo_email=raw_auth.get("demo_email", AuthConfig.demo_email),
        demo_password=raw_auth.get("demo_password", AuthConfig.demo_password),
        min_password_length=int(raw_auth.get("min_password_length", AuthConfig.min_password_length)),
    )

    page_size_options = [int(n) for n in raw_global.get("page_size_options", DEFAULT_PAGE_SIZE_OPTIONS)]
    if any(n < 1 for n in page_size_options):
        raise ConfigError(f"page_size_options must all be >= 1, got {page_size_options}")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Shop Admin"),
        subtitle=raw_global.get("subtitle", "Dashboard"),
        tables=tables,
        auth=auth,
        page_size_options=page_size_options,
    )


def load_table_registry(path: Path) -> tuple[GlobalConfig, Dict[str, TableConfig]]:
    """
    Load global config + table configs and index tables by key.

    :raises ConfigError: if two table files share a key or a table is malformed.
    """
    global_config = load_global_config(path)

    cfg_by_key: Dict[str, TableConfig] = {}
    duplicates: List[str] = []

    for table_cfg in global_config.tables:
        if table_cfg.key in cfg_by_key:
            duplicates.append(table_cfg.key)
            continue
        if not table_cfg.columns:
            raise ConfigError(f"Table '{table_cfg.key}' ({table_cfg.source_path.name}) declares no columns")
        if table_cfg.initial_page_size < 1:
            raise ConfigError(f"Table '{table_cfg.key}' initial_page_size must be >= 1")
        cfg_by_key[table_cfg.key] = table_cfg

    if duplicates:
        raise ConfigError(f"Duplicate table keys in config: {sorted(set(duplicates))}")

    logger.info(
        "Tables loaded from config root",
        extra={
            "config_root": str(path),
            "n_tables": len(cfg_by_key),
            "table_keys": sorted(cfg_by_key),
        },
    )

    return global_config, cfg_by_key
