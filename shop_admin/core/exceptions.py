

class ShopAdminError(Exception):
    """Base exception for all shop_admin errors"""
    pass

class ConfigError(ShopAdminError):
    """Invalid or inconsistent global.json / table config"""
    pass

class DuplicateRowIdError(ConfigError):
    """
    Two distinct rows produced the same identity string.
    Selection is keyed by identity, so the rows would collapse into one slot.
    """

    def __init__(self, row_id: str):
        self.row_id = row_id
        super().__init__(f"Duplicate row identity {row_id!r}; identities must be unique per row")

class PaginationError(ShopAdminError):
    """page / page_size outside their allowed range (both must be >= 1)"""
    pass

class CatalogError(ShopAdminError):
    """A create/delete request against a catalog table could not be applied"""
    pass
