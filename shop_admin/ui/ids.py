from __future__ import annotations

__all__ = ["IDs", "GridIDs", "row_select_id", "select_all_id"]


class IDs:
    class Control:
        # Routing / shell
        URL = "url"
        PAGE_CONTENT = "page-content"
        BREADCRUMB = "breadcrumb"

        # Sidebar
        SIDEBAR_SETTINGS_TOGGLE = "sidebar-settings-toggle"
        SIDEBAR_SETTINGS_COLLAPSE = "sidebar-settings-collapse"

        # Login
        LOGIN_EMAIL = "login-email"
        LOGIN_PASSWORD = "login-password"
        LOGIN_SUBMIT = "login-submit"
        LOGIN_MESSAGE = "login-message"

        # Register
        REGISTER_NAME = "register-name"
        REGISTER_AGE = "register-age"
        REGISTER_EMAIL = "register-email"
        REGISTER_PASSWORD = "register-password"
        REGISTER_SUBMIT = "register-submit"
        REGISTER_MESSAGE = "register-message"

    class Pattern:
        # pattern-matching "type" strings
        ROW_SELECT = "grid-row-select"
        SELECT_ALL = "grid-select-all"


class GridIDs:
    """
    Component ids of one data-table page, prefixed with the table key so the
    products and categories pages can share the same builders and callbacks.
    """

    def __init__(self, key: str):
        self.key = key

        # Stores
        self.DATA = f"{key}-data"
        self.STATE = f"{key}-grid-state"

        # Toolbar
        self.SEARCH = f"{key}-search"
        self.CREATE_BTN = f"{key}-create-btn"
        self.DELETE_BTN = f"{key}-delete-btn"

        # Table + pagination
        self.TABLE = f"{key}-table"
        self.PAGE_SIZE = f"{key}-page-size"
        self.PAGE_LABEL = f"{key}-page-label"
        self.PREV_BTN = f"{key}-prev-btn"
        self.NEXT_BTN = f"{key}-next-btn"
        self.PAGINATION = f"{key}-pagination"

        # Create modal
        self.MODAL = f"{key}-create-modal"
        self.MODAL_SUBMIT = f"{key}-modal-submit"
        self.MODAL_CANCEL = f"{key}-modal-cancel"
        self.MODAL_MESSAGE = f"{key}-modal-message"
        self.FORM_NAME = f"{key}-form-name"
        self.FORM_CATEGORY = f"{key}-form-category"
        self.FORM_CONDITION = f"{key}-form-condition"
        self.FORM_DESCRIPTION = f"{key}-form-description"
        self.FORM_PRICE = f"{key}-form-price"
        self.FORM_IMAGE_URL = f"{key}-form-image-url"
        self.FORM_IMAGE_FILE = f"{key}-form-image-file"


def row_select_id(table_key: str, row_id: str) -> dict:
    return {"type": IDs.Pattern.ROW_SELECT, "table": table_key, "index": row_id}


def select_all_id(table_key: str) -> dict:
    return {"type": IDs.Pattern.SELECT_ALL, "table": table_key, "scope": "page"}
