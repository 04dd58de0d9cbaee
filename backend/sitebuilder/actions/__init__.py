from .base import ActionResult, server_action
from .site import create_site_action
from .page import create_page_action, save_page_content_action, set_page_published_action

__all__ = [
    "ActionResult",
    "server_action",
    "create_site_action",
    "create_page_action",
    "save_page_content_action",
    "set_page_published_action",
]
