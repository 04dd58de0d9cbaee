from .user import User
from .site import Site
from .page import Page

__all__ = ["User", "Site", "Page"]
