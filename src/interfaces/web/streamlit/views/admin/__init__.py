"""Admin dashboard views package."""

from .page import render_admin_page


__all__ = ["render_admin_page"]
