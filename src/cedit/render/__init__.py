"""Screen rendering."""

from cedit.render.frame import FrameRenderer, welcome_banner

__all__ = ["FrameRenderer", "welcome_banner"]
