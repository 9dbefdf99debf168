# -*- coding: utf-8 -*-

from .core.version import __version__

__all__ = ["__version__"]
