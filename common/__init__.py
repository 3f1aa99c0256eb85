"""
ChunkCipher Common Module
=========================

Configuration, structured logging and Rich console helpers shared by the
ChunkCipher tool package.
"""

from common.config import ToolkitConfig

__all__ = ["ToolkitConfig"]
