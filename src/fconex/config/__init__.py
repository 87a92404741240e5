"""
Configuration layer for fconex.

Typed, immutable contracts for rendering and output layout. Values are
resolved from the environment by ``fconex.cli.config``.
"""

from fconex.config.settings import (
    RenderConfig,
    OutputConfig,
    FconexConfig,
)

__all__ = [
    "RenderConfig",
    "OutputConfig",
    "FconexConfig",
]
