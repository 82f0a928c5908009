from __future__ import annotations

from .generator_config import GeneratorConfig

__all__ = ["GeneratorConfig"]
