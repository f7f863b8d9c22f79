"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.environment import get_config
from ollama_iac.configs.constants import (
    DEFAULT_TAGS,
    PORTS,
    FARGATE_CPU_MEMORY,
)

__all__ = [
    "StackConfig",
    "get_config",
    "DEFAULT_TAGS",
    "PORTS",
    "FARGATE_CPU_MEMORY",
]
