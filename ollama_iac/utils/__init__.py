"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and output utilities.
"""

from ollama_iac.utils.naming import ResourceNamer
from ollama_iac.utils.tags import create_tags
from ollama_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "write_outputs_to_env",
]
