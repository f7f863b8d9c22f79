"""
Security components for instance access.

Components:
- resolve_key_material: Reuse or create the backend EC2 key pair
"""

from ollama_iac.components.security.key_pair import (
    KeyMaterial,
    decode_private_key,
    load_private_key,
    resolve_key_material,
)

__all__ = [
    "KeyMaterial",
    "decode_private_key",
    "load_private_key",
    "resolve_key_material",
]
