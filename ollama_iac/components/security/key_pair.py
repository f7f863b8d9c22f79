"""
Key material for SSH access to the Ollama backend.

Resolution order:
1. keyName set: the existing EC2 key pair is used as-is.
2. publicKey set: a new EC2 key pair is created from it.
3. Neither: configuration error, raised before any resource exists.

The private key matching the selected pair is always required. It may be
given as PEM text or base64-encoded PEM and is kept as a Pulumi secret.
"""

import base64
import binascii
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.constants import PRIVATE_KEY_PEM_MARKER, PRIVATE_KEY_PEM_PREFIX
from ollama_iac.exceptions import ConfigurationError
from ollama_iac.utils.tags import create_tags


@dataclass
class KeyMaterial:
    """Resolved key pair reference plus the matching private key."""
    key_name: pulumi.Input[str]
    private_key: pulumi.Output[str]
    key_pair: aws.ec2.KeyPair | None = None


def decode_private_key(value: str) -> str:
    """
    Normalize a configured private key to PEM text.

    Args:
        value: PEM text or base64-encoded PEM

    Returns:
        PEM text

    Raises:
        ConfigurationError: If the value is neither PEM nor base64 of ASCII text
    """
    if value.startswith(PRIVATE_KEY_PEM_PREFIX) and PRIVATE_KEY_PEM_MARKER in value:
        return value
    try:
        return base64.b64decode(value).decode("ascii")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ConfigurationError(
            "privateKey must be PEM text or base64-encoded PEM",
            field="privateKey",
            details={"reason": type(e).__name__},
        ) from e


def load_private_key(config: pulumi.Config) -> pulumi.Output[str]:
    """
    Read the required privateKey secret and decode it.

    Raises:
        pulumi.ConfigMissingError: If privateKey is not configured
    """
    return config.require_secret("privateKey").apply(decode_private_key)


def resolve_key_material(
    name: str,
    config: StackConfig,
    private_key: pulumi.Output[str],
    opts: pulumi.ResourceOptions | None = None,
) -> KeyMaterial:
    """
    Pick the EC2 key pair the backend instance is launched with.

    Args:
        name: Base resource name
        config: Stack configuration
        private_key: Decoded private key secret
        opts: Resource options for a created key pair

    Returns:
        KeyMaterial with the key name to launch with

    Raises:
        ConfigurationError: If neither keyName nor publicKey is configured
    """
    if config.key_name:
        return KeyMaterial(key_name=config.key_name, private_key=private_key)

    if not config.public_key:
        raise ConfigurationError(
            "must provide one of `keyName` or `publicKey`",
            field="keyName",
        )

    key_pair = aws.ec2.KeyPair(
        f"{name}-key",
        public_key=config.public_key,
        tags=create_tags(config.environment, f"{name}-key"),
        opts=opts,
    )
    pulumi.log.info("No keyName configured, creating key pair from publicKey")

    return KeyMaterial(
        key_name=key_pair.key_name,
        private_key=private_key,
        key_pair=key_pair,
    )
