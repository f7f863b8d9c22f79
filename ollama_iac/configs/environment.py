"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
Defaults apply whenever a key is absent.
"""

import pulumi
from pydantic import ValidationError

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.constants import (
    DEFAULT_CONTAINER_PORT,
    DEFAULT_CPU,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_LLM,
    DEFAULT_MEMORY,
    DEFAULT_SSH_CIDR,
    DEFAULT_VPC_CIDR,
    PORTS,
)
from ollama_iac.exceptions import ConfigurationError


def get_config(config: pulumi.Config | None = None) -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    Args:
        config: Config to read from, defaults to the project namespace

    Returns:
        StackConfig: Validated configuration object

    Raises:
        ConfigurationError: If a configured value is invalid
    """
    config = config or pulumi.Config()

    try:
        return StackConfig(
            environment=config.get("environment") or pulumi.get_stack(),
            instance_type=config.get("instanceType") or DEFAULT_INSTANCE_TYPE,
            vpc_cidr=config.get("vpcNetworkCidr") or DEFAULT_VPC_CIDR,
            container_port=config.get_int("containerPort") or DEFAULT_CONTAINER_PORT,
            cpu=config.get_int("cpu") or DEFAULT_CPU,
            memory=config.get_int("memory") or DEFAULT_MEMORY,
            llm=config.get("llm") or DEFAULT_LLM,
            ollama_port=config.get_int("ollamaPort") or PORTS["ollama"],
            ssh_cidr=config.get("sshCidr") or DEFAULT_SSH_CIDR,
            key_name=config.get("keyName") or None,
            public_key=config.get("publicKey") or None,
        )
    except ValidationError as e:
        errors = e.errors()
        fields = [".".join(str(part) for part in err["loc"]) for err in errors]
        raise ConfigurationError(
            f"Invalid stack configuration: {errors[0]['msg']}",
            field=fields[0] or None,
            details={"errors": [f"{f or 'config'}: {err['msg']}" for f, err in zip(fields, errors)]},
        ) from e
