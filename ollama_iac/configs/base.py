"""
Stack configuration model.

Provides the validated, immutable settings loaded from Pulumi stack configs.
"""

import ipaddress

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ollama_iac.configs.constants import (
    DEFAULT_CONTAINER_PORT,
    DEFAULT_CPU,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_LLM,
    DEFAULT_MEMORY,
    DEFAULT_SSH_CIDR,
    DEFAULT_VPC_CIDR,
    FARGATE_CPU_MEMORY,
    PORTS,
    SUBNET_INDEXES,
    SUBNET_PREFIX_LENGTH,
)


class StackConfig(BaseModel):
    """
    Settings for one deployment of the Ollama stack.

    Attributes:
        environment: Deployment environment, defaults to the stack name
        instance_type: EC2 instance type for the Ollama backend
        vpc_cidr: CIDR block of the VPC, subnets are carved from it
        container_port: Port Open WebUI listens on inside the container
        cpu: Fargate task CPU units
        memory: Fargate task memory in MiB
        llm: Ollama model pulled at first boot
        ollama_port: Port the Ollama server listens on
        ssh_cidr: CIDR allowed to reach the backend over SSH
        key_name: Existing EC2 key pair name
        public_key: Public key used to create a new key pair
    """

    model_config = ConfigDict(frozen=True)

    environment: str = Field(min_length=1, description="Deployment environment")
    instance_type: str = Field(default=DEFAULT_INSTANCE_TYPE, min_length=1)
    vpc_cidr: str = Field(default=DEFAULT_VPC_CIDR)
    container_port: int = Field(default=DEFAULT_CONTAINER_PORT, ge=1, le=65535)
    cpu: int = Field(default=DEFAULT_CPU, description="Fargate CPU units")
    memory: int = Field(default=DEFAULT_MEMORY, description="Fargate memory (MiB)")
    llm: str = Field(
        default=DEFAULT_LLM,
        pattern=r"^[A-Za-z0-9._:/-]+$",
        description="Model name, placed verbatim in the bootstrap script",
    )
    ollama_port: int = Field(default=PORTS["ollama"], ge=1, le=65535)
    ssh_cidr: str = Field(default=DEFAULT_SSH_CIDR)
    key_name: str | None = None
    public_key: str | None = None

    @field_validator("vpc_cidr")
    @classmethod
    def _check_vpc_cidr(cls, value: str) -> str:
        network = ipaddress.IPv4Network(value)
        # Needs room for every /24 subnet index
        max_prefix = SUBNET_PREFIX_LENGTH - (max(SUBNET_INDEXES.values())).bit_length()
        if network.prefixlen > max_prefix:
            raise ValueError(f"VPC CIDR must be /{max_prefix} or larger, got /{network.prefixlen}")
        return value

    @field_validator("ssh_cidr")
    @classmethod
    def _check_ssh_cidr(cls, value: str) -> str:
        ipaddress.IPv4Network(value)
        return value

    @model_validator(mode="after")
    def _check_fargate_size(self) -> "StackConfig":
        allowed = FARGATE_CPU_MEMORY.get(self.cpu)
        if allowed is None:
            raise ValueError(
                f"cpu must be one of {sorted(FARGATE_CPU_MEMORY)}, got {self.cpu}"
            )
        if self.memory not in allowed:
            raise ValueError(
                f"memory {self.memory} is not valid for cpu {self.cpu} "
                f"(allowed: {allowed[0]}-{allowed[-1]})"
            )
        return self

    @property
    def subnet_cidrs(self) -> dict[str, str]:
        """Get the /24 CIDR of each public subnet."""
        blocks = list(
            ipaddress.IPv4Network(self.vpc_cidr).subnets(new_prefix=SUBNET_PREFIX_LENGTH)
        )
        return {name: str(blocks[index]) for name, index in SUBNET_INDEXES.items()}

    @property
    def ssh_open_to_world(self) -> bool:
        """Check if SSH ingress is unrestricted."""
        return ipaddress.IPv4Network(self.ssh_cidr).prefixlen == 0
