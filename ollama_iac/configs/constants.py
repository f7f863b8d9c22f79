"""
Infrastructure constants for the Ollama stack.

Contains configuration defaults, ports, images and Fargate sizing rules.
"""

from typing import Final

# Stack configuration defaults
DEFAULT_INSTANCE_TYPE: Final[str] = "g4dn.xlarge"
DEFAULT_VPC_CIDR: Final[str] = "10.9.0.0/16"
DEFAULT_CONTAINER_PORT: Final[int] = 8080
DEFAULT_CPU: Final[int] = 256
DEFAULT_MEMORY: Final[int] = 512
DEFAULT_LLM: Final[str] = "llama2:latest"
DEFAULT_SSH_CIDR: Final[str] = "0.0.0.0/0"

# Subnets are /24 blocks carved out of the VPC CIDR, by index
SUBNET_PREFIX_LENGTH: Final[int] = 24
SUBNET_INDEXES: Final[dict[str, int]] = {
    "public": 1,    # Backend EC2, ALB, Fargate (AZ-a)
    "public_b": 2,  # ALB, Fargate (AZ-b)
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "http": 80,
    "ssh": 22,
    "ollama": 11434,
}

# GPU AMI lookup (Deep Learning Base, NVIDIA driver preinstalled)
GPU_AMI_NAME: Final[str] = "Deep Learning Base OSS Nvidia Driver GPU AMI (Ubuntu 20.04) 20240326"
GPU_AMI_OWNER: Final[str] = "898082745236"

# Frontend container
FRONTEND_CONTAINER_NAME: Final[str] = "oi-app"
FRONTEND_IMAGE: Final[str] = "ghcr.io/open-webui/open-webui:main"
FRONTEND_HEALTH_CHECK_PATH: Final[str] = "/health"
BACKEND_URL_ENV_VAR: Final[str] = "OLLAMA_BASE_URL"

# Private keys given in PEM form (RSA, OpenSSH, PKCS#8, ...) are used as-is,
# anything else is base64
PRIVATE_KEY_PEM_PREFIX: Final[str] = "-----BEGIN "
PRIVATE_KEY_PEM_MARKER: Final[str] = "PRIVATE KEY-----"

# Valid Fargate task sizes: cpu units -> allowed memory (MiB)
FARGATE_CPU_MEMORY: Final[dict[int, tuple[int, ...]]] = {
    256: (512, 1024, 2048),
    512: tuple(range(1024, 4096 + 1, 1024)),
    1024: tuple(range(2048, 8192 + 1, 1024)),
    2048: tuple(range(4096, 16384 + 1, 1024)),
    4096: tuple(range(8192, 30720 + 1, 1024)),
    8192: tuple(range(16384, 61440 + 1, 4096)),
    16384: tuple(range(32768, 122880 + 1, 8192)),
}

# Log retention for the frontend container logs
LOG_RETENTION_DAYS: Final[int] = 14

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "ollama-stack",
    "ManagedBy": "pulumi",
}

# File the stack outputs are written to after an update
OUTPUTS_ENV_FILE: Final[str] = "infrastructure.env"
