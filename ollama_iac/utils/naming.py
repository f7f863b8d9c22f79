"""
Resource naming for the Ollama stack.

Names follow {project}-{environment}[-{resource}]. Stack names may contain
characters that load balancer and target group names reject, so the
environment is normalized to lowercase alphanumerics and hyphens.
"""

import re
from dataclasses import dataclass

_INVALID_CHARS = re.compile(r"[^a-z0-9-]+")


@dataclass
class ResourceNamer:
    """
    Builds logical names for the stack's resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment, normalized on creation
    """
    project: str
    environment: str

    def __post_init__(self) -> None:
        self.environment = _INVALID_CHARS.sub("-", self.environment.lower()).strip("-")

    def name(self, resource: str = "") -> str:
        """
        Name a resource, or the stack itself when resource is empty.

        Args:
            resource: Resource identifier (e.g., 'backend', 'ui')

        Returns:
            Formatted resource name
        """
        parts = [self.project, self.environment, resource]
        return "-".join(part for part in parts if part)
