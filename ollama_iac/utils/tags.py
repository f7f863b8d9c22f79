"""
Tags applied to every AWS resource of the stack.
"""

import pulumi

from ollama_iac.configs.constants import DEFAULT_TAGS


def create_tags(environment: str, resource_name: str, **extra_tags: str) -> dict[str, str]:
    """
    Build the tag set for one resource.

    Project and ManagedBy come from the defaults, Stack is the Pulumi stack
    the resource belongs to. Extra tags win over everything else.

    Args:
        environment: Deployment environment
        resource_name: Value of the Name tag
        **extra_tags: Additional or overriding tags

    Returns:
        Dictionary of tags
    """
    return {
        **DEFAULT_TAGS,
        "Stack": pulumi.get_stack(),
        "Environment": environment,
        "Name": resource_name,
        **extra_tags,
    }
