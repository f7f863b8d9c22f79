"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public subnets, internet gateway, route table
- SecurityGroupsComponent: Security groups for backend, ALB, frontend tasks
"""

from ollama_iac.components.networking.vpc import VpcComponent, VpcOutputs
from ollama_iac.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
