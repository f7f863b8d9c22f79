"""
Compute components for the backend and frontend tiers.

Components:
- Ec2BackendComponent: GPU EC2 instance running Ollama
- AlbComponent: Internet-facing ALB for the frontend
- FargateFrontendComponent: Open WebUI on ECS Fargate
"""

from ollama_iac.components.compute.ec2_backend import Ec2BackendComponent, Ec2Outputs
from ollama_iac.components.compute.alb import AlbComponent, AlbOutputs
from ollama_iac.components.compute.fargate_frontend import FargateFrontendComponent, FargateOutputs

__all__ = [
    "Ec2BackendComponent",
    "Ec2Outputs",
    "AlbComponent",
    "AlbOutputs",
    "FargateFrontendComponent",
    "FargateOutputs",
]
