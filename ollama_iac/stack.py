"""
Stack composition for the Ollama deployment.

Instantiates all component resources in dependency order:
1. Key material (fails fast on missing keyName/publicKey)
2. VPC -> Security Groups
3. EC2 Backend (Ollama)
4. ALB -> Fargate Frontend (Open WebUI, pointed at the backend URL)

Ordering between resources is inferred by the Pulumi engine from the Outputs
passed between components.
"""

import pulumi
import pulumi_aws as aws

from ollama_iac.configs.base import StackConfig
from ollama_iac.utils.naming import ResourceNamer

# Networking
from ollama_iac.components.networking.vpc import VpcComponent
from ollama_iac.components.networking.security_groups import SecurityGroupsComponent

# Security
from ollama_iac.components.security.key_pair import resolve_key_material

# Compute
from ollama_iac.components.compute.ec2_backend import Ec2BackendComponent
from ollama_iac.components.compute.alb import AlbComponent
from ollama_iac.components.compute.fargate_frontend import FargateFrontendComponent

PROJECT = "ollama"


def deploy(
    config: StackConfig,
    private_key: pulumi.Output[str],
    aws_region: str | None = None,
    availability_zones: list[str] | None = None,
) -> dict[str, pulumi.Output[str]]:
    """
    Declare every resource of the stack.

    Args:
        config: Validated stack configuration
        private_key: Decoded privateKey secret
        aws_region: Region for container logs, looked up when omitted
        availability_zones: Two zones for the subnets, looked up when omitted

    Returns:
        Stack outputs keyed by export name

    Raises:
        ConfigurationError: If no key pair can be resolved
    """
    namer = ResourceNamer(project=PROJECT, environment=config.environment)
    base_name = namer.name()

    # --- Key material (before any network resource) ---
    key_material = resolve_key_material(base_name, config, private_key)

    if config.ssh_open_to_world:
        pulumi.log.warn(f"SSH ingress on the backend is open to {config.ssh_cidr}")

    aws_region = aws_region or aws.get_region().region
    if availability_zones is None:
        availability_zones = aws.get_availability_zones(state="available").names[:2]

    # --- Layer 1: Networking ---
    vpc = VpcComponent(
        name=base_name,
        environment=config.environment,
        cidr_block=config.vpc_cidr,
        subnet_cidrs=config.subnet_cidrs,
        availability_zones=availability_zones,
    )
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        ollama_port=config.ollama_port,
        container_port=config.container_port,
        ssh_cidr=config.ssh_cidr,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: Ollama backend ---
    backend = Ec2BackendComponent(
        name=namer.name("backend"),
        environment=config.environment,
        config=config,
        subnet_id=vpc_outputs.subnet_id,
        security_group_id=sg_outputs.backend_sg_id,
        key_name=key_material.key_name,
    )
    backend_outputs = backend.get_outputs()

    # --- Layer 3: Open WebUI frontend ---
    alb = AlbComponent(
        name=namer.name("ui"),
        environment=config.environment,
        vpc_id=vpc_outputs.vpc_id,
        subnet_ids=[vpc_outputs.subnet_id, vpc_outputs.subnet_id_b],
        security_group_id=sg_outputs.alb_sg_id,
        target_port=config.container_port,
    )
    alb_outputs = alb.get_outputs()

    FargateFrontendComponent(
        name=namer.name("frontend"),
        environment=config.environment,
        config=config,
        subnet_ids=[vpc_outputs.subnet_id, vpc_outputs.subnet_id_b],
        security_group_id=sg_outputs.frontend_sg_id,
        target_group_arn=alb_outputs.target_group_arn,
        backend_url=backend_outputs.ollama_url,
        aws_region=aws_region,
        listener=alb.listener,
    )

    return {
        "ollamaServerPublicIp": backend_outputs.public_ip,
        "ollamaServerPublicDns": backend_outputs.public_dns,
        "ollamaFrontendLB": pulumi.Output.concat("http://", alb_outputs.alb_dns_name),
    }
