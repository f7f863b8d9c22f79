"""
Security Groups Component for Network Access Control.

Architectural Steps & Flow:
1. Create "Shell" Security Groups (Backend, ALB, Frontend) without rules,
   so they exist and can be referenced by ID.

2. Define Rules:
   - Backend: Accepts the Ollama port from anywhere (the Fargate tasks reach
     it over its public IP) and SSH from the management CIDR.
   - ALB: Accepts HTTP from the internet, forwards only to the frontend tasks.
   - Frontend: Accepts the Open WebUI port ONLY from the ALB.
   - Egress: Backend and frontend may reach anything (model downloads,
     image pulls, calls to the backend).

3. Stateful Nature:
   - Allowing an inbound request automatically allows the reply.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from ollama_iac.configs.constants import PORTS
from ollama_iac.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    backend_sg_id: pulumi.Output[str]
    alb_sg_id: pulumi.Output[str]
    frontend_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the Ollama backend and the Open WebUI frontend.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        ollama_port: int,
        container_port: int,
        ssh_cidr: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("ollama:networking:SecurityGroups", name, None, opts)
        self.ollama_port = ollama_port
        self.container_port = container_port
        self.ssh_cidr = ssh_cidr

        child_opts = pulumi.ResourceOptions(parent=self)
        self.rules: dict[str, pulumi.CustomResource] = {}

        self.backend_sg = aws.ec2.SecurityGroup(
            f"{name}-backend-sg",
            description="Security group for Ollama backend EC2",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-backend-sg"),
            opts=child_opts,
        )

        self.alb_sg = aws.ec2.SecurityGroup(
            f"{name}-alb-sg",
            description="Security group for Open WebUI load balancer",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-alb-sg"),
            opts=child_opts,
        )

        self.frontend_sg = aws.ec2.SecurityGroup(
            f"{name}-frontend-sg",
            description="Security group for Open WebUI Fargate tasks",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-frontend-sg"),
            opts=child_opts,
        )

        self._create_rules(name, child_opts)

        self.register_outputs({
            "backend_sg_id": self.backend_sg.id,
            "alb_sg_id": self.alb_sg.id,
            "frontend_sg_id": self.frontend_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        # Backend: Ollama API
        self.rules["backend-ingress-ollama"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-backend-ingress-ollama",
            security_group_id=self.backend_sg.id,
            ip_protocol="tcp",
            from_port=self.ollama_port,
            to_port=self.ollama_port,
            cidr_ipv4="0.0.0.0/0",
            description="Ollama API",
            opts=opts,
        )

        # Backend: SSH management access
        self.rules["backend-ingress-ssh"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-backend-ingress-ssh",
            security_group_id=self.backend_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["ssh"],
            to_port=PORTS["ssh"],
            cidr_ipv4=self.ssh_cidr,
            description="SSH management",
            opts=opts,
        )

        self.rules["backend-egress-all"] = aws.vpc.SecurityGroupEgressRule(
            f"{name}-backend-egress-all",
            security_group_id=self.backend_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

        # ALB: Public HTTP
        self.rules["alb-ingress-http"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-alb-ingress-http",
            security_group_id=self.alb_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["http"],
            to_port=PORTS["http"],
            cidr_ipv4="0.0.0.0/0",
            description="HTTP from internet",
            opts=opts,
        )

        self.rules["alb-egress-frontend"] = aws.vpc.SecurityGroupEgressRule(
            f"{name}-alb-egress-frontend",
            security_group_id=self.alb_sg.id,
            ip_protocol="tcp",
            from_port=self.container_port,
            to_port=self.container_port,
            referenced_security_group_id=self.frontend_sg.id,
            description="To Open WebUI tasks",
            opts=opts,
        )

        # Frontend: Open WebUI only from the ALB
        self.rules["frontend-ingress-alb"] = aws.vpc.SecurityGroupIngressRule(
            f"{name}-frontend-ingress-alb",
            security_group_id=self.frontend_sg.id,
            ip_protocol="tcp",
            from_port=self.container_port,
            to_port=self.container_port,
            referenced_security_group_id=self.alb_sg.id,
            description="Open WebUI from ALB",
            opts=opts,
        )

        self.rules["frontend-egress-all"] = aws.vpc.SecurityGroupEgressRule(
            f"{name}-frontend-egress-all",
            security_group_id=self.frontend_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            backend_sg_id=self.backend_sg.id,
            alb_sg_id=self.alb_sg.id,
            frontend_sg_id=self.frontend_sg.id,
        )
