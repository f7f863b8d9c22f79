"""
ECS Fargate Component for the Open WebUI frontend.

Resources:
1. ECS Cluster: Logical home for the service, container insights off.
2. Log Group: Container stdout/stderr via the awslogs driver.
3. Task Execution Role: Lets ECS pull the image and write logs.
4. Task Definition: One container (Open WebUI) with the Ollama backend URL
   injected as OLLAMA_BASE_URL. The URL is an Output of the backend
   instance, so the task definition waits for the backend address.
5. Service: One Fargate task in the public subnets with a public IP (needed
   to pull from ghcr.io without a NAT gateway), registered with the ALB
   target group.
"""

import json
from dataclasses import dataclass
from typing import Any

import pulumi
import pulumi_aws as aws

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.constants import (
    BACKEND_URL_ENV_VAR,
    FRONTEND_CONTAINER_NAME,
    FRONTEND_IMAGE,
    LOG_RETENTION_DAYS,
)
from ollama_iac.utils.tags import create_tags

TASK_EXECUTION_POLICY_ARN = "arn:aws:iam::aws:policy/service-role/AmazonECSTaskExecutionRolePolicy"


@dataclass
class FargateOutputs:
    """Output values from Fargate frontend component."""
    cluster_arn: pulumi.Output[str]
    service_name: pulumi.Output[str]
    task_definition_arn: pulumi.Output[str]


def build_container_definitions(
    backend_url: str,
    container_port: int,
    cpu: int,
    memory: int,
    log_group_name: str,
    region: str,
) -> list[dict[str, Any]]:
    """
    Build the ECS container definitions for Open WebUI.

    Args:
        backend_url: Ollama base URL the UI calls
        container_port: Port Open WebUI listens on
        cpu: Container CPU units
        memory: Container memory (MiB)
        log_group_name: CloudWatch log group for the awslogs driver
        region: AWS region of the log group

    Returns:
        List with a single container definition
    """
    return [{
        "name": FRONTEND_CONTAINER_NAME,
        "image": FRONTEND_IMAGE,
        "cpu": cpu,
        "memory": memory,
        "essential": True,
        "portMappings": [{
            "containerPort": container_port,
            "hostPort": container_port,
            "protocol": "tcp",
        }],
        "environment": [
            {"name": BACKEND_URL_ENV_VAR, "value": backend_url},
        ],
        "logConfiguration": {
            "logDriver": "awslogs",
            "options": {
                "awslogs-group": log_group_name,
                "awslogs-region": region,
                "awslogs-stream-prefix": FRONTEND_CONTAINER_NAME,
            },
        },
    }]


class FargateFrontendComponent(pulumi.ComponentResource):
    """
    Open WebUI on ECS Fargate, wired to the Ollama backend.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        target_group_arn: pulumi.Input[str],
        backend_url: pulumi.Input[str],
        aws_region: str,
        listener: pulumi.Resource | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("ollama:compute:FargateFrontend", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.cluster = aws.ecs.Cluster(
            f"{name}-cluster",
            tags=create_tags(environment, f"{name}-cluster"),
            opts=child_opts,
        )

        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=f"/ecs/{name}",
            retention_in_days=LOG_RETENTION_DAYS,
            tags=create_tags(environment, f"{name}-logs"),
            opts=child_opts,
        )

        self.execution_role = aws.iam.Role(
            f"{name}-execution-role",
            assume_role_policy=json.dumps({
                "Version": "2012-10-17",
                "Statement": [{
                    "Effect": "Allow",
                    "Principal": {"Service": "ecs-tasks.amazonaws.com"},
                    "Action": "sts:AssumeRole",
                }],
            }),
            tags=create_tags(environment, f"{name}-execution-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-execution-policy",
            role=self.execution_role.name,
            policy_arn=TASK_EXECUTION_POLICY_ARN,
            opts=child_opts,
        )

        container_definitions = pulumi.Output.all(
            backend_url, self.log_group.name
        ).apply(
            lambda args: json.dumps(build_container_definitions(
                backend_url=args[0],
                container_port=config.container_port,
                cpu=config.cpu,
                memory=config.memory,
                log_group_name=args[1],
                region=aws_region,
            ))
        )

        self.task_definition = aws.ecs.TaskDefinition(
            f"{name}-task",
            family=name,
            network_mode="awsvpc",
            requires_compatibilities=["FARGATE"],
            cpu=str(config.cpu),
            memory=str(config.memory),
            execution_role_arn=self.execution_role.arn,
            container_definitions=container_definitions,
            tags=create_tags(environment, f"{name}-task"),
            opts=child_opts,
        )

        # Target group must be attached to a listener before ECS registers tasks
        service_opts = pulumi.ResourceOptions(
            parent=self,
            depends_on=[listener] if listener else None,
        )

        self.service = aws.ecs.Service(
            f"{name}-service",
            cluster=self.cluster.arn,
            task_definition=self.task_definition.arn,
            desired_count=1,
            launch_type="FARGATE",
            network_configuration=aws.ecs.ServiceNetworkConfigurationArgs(
                subnets=subnet_ids,
                security_groups=[security_group_id],
                assign_public_ip=True,
            ),
            load_balancers=[
                aws.ecs.ServiceLoadBalancerArgs(
                    target_group_arn=target_group_arn,
                    container_name=FRONTEND_CONTAINER_NAME,
                    container_port=config.container_port,
                ),
            ],
            health_check_grace_period_seconds=120,
            tags=create_tags(environment, f"{name}-service"),
            opts=service_opts,
        )

        self.register_outputs({
            "cluster_arn": self.cluster.arn,
            "service_name": self.service.name,
            "task_definition_arn": self.task_definition.arn,
        })

    def get_outputs(self) -> FargateOutputs:
        """Get Fargate frontend output values."""
        return FargateOutputs(
            cluster_arn=self.cluster.arn,
            service_name=self.service.name,
            task_definition_arn=self.task_definition.arn,
        )
