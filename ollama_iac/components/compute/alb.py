"""
Application Load Balancer Component for the Open WebUI frontend.

The 3-Resource Chain:
1. Load Balancer: Internet-facing, spans both public subnets. Has the DNS
   name users open in a browser.
2. Listener: HTTP on port 80, forwards everything to the target group.
3. Target Group: IP targets on the container port. Fargate tasks use awsvpc
   networking, so ECS registers task IPs rather than instances.

Open WebUI keeps long-lived streaming responses open while a model answers,
so the idle timeout is raised above the 60s default.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from ollama_iac.configs.constants import FRONTEND_HEALTH_CHECK_PATH, PORTS
from ollama_iac.utils.tags import create_tags


@dataclass
class AlbOutputs:
    """Output values from ALB component."""
    alb_arn: pulumi.Output[str]
    alb_dns_name: pulumi.Output[str]
    listener_arn: pulumi.Output[str]
    target_group_arn: pulumi.Output[str]


class AlbComponent(pulumi.ComponentResource):
    """
    Internet-facing Application Load Balancer for the Fargate frontend.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        target_port: int,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("ollama:compute:Alb", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.alb = aws.lb.LoadBalancer(
            f"{name}-alb",
            internal=False,
            load_balancer_type="application",
            security_groups=[security_group_id],
            subnets=subnet_ids,
            idle_timeout=300,
            tags=create_tags(environment, f"{name}-alb"),
            opts=child_opts,
        )

        self.target_group = aws.lb.TargetGroup(
            f"{name}-tg",
            port=target_port,
            protocol="HTTP",
            vpc_id=vpc_id,
            target_type="ip",
            health_check=aws.lb.TargetGroupHealthCheckArgs(
                enabled=True,
                path=FRONTEND_HEALTH_CHECK_PATH,
                port="traffic-port",
                protocol="HTTP",
                healthy_threshold=2,
                unhealthy_threshold=3,
                timeout=5,
                interval=30,
                matcher="200",
            ),
            tags=create_tags(environment, f"{name}-tg"),
            opts=child_opts,
        )

        self.listener = aws.lb.Listener(
            f"{name}-listener",
            load_balancer_arn=self.alb.arn,
            port=PORTS["http"],
            protocol="HTTP",
            default_actions=[
                aws.lb.ListenerDefaultActionArgs(
                    type="forward",
                    target_group_arn=self.target_group.arn,
                ),
            ],
            tags=create_tags(environment, f"{name}-listener"),
            opts=child_opts,
        )

        self.register_outputs({
            "alb_arn": self.alb.arn,
            "alb_dns_name": self.alb.dns_name,
            "listener_arn": self.listener.arn,
            "target_group_arn": self.target_group.arn,
        })

    def get_outputs(self) -> AlbOutputs:
        """Get ALB output values."""
        return AlbOutputs(
            alb_arn=self.alb.arn,
            alb_dns_name=self.alb.dns_name,
            listener_arn=self.listener.arn,
            target_group_arn=self.target_group.arn,
        )
