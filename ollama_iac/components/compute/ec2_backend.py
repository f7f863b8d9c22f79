"""
EC2 Backend Component for the Ollama inference server.

Key Components:
1. AMI: Deep Learning Base GPU AMI (Ubuntu 20.04) with the NVIDIA driver
   preinstalled, looked up by exact name and owner.
2. User Data: Bootstrap script that installs Ollama and pulls the model.
   Changing it replaces the instance so the new model is pulled.
3. Placement:
   - subnet_id: Public subnet, public IP assigned at launch.
   - security_group_id: Allows the Ollama port and SSH.
   - key_name: Key pair for SSH access.
4. IMDSv2 (http_tokens="required"): Secures the metadata service.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.constants import GPU_AMI_NAME, GPU_AMI_OWNER
from ollama_iac.components.compute.user_data import render_user_data
from ollama_iac.utils.tags import create_tags


@dataclass
class Ec2Outputs:
    """Output values from EC2 component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    public_dns: pulumi.Output[str]
    ollama_url: pulumi.Output[str]


def backend_url(public_ip: pulumi.Input[str], port: int) -> pulumi.Output[str]:
    """Build the Ollama base URL from the backend address and port."""
    return pulumi.Output.concat("http://", public_ip, ":", str(port))


class Ec2BackendComponent(pulumi.ComponentResource):
    """
    GPU EC2 instance running the Ollama server.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        key_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("ollama:compute:Ec2Backend", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=[GPU_AMI_OWNER],
            filters=[
                aws.ec2.GetAmiFilterArgs(
                    name="name",
                    values=[GPU_AMI_NAME],
                ),
            ],
        )

        self.user_data = render_user_data(config.llm, config.ollama_port)

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=ami.id,
            instance_type=config.instance_type,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            key_name=key_name,
            user_data=self.user_data,
            user_data_replace_on_change=True,
            metadata_options=aws.ec2.InstanceMetadataOptionsArgs(
                http_tokens="required",  # IMDSv2
                http_endpoint="enabled",
            ),
            tags=create_tags(environment, f"{name}-instance"),
            opts=child_opts,
        )

        self.ollama_url = backend_url(self.instance.public_ip, config.ollama_port)

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "public_dns": self.instance.public_dns,
            "ollama_url": self.ollama_url,
        })

    def get_outputs(self) -> Ec2Outputs:
        """Get EC2 output values."""
        return Ec2Outputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            public_dns=self.instance.public_dns,
            ollama_url=self.ollama_url,
        )
