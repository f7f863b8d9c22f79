"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC: Isolated network container, DNS hostnames enabled so the backend
   gets a public DNS name.
2. Internet Gateway (IGW): The path to and from the internet.
3. Subnets (both public, auto-assign public IPs):
   - Public A (x.x.1.0/24): Ollama backend EC2, ALB, Fargate tasks.
   - Public B (x.x.2.0/24): Second AZ, required by the internet-facing ALB.
4. Route Table: 0.0.0.0/0 -> IGW, associated with both subnets.

Subnet blocks are carved from the configured VPC CIDR, so changing
vpcNetworkCidr moves the subnets with it.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from ollama_iac.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    subnet_id: pulumi.Output[str]
    subnet_id_b: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with two public subnets.

    The backend instance lives in the first subnet. Frontend resources span
    both so the load balancer has two availability zones.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        cidr_block: str,
        subnet_cidrs: dict[str, str],
        availability_zones: list[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("ollama:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=cidr_block,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnet = aws.ec2.Subnet(
            f"{name}-public-subnet",
            vpc_id=self.vpc.id,
            cidr_block=subnet_cidrs["public"],
            availability_zone=availability_zones[0],
            map_public_ip_on_launch=True,
            tags=create_tags(environment, f"{name}-public-subnet"),
            opts=child_opts,
        )

        self.public_subnet_b = aws.ec2.Subnet(
            f"{name}-public-subnet-b",
            vpc_id=self.vpc.id,
            cidr_block=subnet_cidrs["public_b"],
            availability_zone=availability_zones[1],
            map_public_ip_on_launch=True,
            tags=create_tags(environment, f"{name}-public-subnet-b"),
            opts=child_opts,
        )

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "subnet_id": self.public_subnet.id,
            "subnet_id_b": self.public_subnet_b.id,
        })

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the public route table and associate both subnets."""
        self.public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        for suffix, subnet in [
            ("", self.public_subnet),
            ("-b", self.public_subnet_b),
        ]:
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc{suffix}",
                subnet_id=subnet.id,
                route_table_id=self.public_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            subnet_id=self.public_subnet.id,
            subnet_id_b=self.public_subnet_b.id,
        )
