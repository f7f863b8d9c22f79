"""
Ollama Stack Architecture Diagram.

Renders the deployed topology (VPC, backend, frontend, traffic flows) with
labels taken from a StackConfig, so CIDRs, ports and the model match what
the stack declares.

Dependencies:
    pip install "ollama-stack[diagram]"   (also needs graphviz installed)

Usage:
    python -m ollama_iac.architecture_diagram
    # Outputs: ollama_architecture.png
"""

from diagrams import Cluster, Diagram, Edge
from diagrams.aws.compute import EC2, ECS, Fargate
from diagrams.aws.general import Users
from diagrams.aws.network import ALB, InternetGateway, PublicSubnet
from diagrams.aws.security import IAMRole

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.constants import FRONTEND_IMAGE, PORTS

graph_attr = {
    "fontsize": "14",
    "bgcolor": "white",
    "pad": "0.5",
    "splines": "ortho",
    "nodesep": "0.8",
    "ranksep": "1.2",
}

node_attr = {
    "fontsize": "11",
    "height": "1.2",
    "width": "1.5",
}

edge_attr = {
    "fontsize": "9",
}


def render_diagram(config: StackConfig, filename: str = "ollama_architecture") -> str:
    """
    Render the architecture diagram as PNG.

    Args:
        config: Stack configuration used for labels
        filename: Output path without extension

    Returns:
        Path of the written PNG
    """
    subnets = config.subnet_cidrs

    with Diagram(
        f"Ollama Stack ({config.environment})\nGPU Backend + Open WebUI",
        filename=filename,
        show=False,
        direction="TB",
        graph_attr=graph_attr,
        node_attr=node_attr,
        edge_attr=edge_attr,
    ):
        users = Users("Users\n(Internet)")

        with Cluster(f"VPC: {config.vpc_cidr}"):
            igw = InternetGateway("Internet Gateway\n0.0.0.0/0 route")

            with Cluster(f"Public Subnet A: {subnets['public']}"):
                PublicSubnet(f"Public Subnet\n{subnets['public']}")
                backend = EC2(
                    f"EC2 {config.instance_type}\nOllama :{config.ollama_port}\n"
                    f"Model: {config.llm}\nPublic IP"
                )

            with Cluster(f"Public Subnet B: {subnets['public_b']}"):
                PublicSubnet(f"Public Subnet\n{subnets['public_b']}")

            alb = ALB(f"Application Load Balancer\nHTTP :{PORTS['http']}\nInternet-facing")

            with Cluster("ECS Cluster"):
                ECS("ECS Cluster")
                frontend = Fargate(
                    f"Fargate Task\n{FRONTEND_IMAGE}\n"
                    f"{config.cpu} CPU / {config.memory} MiB\n:{config.container_port}"
                )

        execution_role = IAMRole("Task Execution Role\nImage Pull, Logs")

        users >> Edge(label="HTTP", color="orange", style="bold") >> igw
        igw >> Edge(label="Listener :80", color="orange") >> alb
        alb >> Edge(label=f"Target Group :{config.container_port}", color="green", style="bold") >> frontend
        frontend >> Edge(
            label=f"OLLAMA_BASE_URL\nhttp://<public ip>:{config.ollama_port}",
            color="purple",
            style="bold",
        ) >> backend
        users >> Edge(label=f"SSH :{PORTS['ssh']}\n{config.ssh_cidr}", color="gray", style="dashed") >> backend
        execution_role >> Edge(label="Attached To", color="gray", style="dotted") >> frontend

    return f"{filename}.png"


if __name__ == "__main__":
    path = render_diagram(StackConfig(environment="dev"))
    print(f"✅ Diagram generated: {path}")
