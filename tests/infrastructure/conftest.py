"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pulumi
import pytest

from ollama_iac.configs.constants import GPU_AMI_NAME

MOCK_PUBLIC_IP = "203.0.113.10"
MOCK_PUBLIC_DNS = "ec2-203-0-113-10.us-west-2.compute.amazonaws.com"
MOCK_ZONES = ["us-west-2a", "us-west-2b", "us-west-2c"]
MOCK_REGION = "us-west-2"


class StackMocks(pulumi.runtime.Mocks):
    """Echo resource inputs back as state and record every registration."""

    public_ip = MOCK_PUBLIC_IP
    public_dns = MOCK_PUBLIC_DNS
    zones = MOCK_ZONES
    region = MOCK_REGION

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []
        self.calls: list[pulumi.runtime.MockCallArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)

        if args.typ == "aws:ec2/instance:Instance":
            outputs["publicIp"] = MOCK_PUBLIC_IP
            outputs["publicDns"] = MOCK_PUBLIC_DNS
        elif args.typ == "aws:ec2/keyPair:KeyPair":
            outputs.setdefault("keyName", args.name)
        elif args.typ == "aws:lb/loadBalancer:LoadBalancer":
            outputs["dnsName"] = f"{args.name}.us-west-2.elb.amazonaws.com"
        elif args.typ == "aws:ecs/service:Service":
            outputs.setdefault("name", args.name)

        outputs.setdefault("arn", f"arn:aws:mock:us-west-2:123456789012:{args.name}")
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        self.calls.append(args)
        if args.token == "aws:ec2/getAmi:getAmi":
            return {"id": "ami-0123456789abcdef0", "name": GPU_AMI_NAME}
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {"id": "us-west-2", "names": MOCK_ZONES}
        if args.token == "aws:index/getRegion:getRegion":
            return {"id": self.region, "name": self.region, "region": self.region}
        return {}

    def of_type(self, typ: str) -> list[pulumi.runtime.MockResourceArgs]:
        """Get recorded registrations of one resource type."""
        return [r for r in self.resources if r.typ == typ]


class FakeConfig:
    """Stand-in for pulumi.Config backed by a plain dict."""

    def __init__(self, values: dict | None = None) -> None:
        self.values = values or {}

    def get(self, key: str) -> str | None:
        value = self.values.get(key)
        return None if value is None else str(value)

    def get_int(self, key: str) -> int | None:
        value = self.values.get(key)
        return None if value is None else int(value)

    def require_secret(self, key: str) -> pulumi.Output[str]:
        return pulumi.Output.secret(self.values[key])


@pytest.fixture(autouse=True)
def pulumi_mocks() -> StackMocks:
    """Install fresh Pulumi mocks for every test."""
    mocks = StackMocks()
    pulumi.runtime.set_mocks(mocks, project="ollama-stack", stack="dev", preview=False)
    return mocks


@pytest.fixture
def fake_config():
    """Factory for FakeConfig instances."""
    return FakeConfig


@pytest.fixture
def iac_project_root() -> Path:
    """Return the ollama_iac package directory."""
    return Path(__file__).parent.parent.parent / "ollama_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root) -> list[Path]:
    """Return all Python files in the ollama_iac package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]
