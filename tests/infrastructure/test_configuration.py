"""
Tests for stack configuration loading.

Validates:
1. Defaults apply whenever a config key is absent
2. Configured values override defaults
3. Invalid values are rejected with ConfigurationError
4. Subnet blocks are carved from the VPC CIDR
"""

import pytest
from pydantic import ValidationError

from ollama_iac.configs.base import StackConfig
from ollama_iac.configs.environment import get_config
from ollama_iac.exceptions import ConfigurationError


class TestDefaults:
    """Absent keys fall back to defaults."""

    def test_empty_config_uses_defaults(self, fake_config):
        config = get_config(fake_config())

        assert config.instance_type == "g4dn.xlarge"
        assert config.vpc_cidr == "10.9.0.0/16"
        assert config.container_port == 8080
        assert config.cpu == 256
        assert config.memory == 512
        assert config.llm == "llama2:latest"
        assert config.ollama_port == 11434
        assert config.ssh_cidr == "0.0.0.0/0"
        assert config.key_name is None
        assert config.public_key is None

    def test_environment_defaults_to_stack_name(self, fake_config):
        config = get_config(fake_config())

        assert config.environment == "dev"

    def test_partial_config_keeps_other_defaults(self, fake_config):
        config = get_config(fake_config({"llm": "mistral:7b", "cpu": 512, "memory": 2048}))

        assert config.llm == "mistral:7b"
        assert config.cpu == 512
        assert config.memory == 2048
        assert config.instance_type == "g4dn.xlarge"
        assert config.container_port == 8080

    def test_empty_strings_fall_back_to_defaults(self, fake_config):
        config = get_config(fake_config({"instanceType": "", "keyName": ""}))

        assert config.instance_type == "g4dn.xlarge"
        assert config.key_name is None


class TestOverrides:
    """Configured values replace defaults."""

    def test_all_keys_are_read(self, fake_config):
        config = get_config(fake_config({
            "environment": "prod",
            "instanceType": "g5.xlarge",
            "vpcNetworkCidr": "10.20.0.0/16",
            "containerPort": 3000,
            "cpu": 1024,
            "memory": 4096,
            "llm": "llama3:8b",
            "ollamaPort": 11500,
            "sshCidr": "198.51.100.0/24",
            "keyName": "ops",
            "publicKey": "ssh-ed25519 AAAA",
        }))

        assert config == StackConfig(
            environment="prod",
            instance_type="g5.xlarge",
            vpc_cidr="10.20.0.0/16",
            container_port=3000,
            cpu=1024,
            memory=4096,
            llm="llama3:8b",
            ollama_port=11500,
            ssh_cidr="198.51.100.0/24",
            key_name="ops",
            public_key="ssh-ed25519 AAAA",
        )

    def test_config_is_frozen(self, fake_config):
        config = get_config(fake_config())

        with pytest.raises(ValidationError):
            config.llm = "other"


class TestValidation:
    """Invalid values raise ConfigurationError."""

    def test_invalid_cidr(self, fake_config):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(fake_config({"vpcNetworkCidr": "not-a-cidr"}))

        assert exc_info.value.details["field"] == "vpc_cidr"

    def test_vpc_too_small_for_subnets(self, fake_config):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(fake_config({"vpcNetworkCidr": "10.9.0.0/23"}))

        assert "/22" in str(exc_info.value)

    def test_invalid_fargate_cpu(self, fake_config):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(fake_config({"cpu": 300}))

        assert "cpu must be one of" in str(exc_info.value)

    def test_memory_not_valid_for_cpu(self, fake_config):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(fake_config({"cpu": 256, "memory": 4096}))

        assert "memory 4096 is not valid for cpu 256" in str(exc_info.value)

    def test_port_out_of_range(self, fake_config):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(fake_config({"containerPort": 70000}))

        assert exc_info.value.details["field"] == "container_port"

    @pytest.mark.parametrize("llm", ["llama2; rm -rf /", "$(whoami)", "model name"])
    def test_model_name_must_be_shell_safe(self, fake_config, llm):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(fake_config({"llm": llm}))

        assert exc_info.value.details["field"] == "llm"

    def test_model_name_with_namespace_and_tag(self, fake_config):
        config = get_config(fake_config({"llm": "library/qwen2.5-coder:7b-instruct"}))

        assert config.llm == "library/qwen2.5-coder:7b-instruct"


class TestDerivedValues:
    """Values computed from configuration."""

    def test_default_subnets(self, fake_config):
        config = get_config(fake_config())

        assert config.subnet_cidrs == {
            "public": "10.9.1.0/24",
            "public_b": "10.9.2.0/24",
        }

    def test_subnets_follow_vpc_cidr(self, fake_config):
        config = get_config(fake_config({"vpcNetworkCidr": "172.16.0.0/22"}))

        assert config.subnet_cidrs == {
            "public": "172.16.1.0/24",
            "public_b": "172.16.2.0/24",
        }

    def test_ssh_open_to_world(self, fake_config):
        assert get_config(fake_config()).ssh_open_to_world is True
        assert get_config(fake_config({"sshCidr": "198.51.100.7/32"})).ssh_open_to_world is False
