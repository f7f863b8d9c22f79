"""
Pulumi program entry point for the Ollama stack.

Loads configuration, declares the stack and publishes its outputs:
- ollamaServerPublicIp: Backend public IP
- ollamaServerPublicDns: Backend public DNS name
- ollamaFrontendLB: Open WebUI URL behind the load balancer
"""

import pulumi

from ollama_iac.configs.constants import OUTPUTS_ENV_FILE
from ollama_iac.configs.environment import get_config
from ollama_iac.components.security.key_pair import load_private_key
from ollama_iac.stack import deploy
from ollama_iac.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the Ollama backend and Open WebUI frontend."""
    pulumi_config = pulumi.Config()
    config = get_config(pulumi_config)
    private_key = load_private_key(pulumi_config)

    outputs = deploy(config, private_key)

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, OUTPUTS_ENV_FILE)

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ Ollama stack declared for {config.environment} (model {config.llm})")


# Execute
main()
