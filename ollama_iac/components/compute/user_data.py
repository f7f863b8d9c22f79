"""
Bootstrap script for the Ollama backend instance.

Runs ONCE at first boot: installs Ollama, binds it to all interfaces on the
configured port via a systemd drop-in, restarts it and pulls the model.
There is no error recovery; a failed bootstrap shows up as an unreachable
backend.
"""

OLLAMA_INSTALL_URL = "https://ollama.com/install.sh"
OLLAMA_DROP_IN_DIR = "/etc/systemd/system/ollama.service.d"


def render_user_data(llm: str, ollama_port: int) -> str:
    """
    Render the cloud-init user data for the backend.

    Args:
        llm: Model to pull, placed in the script verbatim
        ollama_port: Port the Ollama server binds to

    Returns:
        Bash script
    """
    return f"""#!/bin/bash
curl -fsSL {OLLAMA_INSTALL_URL} | sh

mkdir -p {OLLAMA_DROP_IN_DIR}
cat > {OLLAMA_DROP_IN_DIR}/environment.conf << 'EOF'
[Service]
Environment="OLLAMA_HOST=0.0.0.0:{ollama_port}"
EOF

systemctl daemon-reload
systemctl restart ollama

sleep 5
ollama pull {llm}
"""
