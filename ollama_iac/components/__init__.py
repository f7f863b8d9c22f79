"""
Pulumi component resources for the Ollama stack.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, security groups
- compute: EC2 backend, ALB, Fargate frontend
- security: EC2 key pair resolution
"""
