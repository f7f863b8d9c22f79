"""
Pulumi infrastructure-as-code for the Ollama stack.

This package defines AWS infrastructure including:
- VPC with public subnets and an internet gateway
- GPU EC2 instance running the Ollama inference server
- ECS Fargate service running Open WebUI behind a public ALB
"""
