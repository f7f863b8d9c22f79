"""
Test suite for ollama_iac syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. Component classes inherit from pulumi.ComponentResource
3. Output dataclasses are properly defined
4. Entry point and modules are documented
"""

import ast
from dataclasses import is_dataclass
from pathlib import Path

import pulumi

MAIN_FILE = Path(__file__).parent.parent.parent / "ollama_iac" / "__main__.py"


class TestIacSyntaxValidation:
    """Validate Python syntax in all ollama_iac modules."""

    def test_all_iac_files_have_valid_syntax(self, python_files_in_iac):
        errors = []

        for py_file in python_files_in_iac:
            try:
                ast.parse(py_file.read_text())
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)

    def test_every_module_has_docstring(self, python_files_in_iac):
        missing = [
            str(py_file)
            for py_file in python_files_in_iac
            if not ast.get_docstring(ast.parse(py_file.read_text()))
        ]

        assert not missing, f"Modules without docstring: {missing}"


class TestIacComponentStructure:
    """Validate component class structure and inheritance."""

    def test_components_are_component_resources(self):
        from ollama_iac.components.networking.vpc import VpcComponent
        from ollama_iac.components.networking.security_groups import SecurityGroupsComponent
        from ollama_iac.components.compute.ec2_backend import Ec2BackendComponent
        from ollama_iac.components.compute.alb import AlbComponent
        from ollama_iac.components.compute.fargate_frontend import FargateFrontendComponent

        for cls in [
            VpcComponent,
            SecurityGroupsComponent,
            Ec2BackendComponent,
            AlbComponent,
            FargateFrontendComponent,
        ]:
            assert issubclass(cls, pulumi.ComponentResource)
            assert hasattr(cls, "get_outputs")

    def test_output_dataclasses(self):
        from ollama_iac.components.networking.vpc import VpcOutputs
        from ollama_iac.components.networking.security_groups import SecurityGroupOutputs
        from ollama_iac.components.compute.ec2_backend import Ec2Outputs
        from ollama_iac.components.compute.alb import AlbOutputs
        from ollama_iac.components.compute.fargate_frontend import FargateOutputs
        from ollama_iac.components.security.key_pair import KeyMaterial

        for cls in [VpcOutputs, SecurityGroupOutputs, Ec2Outputs, AlbOutputs, FargateOutputs, KeyMaterial]:
            assert is_dataclass(cls)

    def test_ec2_outputs_expose_public_address(self):
        from ollama_iac.components.compute.ec2_backend import Ec2Outputs

        fields = {f.name for f in Ec2Outputs.__dataclass_fields__.values()}
        assert {"public_ip", "public_dns", "ollama_url"}.issubset(fields)


class TestEntryPoint:
    """The Pulumi entry point runs main() on import, so it is checked via AST."""

    def test_main_function_defined_and_documented(self):
        tree = ast.parse(MAIN_FILE.read_text())

        main_func = next(
            (node for node in ast.walk(tree) if isinstance(node, ast.FunctionDef) and node.name == "main"),
            None,
        )

        assert main_func is not None, "main() function not found in __main__.py"
        assert ast.get_docstring(main_func) is not None

    def test_main_is_invoked(self):
        tree = ast.parse(MAIN_FILE.read_text())

        calls = [
            node.value.func.id
            for node in tree.body
            if isinstance(node, ast.Expr)
            and isinstance(node.value, ast.Call)
            and isinstance(node.value.func, ast.Name)
        ]
        assert "main" in calls
