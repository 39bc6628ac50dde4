import importlib
from pathlib import Path

INFRA_DIR = Path(__file__).resolve().parent.parent / "infra"

CORE_MODULES = [
    "azure_openai_recipe.config.settings",
    "azure_openai_recipe.definitions.names",
    "azure_openai_recipe.definitions.enums",
    "azure_openai_recipe.logger.logger",
    "azure_openai_recipe.modules.naming",
    "azure_openai_recipe.modules.openai",
    "azure_openai_recipe.recipe",
]


def test_core_package_layout_modules_importable() -> None:
    for module_name in CORE_MODULES:
        module = importlib.import_module(module_name)
        assert module is not None


def test_pulumi_project_declares_virtualenv() -> None:
    project = (INFRA_DIR / "Pulumi.yaml").read_text()

    assert "name: python" in project
    assert "virtualenv: venv" in project


def test_pulumi_requirements_install_recipe_package() -> None:
    requirements = (INFRA_DIR / "requirements.txt").read_text().splitlines()

    assert "-e .." in requirements
