"""Shared test fixtures."""

from typing import Any, Dict, List, Optional

import pulumi
import pytest

from azure_openai_recipe.config.settings import RecipeSettings

ACCOUNT_TYPE = "azure-native:cognitiveservices:Account"
DEPLOYMENT_TYPE = "azure-native:cognitiveservices:Deployment"
RAI_POLICY_TYPE = "azure-native:cognitiveservices:RaiPolicy"
LIST_ACCOUNT_KEYS = "azure-native:cognitiveservices:listAccountKeys"

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000000"
PRIMARY_KEY = "primary-key"


class RecipeMocks(pulumi.runtime.Mocks):
    """Records registered resources and fakes the outputs Azure would return."""

    def __init__(self) -> None:
        super().__init__()
        self.resources: List[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        rg = args.inputs.get("resourceGroupName")
        account_id = (f"/subscriptions/{SUBSCRIPTION_ID}/resourceGroups/{rg}"
                      f"/providers/Microsoft.CognitiveServices/accounts/{args.inputs.get('accountName')}")

        if args.typ == ACCOUNT_TYPE:
            account_name = args.inputs["accountName"]
            outputs["name"] = account_name
            outputs["properties"] = {
                **args.inputs.get("properties", {}),
                "endpoint": f"https://{account_name}.openai.azure.com/",
            }
            return [account_id, outputs]
        if args.typ == DEPLOYMENT_TYPE:
            outputs["name"] = args.inputs["deploymentName"]
            return [f"{account_id}/deployments/{outputs['name']}", outputs]
        if args.typ == RAI_POLICY_TYPE:
            outputs["name"] = args.inputs["raiPolicyName"]
            return [f"{account_id}/raiPolicies/{outputs['name']}", outputs]
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == LIST_ACCOUNT_KEYS:
            return {"key1": PRIMARY_KEY, "key2": "secondary-key"}
        return {}

    def of_type(self, typ: str) -> List[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.typ == typ]

    def find(self, typ: str) -> Optional[pulumi.runtime.MockResourceArgs]:
        matches = self.of_type(typ)
        return matches[0] if matches else None


@pytest.fixture
def mocks() -> RecipeMocks:
    """Install fresh Pulumi mocks so each test starts with an empty resource list."""
    recipe_mocks = RecipeMocks()
    pulumi.runtime.set_mocks(recipe_mocks, preview=False)
    return recipe_mocks


def make_context(resource_name: str = "chat-model", model: Optional[str] = "gpt-4",
                 application: Optional[str] = "chat-app") -> Dict[str, Any]:
    properties = {"model": model} if model is not None else {}
    context = {
        "resource": {
            "name": resource_name,
            "type": "Applications.Core/extenders",
            "properties": properties,
        },
        "environment": {"name": "dev"},
    }
    if application is not None:
        context["application"] = {"name": application}
    return context


@pytest.fixture
def settings() -> RecipeSettings:
    return RecipeSettings(
        location="swedencentral",
        resource_group_name="rg-test",
        context=make_context(),
        tags={"team": "platform"},
    )


@pytest.fixture
def pii_settings(settings: RecipeSettings) -> RecipeSettings:
    return settings.model_copy(update={"enable_pii_filter": True})
