from dataclasses import dataclass
from typing import Any, Dict, Optional

import pulumi
from pulumi_azure_native import cognitiveservices

import azure_openai_recipe.definitions.names as n
from azure_openai_recipe.config.settings import RecipeSettings
from azure_openai_recipe.logger.logger import Logger
from azure_openai_recipe.modules.naming import ResolvedNames, resolve_names
from azure_openai_recipe.modules.openai import (
    create_openai_account, create_content_filter_policy, deploy_openai_model, get_openai_api_key
)

logger = Logger.get_logger(__name__)


@dataclass
class ProvisionedOpenAI:
    names: ResolvedNames
    account: cognitiveservices.Account
    deployment: cognitiveservices.Deployment
    content_filter: Optional[cognitiveservices.RaiPolicy]
    result: pulumi.Output[Dict[str, Any]]


def provision(settings: RecipeSettings) -> ProvisionedOpenAI:
    """
    Register the OpenAI account, the optional PII content filter and the model deployment.

    The returned result follows the Radius recipe output contract: the ids of the
    provisioned resources, the connection values and the api key as a secret.
    The whole result is marked secret.
    """
    names = resolve_names(settings)

    openai_account = create_openai_account(
        names.account_name,
        settings.resource_group_name,
        settings.location,
        sku_name=settings.sku_name,
        public_network_access=settings.public_network_access,
        tags=names.tags
    )

    content_filter = None
    if settings.enable_pii_filter:
        content_filter = create_content_filter_policy(
            names.rai_policy_name,
            settings.resource_group_name,
            openai_account.name
        )

    openai_model = deploy_openai_model(
        names.deployment_name,
        settings.resource_group_name,
        openai_account.name,
        model=names.model,
        sku_name=settings.deployment_sku_name,
        capacity=settings.capacity,
        rai_policy_name=names.rai_policy_name,
        depends_on=[content_filter] if content_filter is not None else None
    )

    resource_ids = [openai_account.id]
    if content_filter is not None:
        resource_ids.append(content_filter.id)
    resource_ids.append(openai_model.id)

    api_key = get_openai_api_key(settings.resource_group_name, openai_account.name)

    values = {
        n.API_VERSION: settings.api_version,
        n.ENDPOINT: openai_account.properties.endpoint,
        n.MODEL: names.model.name,
        n.DEPLOYMENT: openai_model.name,
        n.LOCATION: settings.location,
        n.CAPACITY: settings.capacity,
        n.SKU_NAME: settings.sku_name,
        n.PUBLIC_NETWORK_ACCESS: settings.public_network_access,
        n.PII_FILTER_ENABLED: settings.enable_pii_filter,
    }

    result = pulumi.Output.secret(pulumi.Output.from_input({
        n.RESOURCES: resource_ids,
        n.VALUES: values,
        n.SECRETS: {
            n.API_KEY: api_key,
        },
    }))

    logger.info(f"Registered {len(resource_ids)} resources for deployment '{names.deployment_name}'")
    return ProvisionedOpenAI(
        names=names,
        account=openai_account,
        deployment=openai_model,
        content_filter=content_filter,
        result=result
    )
