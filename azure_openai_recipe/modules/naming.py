import hashlib
from typing import Dict, Mapping

import pulumi
from pydantic import BaseModel, ConfigDict

import azure_openai_recipe.definitions.names as n
from azure_openai_recipe.config.settings import RecipeContext, RecipeSettings
from azure_openai_recipe.logger.logger import Logger

logger = Logger.get_logger(__name__)


class ModelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    format: str
    name: str
    version: str


class ResolvedNames(BaseModel):
    account_name: str
    deployment_name: str
    rai_policy_name: str
    model: ModelConfig
    tags: Dict[str, str]


# Keyed by the model identifier a Radius resource asks for
MODEL_CONFIGS: Dict[str, ModelConfig] = {
    "gpt-35-turbo": ModelConfig(format="OpenAI", name="gpt-35-turbo", version="0125"),
    "gpt-3.5-turbo": ModelConfig(format="OpenAI", name="gpt-35-turbo", version="0125"),
    "gpt-35-turbo-16k": ModelConfig(format="OpenAI", name="gpt-35-turbo-16k", version="0613"),
    "gpt-4": ModelConfig(format="OpenAI", name="gpt-4", version="turbo-2024-04-09"),
    "gpt-4-32k": ModelConfig(format="OpenAI", name="gpt-4-32k", version="0613"),
    "gpt-4o": ModelConfig(format="OpenAI", name="gpt-4o", version="2024-08-06"),
    "gpt-4o-mini": ModelConfig(format="OpenAI", name="gpt-4o-mini", version="2024-07-18"),
    "text-embedding-ada-002": ModelConfig(format="OpenAI", name="text-embedding-ada-002", version="2"),
    "text-embedding-3-small": ModelConfig(format="OpenAI", name="text-embedding-3-small", version="1"),
    "text-embedding-3-large": ModelConfig(format="OpenAI", name="text-embedding-3-large", version="1"),
}


def resolve_account_name(resource_group_name: str) -> str:
    """
    Name of the OpenAI account shared by every deployment in a resource group.

    The suffix is the first 8 hex characters of the md5 of the resource group name,
    which keeps the name stable across applies and valid as a custom subdomain.
    """
    digest = hashlib.md5(resource_group_name.encode("utf-8")).hexdigest()
    return f"{n.ACCOUNT_NAME_PREFIX}{digest[:n.ACCOUNT_NAME_HASH_LENGTH]}"


def resolve_model(model_identifier: str) -> ModelConfig:
    model = MODEL_CONFIGS.get(model_identifier)
    if model is None:
        message = (f"Model '{model_identifier}' is not in the model table, "
                   f"deploying it with version {n.DEFAULT_MODEL_VERSION}")
        logger.warning(message)
        pulumi.log.warn(message)
        return ModelConfig(format=n.DEFAULT_MODEL_FORMAT, name=model_identifier, version=n.DEFAULT_MODEL_VERSION)
    return model


def merge_tags(user_tags: Mapping[str, str], context: RecipeContext) -> Dict[str, str]:
    # Identity tags are applied last so they win over user tags with the same key
    application = context.application.name if context.application else ""
    return {
        **user_tags,
        n.TAG_ENVIRONMENT: context.environment.name,
        n.TAG_APPLICATION: application,
        n.TAG_RESOURCE: context.resource.name,
        n.TAG_RESOURCE_TYPE: context.resource.type,
        n.TAG_MANAGED_BY: n.MANAGED_BY_RADIUS,
    }


def resolve_rai_policy_name(deployment_name: str, enable_pii_filter: bool) -> str:
    if enable_pii_filter:
        return f"{deployment_name}{n.PII_FILTER_SUFFIX}"
    return n.DEFAULT_RAI_POLICY_NAME


def resolve_names(settings: RecipeSettings) -> ResolvedNames:
    deployment_name = settings.context.resource.name
    resolved = ResolvedNames(
        account_name=resolve_account_name(settings.resource_group_name),
        deployment_name=deployment_name,
        rai_policy_name=resolve_rai_policy_name(deployment_name, settings.enable_pii_filter),
        model=resolve_model(settings.context.resource.model),
        tags=merge_tags(settings.tags, settings.context),
    )
    pulumi.log.info(f"Deploying model {resolved.model.name} ({resolved.model.version}) as "
                    f"'{resolved.deployment_name}' on account '{resolved.account_name}'")
    return resolved
