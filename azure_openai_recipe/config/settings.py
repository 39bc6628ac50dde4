from typing import Any, Dict, Optional

import pulumi
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

import azure_openai_recipe.definitions.names as n
from azure_openai_recipe.definitions.enums import PublicNetworkAccess
from azure_openai_recipe.logger.logger import Logger

logger = Logger.get_logger(__name__)

# Read with Config.get_object instead of Config.get
STRUCTURED_FIELDS = ("context", "tags")


class NamedContext(BaseModel):
    name: str


class ResourceContext(BaseModel):
    name: str
    type: str = ""
    properties: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("properties")
    @classmethod
    def model_must_be_a_string(cls, properties: Dict[str, Any]) -> Dict[str, Any]:
        model = properties.get(n.MODEL)
        if model is not None and not isinstance(model, str):
            raise ValueError(f"resource property '{n.MODEL}' must be a string, got {model!r}")
        return properties

    @property
    def model(self) -> str:
        return self.properties.get(n.MODEL) or n.DEFAULT_MODEL


class RecipeContext(BaseModel):
    """Subset of the Radius recipe context the recipe consumes."""
    resource: ResourceContext
    environment: NamedContext
    application: Optional[NamedContext] = None


class RecipeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=n.ENV_PREFIX, extra="ignore")

    location: str
    resource_group_name: str
    context: RecipeContext
    sku_name: str = "S0"
    capacity: int = Field(default=10, gt=0)
    api_version: str = "2024-02-01"
    public_network_access: PublicNetworkAccess.get_typing() = PublicNetworkAccess.ENABLED.value
    tags: Dict[str, str] = Field(default_factory=dict)
    enable_pii_filter: bool = False
    deployment_sku_name: str = "Standard"


def load_settings(config: Optional[pulumi.Config] = None) -> RecipeSettings:
    """
    Build the recipe settings from the Pulumi stack configuration.

    Every field is looked up under its camelCase key (e.g. ``resourceGroupName``).
    Keys missing from the stack fall back to ``RECIPE_`` environment variables,
    a local .env file and finally the field defaults.

    Raises:
        pydantic.ValidationError: If a required value is missing or a value is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))
    config = config or pulumi.Config()

    overrides = {}
    for field_name in RecipeSettings.model_fields:
        key = to_camel(field_name)
        if field_name in STRUCTURED_FIELDS:
            value = config.get_object(key)
        else:
            value = config.get(key)
        if value is not None:
            overrides[field_name] = value

    settings = RecipeSettings(**overrides)
    logger.info(f"Loaded recipe settings for resource '{settings.context.resource.name}' "
                f"in resource group '{settings.resource_group_name}'")
    return settings
