from typing import Dict, List, Optional

import pulumi
from pulumi_azure_native import cognitiveservices
from pulumi_azure_native.cognitiveservices import list_account_keys_output

import azure_openai_recipe.definitions.names as n
from azure_openai_recipe.definitions.enums import ContentFilterCategory, ContentFilterSource
from azure_openai_recipe.modules.naming import ModelConfig

HARM_CATEGORIES = [
    ContentFilterCategory.HATE,
    ContentFilterCategory.SEXUAL,
    ContentFilterCategory.VIOLENCE,
    ContentFilterCategory.SELF_HARM,
]


def create_openai_account(name: str, resource_group_name: pulumi.Input[str], location: str,
                          sku_name: str, public_network_access: str,
                          tags: Dict[str, str]) -> cognitiveservices.Account:
    account = cognitiveservices.Account(n.OPENAI_ACCOUNT,
                                        account_name=name,
                                        identity=cognitiveservices.IdentityArgs(
                                            type=cognitiveservices.ResourceIdentityType.SYSTEM_ASSIGNED,
                                        ),
                                        kind=n.ACCOUNT_KIND,
                                        location=location,
                                        properties=cognitiveservices.AccountPropertiesArgs(
                                            custom_sub_domain_name=name,
                                            public_network_access=public_network_access,
                                        ),
                                        resource_group_name=resource_group_name,
                                        sku=cognitiveservices.SkuArgs(
                                            name=sku_name,
                                        ),
                                        tags=tags)
    return account


def _content_filters() -> List[cognitiveservices.RaiPolicyContentFilterArgs]:
    filters = []
    for source in ContentFilterSource:
        for category in HARM_CATEGORIES:
            filters.append(cognitiveservices.RaiPolicyContentFilterArgs(
                name=category.value,
                enabled=True,
                blocking=True,
                severity_threshold=cognitiveservices.ContentLevel.MEDIUM,
                source=source.value,
            ))
    # PII detection only applies to what the model sends back
    filters.append(cognitiveservices.RaiPolicyContentFilterArgs(
        name=ContentFilterCategory.PII.value,
        enabled=True,
        blocking=True,
        source=ContentFilterSource.COMPLETION.value,
    ))
    return filters


def create_content_filter_policy(name: str, resource_group_name: pulumi.Input[str],
                                 account_name: pulumi.Input[str]) -> cognitiveservices.RaiPolicy:
    policy = cognitiveservices.RaiPolicy(
        n.OPENAI_CONTENT_FILTER,
        account_name=account_name,
        rai_policy_name=name,
        resource_group_name=resource_group_name,
        properties=cognitiveservices.RaiPolicyPropertiesArgs(
            base_policy_name=n.DEFAULT_RAI_POLICY_NAME,
            mode=cognitiveservices.RaiPolicyMode.BLOCKING,
            content_filters=_content_filters(),
        ),
    )
    pulumi.log.info(f"PII content filter '{name}' will be attached to the deployment")
    return policy


def deploy_openai_model(name: str, resource_group_name: pulumi.Input[str], account_name: pulumi.Input[str],
                        model: ModelConfig, sku_name: str, capacity: int, rai_policy_name: str,
                        depends_on: Optional[List[pulumi.Resource]] = None) -> cognitiveservices.Deployment:
    deployment = cognitiveservices.Deployment(n.OPENAI_DEPLOYMENT,
                                              account_name=account_name,
                                              deployment_name=name,
                                              properties=cognitiveservices.DeploymentPropertiesArgs(
                                                  model=cognitiveservices.DeploymentModelArgs(
                                                      format=model.format,
                                                      name=model.name,
                                                      version=model.version,
                                                  ),
                                                  rai_policy_name=rai_policy_name,
                                              ),
                                              resource_group_name=resource_group_name,
                                              sku=cognitiveservices.SkuArgs(
                                                  capacity=capacity,  # Token rate limit of 1000 per unit
                                                  name=sku_name,
                                              ),
                                              opts=pulumi.ResourceOptions(depends_on=depends_on or []))
    return deployment


def get_openai_api_key(resource_group_name: pulumi.Input[str], account_name: pulumi.Input[str]) -> pulumi.Output[str]:
    keys = list_account_keys_output(
        resource_group_name=resource_group_name,
        account_name=account_name
    )
    return pulumi.Output.secret(keys.apply(lambda k: k.key1))
