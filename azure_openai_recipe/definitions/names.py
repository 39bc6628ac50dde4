# Recipe result
RESOURCES = "resources"
VALUES = "values"
SECRETS = "secrets"
RESULT = "result"

# Result values
API_VERSION = "apiVersion"
ENDPOINT = "endpoint"
MODEL = "model"
DEPLOYMENT = "deployment"
LOCATION = "location"
CAPACITY = "capacity"
SKU_NAME = "skuName"
PUBLIC_NETWORK_ACCESS = "publicNetworkAccess"
PII_FILTER_ENABLED = "piiFilterEnabled"

# Result secrets
API_KEY = "apiKey"

# Radius identity tags
TAG_ENVIRONMENT = "radapp.io-environment"
TAG_APPLICATION = "radapp.io-application"
TAG_RESOURCE = "radapp.io-resource"
TAG_RESOURCE_TYPE = "radapp.io-resource-type"
TAG_MANAGED_BY = "managed-by"
MANAGED_BY_RADIUS = "radius"

# Cognitive services
ACCOUNT_NAME_PREFIX = "openai-"
ACCOUNT_NAME_HASH_LENGTH = 8
ACCOUNT_KIND = "OpenAI"
DEFAULT_RAI_POLICY_NAME = "Microsoft.DefaultV2"
PII_FILTER_SUFFIX = "-pii-filter"
DEFAULT_MODEL_FORMAT = "OpenAI"
DEFAULT_MODEL_VERSION = "1"
DEFAULT_MODEL = "gpt-35-turbo"

# Pulumi logical names
OPENAI_ACCOUNT = "openai_account"
OPENAI_DEPLOYMENT = "openai_deployment"
OPENAI_CONTENT_FILTER = "openai_content_filter"

# Settings
ENV_PREFIX = "RECIPE_"
