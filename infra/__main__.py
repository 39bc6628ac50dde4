import pulumi

import azure_openai_recipe.definitions.names as n
from azure_openai_recipe.config.settings import load_settings
from azure_openai_recipe.recipe import provision


settings = load_settings()

# Create the OpenAI account, content filter and model deployment
openai = provision(settings)

pulumi.export("openai_account_name", openai.account.name)
pulumi.export(n.RESULT, openai.result)
