"""Radius recipe that provisions an Azure OpenAI account and model deployment with Pulumi."""

__version__ = "0.1.0"
