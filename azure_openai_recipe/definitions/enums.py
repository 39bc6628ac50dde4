from enum import Enum
from typing import List, Literal


class CustomEnum(Enum):

    @classmethod
    def get_values(cls) -> List[str]:
        return list(v.value for v in cls.__members__.values())

    @classmethod
    def get_typing(cls):
        typing = Literal[tuple(cls.get_values())]
        return typing


class PublicNetworkAccess(CustomEnum):
    ENABLED: str = "Enabled"
    DISABLED: str = "Disabled"


class ContentFilterCategory(CustomEnum):
    HATE: str = "Hate"
    SEXUAL: str = "Sexual"
    VIOLENCE: str = "Violence"
    SELF_HARM: str = "Selfharm"
    PII: str = "Personally Identifiable Information"


class ContentFilterSource(CustomEnum):
    PROMPT: str = "Prompt"
    COMPLETION: str = "Completion"
