"""Base model for JSON payloads exchanged with clients.

Attributes are snake_case in Python and camelCase on the wire. Requests
accept either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Pydantic base with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
