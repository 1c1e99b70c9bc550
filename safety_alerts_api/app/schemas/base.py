"""
Shared base model for camelCase payloads.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising snake_case attributes as camelCase keys.

    ``populate_by_name`` lets Python code build instances with the
    attribute names while JSON input uses the aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
