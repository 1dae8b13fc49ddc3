"""Shared pydantic configuration for deck records."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class DeckModel(BaseModel):
    """Immutable record that reads and writes the camelCase wire format.

    Snake_case field names are accepted on input as well.
    """
    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
