# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# The public API speaks camelCase (foodName, userType, createdAt) while the
# store and the Python code use snake_case. Models that cross the HTTP
# boundary inherit from CamelModel to get both.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases; accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
