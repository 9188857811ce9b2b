"""
Base schema shared by all operation parameter models.
"""

from pydantic import BaseModel, ConfigDict


class BaseOperationParams(BaseModel):
    """
    Base class for operation parameters.

    Parameters are immutable values; unknown fields are rejected so that
    typos in a pipeline definition fail loudly.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
