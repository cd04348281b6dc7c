"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an upstream HTTP error."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason: str = ""
