"""
Base model shared by dc-http models.
"""

from pydantic import BaseModel, ConfigDict


class DcHttpBaseModel(BaseModel):
    """
    Base model for dc-http.
    Common configuration and stricter validation.
    """

    model_config = ConfigDict(
        # Validate values on assignment
        validate_assignment=True,
        # Prevent extra fields
        extra="forbid",
        # Better documentation
        json_schema_extra={"additionalProperties": False},
    )
