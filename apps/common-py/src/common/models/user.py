"""User record model for the user registry."""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """One registered person."""

    name: str = Field(..., description="Name of the user, not required to be unique")
    age: int = Field(..., description="Age of the user in years")
    email: str = Field(..., description="Email address of the user")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "age": 30,
                "email": "jane.doe@example.com",
            }
        },
    )
