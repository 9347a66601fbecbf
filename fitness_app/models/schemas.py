"""Pydantic models describing the session owner."""
from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """Identity captured once when the console session starts."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int
    weight: float
