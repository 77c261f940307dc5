from pydantic import BaseModel, ConfigDict


class BaseInfo(BaseModel):
    """Frozen base for DTOs parsed from server responses."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        use_enum_values=False,
    )
