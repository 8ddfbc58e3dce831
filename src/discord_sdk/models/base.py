from pydantic import BaseModel, ConfigDict

# IDs arrive as decimal strings; pydantic coerces them into ints.
Snowflake = int


class DiscordModel(BaseModel):
    """Base for all API models.

    Unknown fields are kept so that attributes the API adds later are still
    reachable on the instance.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize for a request body, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
