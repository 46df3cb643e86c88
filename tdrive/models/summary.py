from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PracticeSummary(BaseModel):
    """Aggregate hours over one owner's (optionally profile-scoped) sessions."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    profile_id: str
    session_count: int
    total_hours: float
    day_hours: float
    night_hours: float
