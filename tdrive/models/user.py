from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CallerIdentity(BaseModel):
    """Authenticated principal decoded from a Firebase ID token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    uid: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    name: Optional[str] = None
