"""User entity.

Accounts are owned by the auth service. Comments only need the name to
display next to the content.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsroom.domain.model.common import DomainModel
from newsroom.domain.value import DisplayName, UserId


class User(DomainModel):
    """Registered reader or author."""

    id: UserId
    name: DisplayName
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
