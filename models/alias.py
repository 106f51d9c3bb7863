"""Data models for email aliases."""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class Alias(BaseModel):
    """
    Read-only view of one alias record.

    The scanner only reads these fields. Changing an alias's state goes
    through an AliasService, never through the model itself.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    email: str
    active: bool
    description: Optional[str] = None


class AnonAddyAlias(Alias):
    """Alias record as returned by the AnonAddy API."""
    user_id: Optional[str] = None
    aliasable_id: Optional[str] = None
    aliasable_type: Optional[str] = None
    local_part: Optional[str] = None
    extension: Optional[str] = None
    domain: Optional[str] = None
    emails_forwarded: int = 0
    emails_blocked: int = 0
    emails_replied: int = 0
    emails_sent: int = 0
    recipients: list = []
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
