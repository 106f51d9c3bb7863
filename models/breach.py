"""Data models for breach records."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Breach(BaseModel):
    """A single known data breach, as reported by Have I Been Pwned."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(alias="Name")
    title: Optional[str] = Field(default=None, alias="Title")
    domain: Optional[str] = Field(default=None, alias="Domain")
    breach_date: Optional[str] = Field(default=None, alias="BreachDate")
    added_date: Optional[str] = Field(default=None, alias="AddedDate")
    modified_date: Optional[str] = Field(default=None, alias="ModifiedDate")
    pwn_count: int = Field(default=0, alias="PwnCount")
    description: Optional[str] = Field(default=None, alias="Description")
    data_classes: list[str] = Field(default_factory=list, alias="DataClasses")
    logo_path: Optional[str] = Field(default=None, alias="LogoPath")

    is_verified: bool = Field(default=False, alias="IsVerified")
    is_fabricated: bool = Field(default=False, alias="IsFabricated")
    is_sensitive: bool = Field(default=False, alias="IsSensitive")
    is_retired: bool = Field(default=False, alias="IsRetired")
    is_spam_list: bool = Field(default=False, alias="IsSpamList")
    is_malware: bool = Field(default=False, alias="IsMalware")

    @property
    def label(self) -> str:
        return self.title or self.name
