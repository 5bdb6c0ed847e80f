from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Cookie(BaseModel):
    """One browser cookie, serialized with Playwright's field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    value: str
    domain: str
    path: str = "/"
    expires: Optional[float] = Field(None, description="Epoch seconds; None for a session cookie")
    http_only: bool = Field(False, alias="httpOnly")
    secure: bool = False
    same_site: Optional[Literal["Strict", "Lax", "None"]] = Field(None, alias="sameSite")

    @field_validator("expires", mode="before")
    @classmethod
    def _session_expiry(cls, value: Any) -> Any:
        # Playwright reports session cookies with expires == -1
        if value is None or (isinstance(value, (int, float)) and value < 0):
            return None
        return value

    @classmethod
    def from_playwright(cls, data: Dict[str, Any]) -> "Cookie":
        return cls.model_validate(data)

    def to_playwright(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
