from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PageValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Literal["page"] = "page"
    which: Literal["url", "title"]

    def describe(self) -> str:
        return self.which.upper() if self.which == "url" else "title"


class ElementValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Literal["element"] = "element"
    xpath: str
    which: Literal["text", "attribute"]
    name: Optional[str] = Field(None, description="Attribute name, required when which='attribute'")

    @model_validator(mode="after")
    def _needs_name(self) -> "ElementValue":
        if self.which == "attribute" and not self.name:
            raise ValueError("attribute values need an attribute name")
        return self

    def describe(self) -> str:
        if self.which == "attribute":
            return f'attribute "{self.name}" at "{self.xpath}"'
        return f'text content at "{self.xpath}"'


Value = Union[PageValue, ElementValue]
