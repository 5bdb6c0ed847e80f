"""Typed action vocabulary for scenario steps.

Every step in a configuration document is one of the models below, picked by
its ``action`` field. The set is closed: the executor matches on these
classes exhaustively, so a new kind means a new model here plus a branch
there.
"""

import re
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from netero.errors import ConfigurationError


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# --- form inputs used by ``submit`` -----------------------------------------

class TextInput(_Frozen):
    type: Literal["text"]
    value: str


class CheckboxInput(_Frozen):
    type: Literal["checkbox"]
    checked: bool


class RadioInput(_Frozen):
    type: Literal["radio"]
    value: str


class SelectInput(_Frozen):
    type: Literal["select"]
    value: str


class FileInput(_Frozen):
    type: Literal["file"]
    files: List[str]


FormInput = Annotated[
    Union[TextInput, CheckboxInput, RadioInput, SelectInput, FileInput],
    Field(discriminator="type"),
]


# --- actions ------------------------------------------------------------------

class AssertAction(_Frozen):
    expected: str = Field(..., description="Regular expression searched for in the observed value")

    @field_validator("expected")
    @classmethod
    def _compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value

    @property
    def pattern(self) -> "re.Pattern[str]":
        return re.compile(self.expected)


class GotoUrlAction(_Frozen):
    action: Literal["goto-url"]
    value: str = Field(..., description="Absolute URL to navigate to")


class GotoAction(_Frozen):
    action: Literal["goto"]
    xpath: str = Field(..., description="Location of the element to click")


class SubmitAction(_Frozen):
    action: Literal["submit"]
    button: Optional[str] = Field(None, description="Explicit submit control, resolved against the whole page")
    form: Optional[str] = Field(None, description="Form to fill; defaults to the first form on the page")
    data: Dict[str, FormInput] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def _text_shorthand(cls, value: Any) -> Any:
        # {"user": "alice"} is short for {"user": {"type": "text", "value": "alice"}}
        if isinstance(value, dict):
            return {
                name: {"type": "text", "value": item} if isinstance(item, str) else item
                for name, item in value.items()
            }
        return value


class TimeAdvanceAction(_Frozen):
    action: Literal["time-advance"]
    value: int = Field(..., description="Delta added to the virtual clock; negative values are passed through")


class AssertUrlAction(AssertAction):
    action: Literal["assert-url"]


class AssertTitleAction(AssertAction):
    action: Literal["assert-title"]


class AssertAttributeAction(AssertAction):
    action: Literal["assert-attribute"]
    xpath: str
    attribute: str


class AssertTextAction(AssertAction):
    action: Literal["assert-text"]
    xpath: str


Action = Annotated[
    Union[
        GotoUrlAction,
        GotoAction,
        SubmitAction,
        TimeAdvanceAction,
        AssertUrlAction,
        AssertTitleAction,
        AssertAttributeAction,
        AssertTextAction,
    ],
    Field(discriminator="action"),
]

_ADAPTER: TypeAdapter = TypeAdapter(Action)


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def parse_action(step: str, raw: Any) -> Action:
    """Validate one raw step record, naming the step on failure."""
    try:
        return _ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise ConfigurationError(f'Invalid step "{step}": {describe_validation_error(exc)}') from exc
