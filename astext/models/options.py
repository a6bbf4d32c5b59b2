"""Per-call rendering options."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

ZWSP = "\u200b"


class RenderOptions(BaseModel):
    """Options for one ``render`` call.

    Accepts the snake_case field names or their camelCase aliases.
    Unrecognized names are ignored; ``None`` means "use the default".
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    lf_char: str = Field(default=os.linesep, alias="lfChar")
    zwsp_char: str = Field(default=ZWSP, alias="zwspChar")
    trim: bool = False
    extra_chars: str = Field(default="", alias="extraChars")
    skip_dels: bool = Field(default=False, alias="skipDels")

    @field_validator("*", mode="before")
    @classmethod
    def _none_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


_FIELD_BY_ALIAS = {
    (info.alias or name): name for name, info in RenderOptions.model_fields.items()
}


def _field_name(key: str) -> str | None:
    if key in RenderOptions.model_fields:
        return key
    return _FIELD_BY_ALIAS.get(key)


def canonical_options(values: Mapping[str, Any]) -> dict[str, Any]:
    """Key ``values`` by field name, dropping unknown names and ``None`` values.

    When a field appears under both spellings, the later one wins.
    """
    canonical: dict[str, Any] = {}
    for key, value in values.items():
        name = _field_name(key)
        if name is not None and value is not None:
            canonical[name] = value
    return canonical


def resolve_options(
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RenderOptions:
    """Build the effective options: ``overrides`` win over ``options``.

    Override values are taken as given, without type validation.
    """
    if options is None:
        base = RenderOptions()
    elif isinstance(options, RenderOptions):
        base = options
    else:
        base = RenderOptions.model_validate(dict(options))

    update = canonical_options(overrides)
    if not update:
        return base
    return base.model_copy(update=update)
