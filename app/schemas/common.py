"""Shared schema bases and coercing field types."""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OkResponse(BaseModel):
    """Delete acknowledgement."""

    ok: bool = True


def coerce_optional_str(v: Any) -> Optional[str]:
    """Stringify scalars the way form posts arrive; None stays None."""
    if v is None:
        return None
    return str(v)


def coerce_str_list(v: Any) -> List[str]:
    """Anything that is not a list becomes an empty list."""
    if isinstance(v, (list, tuple)):
        return [str(item) for item in v]
    return []


def coerce_optional_str_list(v: Any) -> Optional[List[str]]:
    if v is None:
        return None
    return coerce_str_list(v)


LooseStr = Annotated[Optional[str], BeforeValidator(coerce_optional_str)]
StrList = Annotated[List[str], BeforeValidator(coerce_str_list)]
OptionalStrList = Annotated[Optional[List[str]], BeforeValidator(coerce_optional_str_list)]
