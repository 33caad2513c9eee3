"""Option definition models — discriminated union on the `kind` field."""

import re
import sys
from typing import Annotated, Any, Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator


class _Definition(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    abbreviation: str = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _default_abbreviation(cls, data: Any) -> Any:
        # Options without a short form are abbreviated by their own name.
        if isinstance(data, dict) and not data.get("abbreviation"):
            return {**data, "abbreviation": data.get("name")}
        return data


class BooleanDefinition(_Definition, frozen=True):
    """Declares a toggle option."""

    kind: Literal["boolean"]
    default: bool = False


class NumberDefinition(_Definition, frozen=True):
    """Declares a bounded integer option."""

    kind: Literal["number"]
    default: int = 0
    minimum: int = 0
    maximum: int = sys.maxsize

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum {self.minimum} is greater than maximum {self.maximum}"
            )
        return self


class StringDefinition(_Definition, frozen=True):
    """Declares a free-form text option."""

    kind: Literal["string"]
    default: str = ""


class ListDefinition(_Definition, frozen=True):
    """Declares a comma-separated list option, optionally constrained by a pattern."""

    kind: Literal["list"]
    default: list[str] = Field(default_factory=list)
    pattern: str | None = None

    @field_validator("default")
    @classmethod
    def _check_default(cls, default: list[str]) -> list[str]:
        for item in default:
            if not item or "," in item:
                raise ValueError(f"{item!r} is not a single list item")
        if len(set(default)) != len(default):
            raise ValueError("default list repeats an item")
        return default

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, pattern: str | None) -> str | None:
        if pattern is not None:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc
        return pattern


type OptionDefinition = Annotated[
    BooleanDefinition | NumberDefinition | StringDefinition | ListDefinition,
    Field(discriminator="kind"),
]
