"""Top-level OptionsConfig — the root of an option definitions file."""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from vim_options.config.domain.definition import OptionDefinition


class OptionsConfig(BaseModel, frozen=True):
    """A named set of option definitions."""

    name: str = Field(min_length=1)
    options: list[OptionDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_names(self) -> Self:
        seen: set[str] = set()
        duplicates: list[str] = []
        for definition in self.options:
            if definition.name in seen:
                duplicates.append(definition.name)
            seen.add(definition.name)
        if duplicates:
            raise ValueError(f"duplicate option names: {', '.join(duplicates)}")
        return self
