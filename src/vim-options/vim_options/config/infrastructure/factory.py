"""Builds live options and a populated registry from option definitions."""

from vim_options.config.domain.config import OptionsConfig
from vim_options.config.domain.definition import (
    BooleanDefinition,
    ListDefinition,
    NumberDefinition,
    OptionDefinition,
    StringDefinition,
)
from vim_options.option.application.registry import OptionRegistry
from vim_options.option.domain.number import NumberOption
from vim_options.option.domain.observer import RegistryObserver
from vim_options.option.domain.option import Option
from vim_options.option.domain.text import ListOption, StringOption
from vim_options.option.domain.toggle import ToggleOption


def build_option(definition: OptionDefinition) -> Option:
    """Return the option variant matching *definition*.kind.

    Raises:
        InvalidOptionValueError: if the declared default is rejected by the option.
    """
    match definition:
        case BooleanDefinition():
            return ToggleOption(
                name=definition.name,
                abbreviation=definition.abbreviation,
                default=definition.default,
            )
        case NumberDefinition():
            return NumberOption(
                name=definition.name,
                abbreviation=definition.abbreviation,
                default=definition.default,
                minimum=definition.minimum,
                maximum=definition.maximum,
            )
        case StringDefinition():
            return StringOption(
                name=definition.name,
                abbreviation=definition.abbreviation,
                default=definition.default,
            )
        case ListDefinition():
            return ListOption(
                name=definition.name,
                abbreviation=definition.abbreviation,
                default=definition.default,
                pattern=definition.pattern,
            )


def build_registry(config: OptionsConfig, observer: RegistryObserver) -> OptionRegistry:
    """Create every option declared in *config* and register it.

    Raises:
        InvalidOptionValueError: if a declared default is rejected.
        DuplicateOptionError: if an abbreviation collides with another option.
    """
    registry = OptionRegistry(observer=observer)
    for definition in config.options:
        registry.register(build_option(definition=definition))
    return registry
