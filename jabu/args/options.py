"""
Option schemas for tasks.

A task that accepts options declares them with an ``Options`` container of
``ParOption`` entries; the orchestrator validates the raw arguments against
it before running anything.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class ParOption:
    """
    A single ``--name`` option.

    ``required`` and ``default_value`` exclude each other: an option with a
    default can never be missing.
    """
    name: str
    short: str = ""
    description: Optional[str] = None
    has_arg: bool = False
    required: bool = False
    default_value: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Option name cannot be empty")
        if not self.short:
            object.__setattr__(self, 'short', self.name[0])
        if self.required and self.default_value is not None:
            raise ValueError(
                f"Option '{self.name}' cannot be required and have a default value"
            )

    def display_name(self) -> str:
        """
        Usage form of the option.

        Example:
            ``--output-type:{value}, -o:{value}``
        """
        suffix = ":{value}" if self.has_arg else ""
        return f"--{self.name}{suffix}, -{self.short}{suffix}"

    def collides_with(self, other: 'ParOption') -> bool:
        return self.name == other.name or self.short == other.short


class ParOptionBuilder:
    """
    Fluent builder for ``ParOption``.

    Example:
        option = (ParOptionBuilder()
                  .name("author-key").short("k")
                  .has_arg(True).required(True)
                  .build())
    """

    def __init__(self):
        self._name = ""
        self._short = ""
        self._description = None
        self._has_arg = False
        self._required = False
        self._default_value = None

    def name(self, name: str) -> 'ParOptionBuilder':
        self._name = name
        return self

    def short(self, short: str) -> 'ParOptionBuilder':
        self._short = short
        return self

    def description(self, description: str) -> 'ParOptionBuilder':
        self._description = description
        return self

    def has_arg(self, has_arg: bool) -> 'ParOptionBuilder':
        self._has_arg = has_arg
        return self

    def required(self, required: bool) -> 'ParOptionBuilder':
        """Mark the option as required; this clears any default value."""
        if required:
            self._default_value = None
        self._required = required
        return self

    def default_value(self, default_value: str) -> 'ParOptionBuilder':
        """Set the value used when the option is absent; clears ``required``."""
        self._required = False
        self._default_value = default_value
        return self

    def build(self) -> ParOption:
        return ParOption(
            name=self._name,
            short=self._short,
            description=self._description,
            has_arg=self._has_arg,
            required=self._required,
            default_value=self._default_value,
        )


class Options:
    """Ordered collection of options declared by a task."""

    def __init__(self, options: Optional[List[ParOption]] = None):
        self.options: List[ParOption] = []
        for option in options or ():
            self.add_option(option)

    def add_option(self, option: ParOption) -> bool:
        """
        Add an option.

        Returns:
            False if an option with the same name or short flag exists
        """
        if self.exists(option):
            return False
        self.options.append(option)
        return True

    def exists(self, option: ParOption) -> bool:
        return any(existing.collides_with(option) for existing in self.options)

    def has_option_with_name(self, name: str) -> bool:
        return any(option.name == name for option in self.options)

    def get(self, name: str) -> Optional[ParOption]:
        for option in self.options:
            if option.name == name:
                return option
        return None

    def __iter__(self) -> Iterator[ParOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)
