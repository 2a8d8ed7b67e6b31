"""
Argument parsing and validation against an ``Options`` schema.

Syntax understood:
    --name          flag option (no value)
    --name:value    option with a value
    --              everything after it is positional
    anything else   positional argument
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence, Set

from .options import Options

HELP_OPTION = "help"

MISSING_OPTION = "missing_option"
MISSING_OPTION_ARGUMENT = "missing_option_argument"
INVALID_OPTION_VALUE = "invalid_option_value"
UNRECOGNIZED_OPTION = "unrecognized_option"


@dataclass(frozen=True)
class InvalidArgError:
    """One violation found while validating arguments."""
    kind: str
    option_name: str
    message: str = ""

    @classmethod
    def missing_option(cls, name: str) -> 'InvalidArgError':
        return cls(MISSING_OPTION, name)

    @classmethod
    def missing_option_argument(cls, name: str) -> 'InvalidArgError':
        return cls(MISSING_OPTION_ARGUMENT, name)

    @classmethod
    def invalid_option_value(cls, name: str, message: str) -> 'InvalidArgError':
        return cls(INVALID_OPTION_VALUE, name, message)

    @classmethod
    def unrecognized_option(cls, name: str) -> 'InvalidArgError':
        return cls(UNRECOGNIZED_OPTION, name)

    def __str__(self) -> str:
        if self.kind == MISSING_OPTION:
            return f"Option '{self.option_name}' not specified."
        if self.kind == MISSING_OPTION_ARGUMENT:
            return (f"Option '{self.option_name}' specified, but no argument "
                    f"value was specified with it (it's required)")
        if self.kind == INVALID_OPTION_VALUE:
            return (f"The value specified for option '{self.option_name}' "
                    f"was not valid: {self.message}")
        return f"Unrecognized option '{self.option_name}'"


class ArgumentValidationError(Exception):
    """Raised by ``ParsedArguments.validate`` with every violation found."""

    def __init__(self, errors: Set[InvalidArgError]):
        super().__init__(errors)
        self.errors: FrozenSet[InvalidArgError] = frozenset(errors)


@dataclass
class ParsedArguments:
    """Options (name -> value or None) and positional arguments."""
    options: Dict[str, Optional[str]] = field(default_factory=dict)
    arg_list: List[str] = field(default_factory=list)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> 'ParsedArguments':
        parsed = cls()
        no_parsing = False

        for arg in args:
            if no_parsing:
                parsed.arg_list.append(arg)
            elif arg == "--":
                no_parsing = True
            elif arg.startswith("--"):
                name, sep, value = arg[2:].partition(":")
                parsed.options[name] = value if sep else None
            else:
                parsed.arg_list.append(arg)

        return parsed

    @classmethod
    def with_options(cls, args: Sequence[str], options: Options) -> 'ParsedArguments':
        """
        Parse ``args`` and validate them against ``options``.

        Raises:
            ArgumentValidationError: carrying all violations at once
        """
        parsed = cls.from_args(args)
        parsed.validate(options)
        return parsed

    @property
    def help_requested(self) -> bool:
        return HELP_OPTION in self.options

    def has_option(self, name: str) -> bool:
        return name in self.options

    def get_option_value(self, name: str) -> Optional[str]:
        return self.options.get(name)

    def validate(self, options: Options) -> None:
        """
        Fill defaults, then check every rule of ``options``.

        Violations are collected, not reported one at a time: missing
        required options, options needing a value that got none, and
        options the schema doesn't know.
        """
        for option in options:
            if option.default_value is not None:
                self.options.setdefault(option.name, option.default_value)

        errors: Set[InvalidArgError] = set()
        for option in options:
            if option.name in self.options:
                if option.has_arg and self.options[option.name] is None:
                    errors.add(InvalidArgError.missing_option_argument(option.name))
            elif option.required:
                errors.add(InvalidArgError.missing_option(option.name))

        for name in self.options:
            if name != HELP_OPTION and not options.has_option_with_name(name):
                errors.add(InvalidArgError.unrecognized_option(name))

        if errors:
            raise ArgumentValidationError(errors)
