"""Task option schemas and argument parsing."""

from .options import Options, ParOption, ParOptionBuilder
from .parser import (
    ArgumentValidationError,
    InvalidArgError,
    ParsedArguments,
)

__all__ = [
    'Options',
    'ParOption',
    'ParOptionBuilder',
    'ArgumentValidationError',
    'InvalidArgError',
    'ParsedArguments',
]
