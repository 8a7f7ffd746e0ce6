"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from fey.types.option import Nothing, NothingType, Option, Some
from fey.types.result import Err, Ok, Result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
]
