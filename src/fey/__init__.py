"""fey: Pipe-friendly functions to work with Result and Option values.

Flat imports (preferred):
    from fey import Ok, Err, Result, Some, Nothing, Option
    from fey import result, option, pipe

Submodule imports (for organization):
    from fey.types import Ok, Err, Some, Nothing
    from fey.lookup import sequence, mapping, pairs
    from fey.errors import InvalidShape, NotFound
"""

from fey import lookup, option, result
from fey._config import FeyConfig, get_config, init
from fey.compose import pipe
from fey.errors import (
    NOT_FOUND,
    FeyError,
    InvalidShape,
    NotAFailure,
    NotAMap,
    NotAPairList,
    NotASuccess,
    NotFound,
    NotFoundError,
    NotSome,
)
from fey.types import Err, Nothing, NothingType, Ok, Option, Result, Some

__all__ = [
    'NOT_FOUND',
    'Err',
    'FeyConfig',
    'FeyError',
    'InvalidShape',
    'NotAFailure',
    'NotAMap',
    'NotAPairList',
    'NotASuccess',
    'NotFound',
    'NotFoundError',
    'NotSome',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'get_config',
    'init',
    'lookup',
    'option',
    'pipe',
    'result',
]
