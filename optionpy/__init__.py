from .option import (
    Option,
    Some,
    NONE,
    UNDEFINED,
    none,
    some,
    from_nullable,
    from_predicate,
    is_none,
    is_some,
    get_or_null,
    get_or_undefined,
    get_or_else,
    fold,
    exists,
    map,
    chain,
    chain_nullable,
    filter,
    alt,
)
from .function import pipe, flow, identity
from .logger import ConsoleLogger
