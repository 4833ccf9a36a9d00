"""
Parameter binding for query execution.

Each positional argument is labelled with its inferred wire type and encoded
to a string. The result is the binding payload the transport sends with the
query text:

    >>> bind_parameters([42, 'abc', None])
    {'1': {'type': 'FIXED', 'value': '42'}, '2': {'type': 'TEXT', 'value': 'abc'}, '3': {'type': 'TEXT', 'value': None}}
"""
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sfconvert.adapters.type_conversion import encode
from sfconvert.adapters.type_inference import infer_tag

logger = logging.getLogger(__name__)


def bind_parameter(value: Any) -> dict[str, str | None]:
    """Build the binding entry for a single value.
    """
    return {'type': infer_tag(value).binding_name, 'value': encode(value)}


def bind_parameters(args: Sequence[Any] | Mapping[Any, Any] | None) -> dict[str, dict]:
    """Build the binding payload for query parameters.

    Args:
        args: Positional parameters, or a mapping of 1-based positions to values

    Returns
        Dictionary keyed by 1-based position strings

    The first value that cannot be encoded raises UnsupportedTypeError.
    """
    if args is None or len(args) == 0:
        return {}
    if isinstance(args, Mapping):
        items = [(str(k), v) for k, v in args.items()]
    else:
        items = [(str(i), v) for i, v in enumerate(args, start=1)]
    bindings = {position: bind_parameter(value) for position, value in items}
    logger.debug(f'Bound {len(bindings)} parameters')
    return bindings
