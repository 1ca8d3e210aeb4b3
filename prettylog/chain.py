"""
Middleware composition for plain async handlers
"""
from functools import reduce
from typing import Callable, Iterable

from prettylog.composer import Handler

Transformer = Callable[[Handler], Handler]


def build_handler(base: Handler, transformers: Iterable[Transformer]) -> Handler:
    """
    Apply transformers to base, first one outermost.

    build_handler(h, [a, b]) behaves like a(b(h)).
    """
    return reduce(lambda handler, transform: transform(handler), reversed(list(transformers)), base)
