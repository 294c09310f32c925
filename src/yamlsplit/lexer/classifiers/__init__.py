"""Line classifiers for the yamlsplit lexer.

Each classifier is a mixin that provides classification logic for one
lexical construct. Classifiers are pure functions of their inputs and the
lexer's current state; they never change the mode themselves.
"""

from yamlsplit.lexer.classifiers.block_scalar import (
    BlockScalarClassifierMixin,
)
from yamlsplit.lexer.classifiers.marker import (
    MarkerClassifierMixin,
)
from yamlsplit.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)

__all__ = [
    "BlockScalarClassifierMixin",
    "MarkerClassifierMixin",
    "QuoteClassifierMixin",
]
