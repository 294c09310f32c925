"""Mode-specific scanners for the yamlsplit lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (NORMAL, BLOCK_SCALAR, SINGLE_QUOTED / DOUBLE_QUOTED).
"""

from __future__ import annotations

from yamlsplit.lexer.scanners.block_scalar import BlockScalarScannerMixin
from yamlsplit.lexer.scanners.normal import NormalScannerMixin
from yamlsplit.lexer.scanners.quoted import QuotedScannerMixin

__all__ = [
    "BlockScalarScannerMixin",
    "NormalScannerMixin",
    "QuotedScannerMixin",
]
