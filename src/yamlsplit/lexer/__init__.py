"""Line-classifying state-machine lexer for yamlsplit.

The lexer sees one line at a time, classifies it, and carries a single
lexical mode to the next line. It knows nothing about buffers or streams;
the document iterator drives it.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, LineKind
├── core.py              # Lexer class (mixin composition + dispatch)
├── modes.py             # LexerMode / LineKind enums, character constants
├── classifiers/         # Pure classification mixins
│   ├── marker.py        # "---" / "..." markers, prologue lines
│   ├── quote.py         # Closing quotes of flow scalars
│   └── block_scalar.py  # Block scalar headers and extent
└── scanners/            # Mode-specific scanners
    ├── normal.py        # NORMAL mode (opens scalars)
    ├── quoted.py        # SINGLE_QUOTED / DOUBLE_QUOTED modes
    └── block_scalar.py  # BLOCK_SCALAR mode

Usage:
    >>> from yamlsplit.lexer import Lexer
    >>> lexer = Lexer()
    >>> lexer.classify_line("a: 'one\\n")
    <LineKind.CONTENT: 4>
    >>> lexer.mode
    <LexerMode.SINGLE_QUOTED: 3>

"""

from yamlsplit.lexer.core import Lexer
from yamlsplit.lexer.modes import LexerMode, LineKind

__all__ = ["Lexer", "LexerMode", "LineKind"]
