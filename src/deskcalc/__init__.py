'''
Desk calculator.

The computational core of a pocket/desktop button calculator: digit entry,
chained binary operators evaluated strictly left to right, unary functions,
a memory register, and a bounded history of results. Driven one key press
at a time by whatever adapter sits in front of it; the bundled one reads
key presses as text, from the command line or an interactive prompt.

Why not just use Python as a calculator?

- Button calculators don't parse expressions. 2 + 3 × 4 is 20 on one, and
  people expect that from a calculator that looks like one.
- Display rules: 18 characters, 9 decimal places, exponential past 1e12.
- Memory and history keys, which a REPL doesn't have.
'''

from .cli import CLI
from .display import NumberFormatter
from .engine import Engine
from .entry import Entry
from .history import HistoryLog
from .lexer import Lexer
from .memory import MemoryRegister
from .util import CalculatorError


__all__ = 'Engine', 'Entry', 'NumberFormatter', 'MemoryRegister', \
          'HistoryLog', 'Lexer', 'CLI', 'CalculatorError'
