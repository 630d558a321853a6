import math

import regex

from .display import NumberFormatter
from .entry import Entry
from .history import HistoryLog
from .memory import MemoryRegister
from .util import DomainError, wrap_domain_errors, wrap_user_errors


# Added on taxplus, removed on taxminus
TAX_RATE = 1.10


@wrap_domain_errors
def add(left, right):
    return left + right


@wrap_domain_errors
def subtract(left, right):
    return left - right


@wrap_domain_errors
def multiply(left, right):
    return left * right


@wrap_domain_errors
def divide(left, right):
    '''
    Float division. Dividing by zero, even 0 / 0, is an error.
    '''
    return left / right


@wrap_domain_errors
def sqrt(x):
    return math.sqrt(x)


@wrap_domain_errors
def square(x):
    return x * x


@wrap_domain_errors
def reciprocal(x):
    return 1 / x


@wrap_domain_errors
def taxplus(x):
    return x * TAX_RATE


@wrap_domain_errors
def taxminus(x):
    return x / TAX_RATE


class Engine:
    '''
    Button calculator state machine.

    Evaluates strictly left to right, one pending operator at a time: there
    is no precedence, 2 + 3 × 4 is 20. The display is `current`; adapters
    call the operations and then read it back.

    Four configurations, from the (operator, awaiting_fresh_entry) pair:

    - idle: neither
    - fresh after operator: both
    - typing the right operand: operator only
    - fresh after a result: awaiting only
    '''

    # Binary operators: name to (display symbol, function)
    OPERATORS = {
        'add': ('+', add),
        'subtract': ('-', subtract),
        'multiply': ('\N{MULTIPLICATION SIGN}', multiply),
        'divide': ('\N{DIVISION SIGN}', divide),
    }

    # Single operand functions, by the name shown in history
    UNARIES = {
        'sqrt': sqrt,
        'square': square,
        'reciprocal': reciprocal,
        'taxplus': taxplus,
        'taxminus': taxminus,
    }

    # The result at the end of a history entry
    RESULT = regex.compile(r'=\s*(?<result>.*)$')

    def __init__(self, memory=None, history=None, formatter=None):
        '''
        Create cleared calculator.

        :param memory: MemoryRegister to use, a fresh one if None.
        :param history: HistoryLog to use, a fresh one if None.
        :param formatter: NumberFormatter for display text.
        '''
        self.formatter = formatter or NumberFormatter()
        self.memory = MemoryRegister() if memory is None else memory
        self.history = HistoryLog() if history is None else history
        self.clear_all()

    @property
    def current(self):
        '''
        Display text. Never empty.
        '''
        return self.entry.text

    @current.setter
    def current(self, text):
        self.entry = Entry(text, formatter=self.formatter)

    @property
    def error(self):
        return self.current == self.formatter.ERROR

    @property
    def pending(self):
        '''
        Pending operation as display text, e.g. "12 +", or None.
        '''
        if self.operator is None:
            return None
        return '{} {}'.format(self.previous, self.OPERATORS[self.operator][0])

    def clear_all(self):
        '''
        Back to 0 with nothing pending. Memory and history are kept.
        '''
        self.current = Entry.DEFAULT
        self.previous = None
        self.operator = None
        self.awaiting_fresh_entry = False

    def input_digit(self, digit):
        '''
        Type a digit or the decimal point.
        '''
        if self.awaiting_fresh_entry:
            self.entry.start(digit)
            self.awaiting_fresh_entry = False
        else:
            self.entry.append(digit)

    def _chaining(self):
        '''
        Return True if a new operator must first finish the pending one.

        That's when an operator is pending and its right operand has been
        typed since.
        '''
        return self.operator is not None and not self.awaiting_fresh_entry

    @wrap_user_errors('No such operator {1!r}')
    def apply_operator(self, op):
        '''
        Select binary operator op, evaluating any pending one first.
        '''
        if op not in self.OPERATORS:
            raise KeyError(op)
        if self._chaining():
            self.compute()
        self.previous = self.current
        self.operator = op
        self.awaiting_fresh_entry = True

    def compute(self):
        '''
        Evaluate the pending operation (equals). Does nothing if none.

        Logs "<previous> <symbol> <current> = <result>" unless it failed.
        '''
        if self.operator is None or self.previous is None:
            return
        symbol, f = self.OPERATORS[self.operator]
        left = self.formatter.parse(self.previous)
        right = self.entry.value
        summary = '{} {} {}'.format(self.previous, symbol, self.current)
        result = self._evaluate(f, left, right)
        self.operator = None
        self.previous = None
        self._show(result, summary)

    @wrap_user_errors('No such function {1!r}')
    def apply_unary(self, op):
        '''
        Apply single operand function op to the display.

        Logs "<op>(<operand>) = <result>" unless it failed.
        '''
        f = self.UNARIES[op]
        x = self.entry.value
        summary = '{}({})'.format(op, self.formatter.plain(x))
        self._show(self._evaluate(f, x), summary)

    def _evaluate(self, f, *args):
        '''
        Return f(*args) as display text, the error sentinel if no answer.
        '''
        try:
            return self.formatter.format(f(*args))
        except DomainError:
            return self.formatter.ERROR

    def _show(self, result, summary):
        '''
        Display a result, and log it unless it's the error sentinel.
        '''
        self.current = result
        self.awaiting_fresh_entry = True
        if not self.error:
            self.history.append('{} = {}'.format(summary, result))

    def negate(self):
        '''
        Flip the display's sign. Zero is left alone.
        '''
        if self.current == Entry.DEFAULT:
            return
        self.current = self.formatter.plain(self.entry.value * -1)

    def percent(self):
        '''
        Divide the display by a hundred.
        '''
        self.current = self.formatter.plain(self.entry.value / 100)

    def backspace(self):
        '''
        Erase the last typed character. Results can't be erased.
        '''
        if self.awaiting_fresh_entry:
            return
        self.entry.backspace()

    def memory_clear(self):
        self.memory.clear()

    def memory_recall(self):
        '''
        Display the memory register, ready to be typed onto.
        '''
        self.current = self.formatter.plain(self.memory.recall())
        self.awaiting_fresh_entry = False

    def memory_add(self):
        self.memory.add(self.entry.value)

    def memory_subtract(self):
        self.memory.subtract(self.entry.value)

    def recall_from_history(self, text):
        '''
        Display the result part of a history entry, ready to be typed onto.

        Text without a result is ignored.
        '''
        match = self.RESULT.search(text)
        if match is None:
            return
        self.current = match.group('result') or Entry.DEFAULT
        self.awaiting_fresh_entry = False

    @wrap_user_errors('No history entry {1}')
    def recall_history(self, index):
        '''
        Recall history entry at index, 0 being the newest.
        '''
        if index < 0:
            raise IndexError(index)
        self.recall_from_history(self.history[index])

    def clear_history(self):
        self.history.clear()
