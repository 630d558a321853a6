from .display import NumberFormatter
from .util import CalculatorError


class Entry:
    '''
    Operand text as it is being typed.

    Kept as text rather than a float so that in-progress input like "0." or
    "1.50" shows exactly as typed. At most one decimal point.
    '''

    DIGITS = frozenset('0123456789')
    POINT = '.'
    DEFAULT = '0'
    # Longer entries are rewritten in exponential notation
    MAX_WIDTH = 18

    def __init__(self, text=None, formatter=None):
        self.text = type(self).DEFAULT if text is None else text
        self.formatter = formatter or NumberFormatter()

    @property
    def value(self):
        '''
        Float value of the text; NaN for the error sentinel.
        '''
        return self.formatter.parse(self.text)

    def _check(self, char):
        if char != self.POINT and char not in self.DIGITS:
            raise CalculatorError('Not a digit {}'.format(repr(char)))

    def start(self, char):
        '''
        Replace the text with a new entry starting at char.
        '''
        self._check(char)
        self.text = '0.' if char == self.POINT else char

    def append(self, char):
        '''
        Extend the entry by one digit or the decimal point.

        A second decimal point is ignored, and a lone 0 is replaced rather
        than prefixed. Once too wide and gone exponential, the entry is full.
        '''
        self._check(char)
        if 'e' in self.text:
            return
        if char == self.POINT and self.POINT in self.text:
            return
        if self.text == self.DEFAULT and char != self.POINT:
            self.text = char
        else:
            self.text += char
        if len(self.text) > self.MAX_WIDTH:
            self.text = self.formatter.exponential(self.value)

    def backspace(self):
        '''
        Drop the last character, back to 0 when nothing but a sign would remain.
        '''
        if len(self.text) == 1 or \
           len(self.text) == 2 and self.text.startswith('-'):
            self.text = self.DEFAULT
        else:
            self.text = self.text[:-1]

    def __str__(self):
        return self.text

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, repr(self.text))
