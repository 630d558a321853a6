from functools import reduce
import operator

import regex

from .util import CalculatorError


class Lexer:
    '''
    Lexer for calculator keystrokes, typed as text.

    Mirrors the buttons and keyboard shortcuts of a desktop calculator: one
    lexeme per key press, plus short words for the keys a keyboard lacks.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Keys that name an engine operation with arguments, by key text
    OPERATORS = {
        '+': 'add',
        '-': 'subtract',
        '*': 'multiply',
        'x': 'multiply',
        'X': 'multiply',
        '\N{MULTIPLICATION SIGN}': 'multiply',
        '/': 'divide',
        '\N{DIVISION SIGN}': 'divide',
    }
    UNARIES = {
        'sqrt': 'sqrt',
        'square': 'square',
        'recip': 'reciprocal',
        'reciprocal': 'reciprocal',
        'tax+': 'taxplus',
        'taxplus': 'taxplus',
        'tax-': 'taxminus',
        'taxminus': 'taxminus',
    }
    MEMORY = {
        'mc': 'memory_clear',
        'mr': 'memory_recall',
        'm+': 'memory_add',
        'm-': 'memory_subtract',
    }
    # Keys that name an engine operation without arguments, by lexeme group
    COMMANDS = {
        'equals': 'compute',
        'percent': 'percent',
        'clear': 'clear_all',
        'back': 'backspace',
        'negate': 'negate',
        'hclear': 'clear_history',
    }

    DIGIT = r'[0-9.]'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    UNARY = r'(?:' + r'|'.join(map(regex.escape, UNARIES)) + r')'
    MEMORY_KEY = r'(?:' + r'|'.join(map(regex.escape, MEMORY)) + r')'
    EQUALS = r'='
    PERCENT = r'%'
    # Escape, or c like on the keypad
    CLEAR = r'(?:esc|c|C)'
    BACK = r'(?:back|<)'
    NEGATE = '(?:neg|\N{PLUS-MINUS SIGN})'
    # h0 is the newest history entry, h1 the one before...
    RECALL = r'''
              h
              (?<index>
                  \d+
              )
              '''
    HCLEAR = r'hc'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<unary>' + UNARY + r')|' \
             r'(?<memory>' + MEMORY_KEY + r')|' \
             r'(?<equals>' + EQUALS + r')|' \
             r'(?<percent>' + PERCENT + r')|' \
             r'(?<clear>' + CLEAR + r')|' \
             r'(?<back>' + BACK + r')|' \
             r'(?<negate>' + NEGATE + r')|' \
             r'(?<recall>' + RECALL + r')|' \
             r'(?<hclear>' + HCLEAR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes. POSIX, so that the longest
    # lexeme wins: square over sqrt, reciprocal over recip.
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Raises on the first thing that isn't a key, after yielding the ones
        before it.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalculatorError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme is a key press, not a separator.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return lexeme's matched groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value is not None}

    def parse(self, groups):
        '''
        Return (engine method name, arguments) for a lexeme's groups.
        '''
        if 'digit' in groups:
            return 'input_digit', (groups['digit'],)
        elif 'operator' in groups:
            return 'apply_operator', (type(self).OPERATORS[groups['operator']],)
        elif 'unary' in groups:
            return 'apply_unary', (type(self).UNARIES[groups['unary']],)
        elif 'memory' in groups:
            return type(self).MEMORY[groups['memory']], ()
        elif 'recall' in groups:
            return 'recall_history', (int(groups['index']),)
        for group, method in type(self).COMMANDS.items():
            if group in groups:
                return method, ()
        raise CalculatorError('Not a key {}'.format(repr(groups)))
