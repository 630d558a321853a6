'''
Keystroke lexer tests
'''

import regex

from deskcalc.util import CalculatorError
from deskcalc.lexer import Lexer

from pytest import raises


def parsed(line):
    l = Lexer()
    return [l.parse(l.matchedgroups(m))
            for m in l.lex(line)
            if l.isfeedable(m)]


def test_digits_and_operators():
    assert parsed('1.5 x2=') == [('input_digit', ('1',)),
                                 ('input_digit', ('.',)),
                                 ('input_digit', ('5',)),
                                 ('apply_operator', ('multiply',)),
                                 ('input_digit', ('2',)),
                                 ('compute', ())]
    assert parsed('+-*/×÷') == [('apply_operator', (op,))
                                for op in ['add', 'subtract', 'multiply',
                                           'divide', 'multiply', 'divide']]


def test_longest_word_wins():
    assert parsed('square sqrt') == [('apply_unary', ('square',)),
                                     ('apply_unary', ('sqrt',))]
    assert parsed('reciprocal recip') == [('apply_unary', ('reciprocal',))] * 2
    assert parsed('tax+tax-') == [('apply_unary', ('taxplus',)),
                                  ('apply_unary', ('taxminus',))]


def test_memory_keys():
    assert parsed('mc mr m+ m-') == [('memory_clear', ()),
                                     ('memory_recall', ()),
                                     ('memory_add', ()),
                                     ('memory_subtract', ())]


def test_commands():
    assert parsed('% c C esc < back neg ±') == [('percent', ()),
                                                 ('clear_all', ()),
                                                 ('clear_all', ()),
                                                 ('clear_all', ()),
                                                 ('backspace', ()),
                                                 ('backspace', ()),
                                                 ('negate', ()),
                                                 ('negate', ())]


def test_history_keys():
    assert parsed('h12 hc h0') == [('recall_history', (12,)),
                                   ('clear_history', ()),
                                   ('recall_history', (0,))]


def test_unknown_key():
    l = Lexer()
    matches = l.lex('2 ? 3')
    assert next(matches).group(0) == '2'
    with raises(CalculatorError, match=regex.escape("Couldn't lex ? 3")):
        list(matches)
