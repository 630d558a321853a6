from pytest import fixture

from deskcalc.display import NumberFormatter
from deskcalc.engine import Engine
from deskcalc.lexer import Lexer


@fixture
def formatter():
    return NumberFormatter()


@fixture
def engine():
    return Engine()


@fixture
def press(engine):
    '''
    Press keys, given as text, on the engine fixture. Returns the display.
    '''
    lexer = Lexer()

    def pressing(keys):
        for match in lexer.lex(keys):
            if lexer.isfeedable(match):
                method, args = lexer.parse(lexer.matchedgroups(match))
                getattr(engine, method)(*args)
        return engine.current
    return pressing
