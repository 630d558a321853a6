import sys
from os import isatty
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import CalculatorError
from .engine import Engine
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Not persistent, like the calculator's
                                    # own history.
                                    history=None,
                                    # Pending operation and memory.
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.

    Each input line is a run of key presses; the display is printed after
    each line.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes matches and the engine operation each is.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<operation>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                matched = match.group(0)  # the lexeme text itself
                groups = lexer.matchedgroups(match)
                method, args = lexer.parse(groups)
                print(*groups.keys(),
                      repr(matched),
                      method + repr(args),
                      sep='\t')

    def feed(self, lexer, match):
        '''
        Press the key lexed as match.
        '''
        method, args = lexer.parse(lexer.matchedgroups(match))
        getattr(self.engine, method)(*args)
        if self.args.verbose:
            print(method, *args, '->', self.engine.current, file=sys.stderr)

    def executor(self):
        '''
        Run calculator.
        '''
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        self.feed(lexer, match)
            # Abort entire rest of line, makes sense anyway
            except CalculatorError as e:
                print(e.args[0], file=sys.stderr)
            print(self.engine.current)
        if self.args.history:
            for entry in self.engine.history:
                print(entry)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def toolbar(self):
        '''
        Return pending operation and memory, for the interactive prompt.
        '''
        memory = self.engine.formatter.plain(self.engine.memory.recall())
        return 'M {}   {}'.format(memory, self.engine.pending or '')

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=self.toolbar)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.engine = Engine()
        self.argument_parser = ArgumentParser(description='Desk calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='trace every key press')
        self.argument_parser.add_argument('-H', '--history',
                                          action='store_true',
                                          help='print history when done')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
