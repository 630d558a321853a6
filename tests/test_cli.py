'''
Command line interface tests
'''

from deskcalc.cli import CLI


def test_expressions(capsys):
    CLI().run(args=['-e', '2+3*4='])
    assert capsys.readouterr().out == '20\n'


def test_display_after_each_line(capsys):
    CLI().run(args=['-H', '-e', '2+3=', '5/0=', '9 sqrt'])
    assert capsys.readouterr().out.splitlines() == ['5',
                                                    'Error',
                                                    '3',
                                                    'sqrt(9) = 3',
                                                    '2 + 3 = 5']


def test_bad_key_abandons_line(capsys):
    CLI().run(args=['-e', '2?3', '4'])
    out, err = capsys.readouterr()
    assert out.splitlines() == ['2', '24']
    assert err == "Couldn't lex ?3\n"


def test_verbose(capsys):
    CLI().run(args=['-v', '-e', '7'])
    out, err = capsys.readouterr()
    assert out == '7\n'
    assert err == 'input_digit 7 -> 7\n'


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '2 +'])
    assert capsys.readouterr().out.splitlines() == [
        '[groups]\t<repr(lexeme)>\t<operation>',
        "digit\t'2'\tinput_digit('2',)",
        "operator\t'+'\tapply_operator('add',)",
    ]
