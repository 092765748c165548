"""
Tests for conditions and if / else if / else chains.
"""
import pytest

from crimson.exceptions import NonNumericOperandException
from crimson.interpreter import Interpreter
from crimson.operations import Op

from crimson.tests.utils import main_body, run_source, wrap_main


def output(capsys):
    return capsys.readouterr().out.splitlines()


def test_if_chain_ast_is_nested():
    body = main_body(wrap_main(
        'if (a < 1) { crym("A"); } else if (b) { crym("B"); } else { crym("C"); }'
    ))
    assert len(body) == 1
    kind, cond, then_block, tail, _ = body[0]
    assert kind == 'if'
    assert cond[0] == Op.LT
    assert cond[1] == ('ident', 'a', 2)
    assert cond[2] == ('number', '1', 2)
    assert then_block[0] == 'block'
    assert tail[0] == 'if'
    assert tail[1] == ('truthy', ('ident', 'b', 2), 2)
    assert tail[3][0] == 'block'
    assert tail[3][1][0][1] == 'crym'


def test_first_true_branch_wins(capsys):
    run_source(wrap_main(
        'if (1 > 2) { crym("A"); } else if (1 < 2) { crym("B"); } else { crym("C"); }'
    ))
    assert output(capsys) == ['B']


def test_only_one_branch_runs_when_several_are_true(capsys):
    run_source(wrap_main(
        'if (1 < 2) { crym("A"); } else if (2 < 3) { crym("B"); } else { crym("C"); }'
    ))
    assert output(capsys) == ['A']


def test_else_runs_when_nothing_matched(capsys):
    run_source(wrap_main(
        'if (false) { crym("A"); } else if (0) { crym("B"); } else { crym("C"); }'
    ))
    assert output(capsys) == ['C']


def test_no_branch_true_and_no_else_is_silent(capsys):
    run_source(wrap_main(
        'if (1 > 2) { crym("A"); } else if (3 > 4) { crym("B"); }\ncrym("end");'
    ))
    assert output(capsys) == ['end']


def test_text_equality_is_verbatim(capsys):
    run_source(wrap_main('if ("1.0" == "1") { crym("eq"); } else { crym("neq"); }'))
    assert output(capsys) == ['neq']


def test_number_equality_is_textual(capsys):
    run_source(wrap_main(
        'if (1.0 == 1) { crym("eq"); } else { crym("neq"); }\n'
        'if (1.0 <= 1) { crym("le"); }\n'
        'if (007 != 7) { crym("ne"); }'
    ))
    assert output(capsys) == ['neq', 'le', 'ne']


def test_variables_in_conditions(capsys):
    run_source(wrap_main(
        'int age = 20;\n'
        'string name = "Ada";\n'
        'if (age >= 18) { crym("adult"); }\n'
        'if (name == "Ada") { crym("hello Ada"); }\n'
        'if (name != "Bob") { crym("not Bob"); }'
    ))
    assert output(capsys) == ['adult', 'hello Ada', 'not Bob']


@pytest.mark.parametrize(
    "value, expected",
    [
        ('true', True),
        ('false', False),
        ('0', False),
        ('', False),
        ('1', True),
        ('0.0', True),
        ('"text"', True),
        ('no', True),
    ],
)
def test_truthiness(value, expected):
    assert Interpreter.truthy(value) is expected


def test_single_value_conditions(capsys):
    run_source(wrap_main(
        'bool flag;\n'
        'string empty;\n'
        'if (flag) { crym("flag"); }\n'
        'if (empty) { crym("empty"); }\n'
        'if (unbound) { crym("unbound"); }\n'
        'if ("") { crym("quoted"); }\n'
        'if () { crym("nothing"); }'
    ))
    assert output(capsys) == ['unbound', 'quoted']


def test_non_comparison_operators_are_false(capsys):
    run_source(wrap_main(
        'if (true && true) { crym("and"); } else { crym("no and"); }\n'
        'if (1 + 1) { crym("plus"); } else { crym("no plus"); }\n'
        'if (!true) { crym("not"); } else { crym("no not"); }'
    ))
    assert output(capsys) == ['no and', 'no plus', 'no not']


def test_non_numeric_ordering_aborts(capsys):
    with pytest.raises(NonNumericOperandException) as exc:
        run_source(wrap_main(
            'crym("before");\n'
            'if (name < 3) { crym("less"); }\n'
            'crym("after");'
        ))
    assert exc.value.line == 3
    assert exc.value.operand == 'name'
    assert "non-numeric operand 'name'" in str(exc.value)
    assert output(capsys) == ['before']


def test_quoted_numbers_are_not_numeric():
    with pytest.raises(NonNumericOperandException):
        run_source(wrap_main('if ("5" > 3) { crym("x"); }'))


def test_later_conditions_are_not_evaluated_after_a_match(capsys):
    run_source(wrap_main(
        'if (1 == 1) { crym("first"); } else if (word > 2) { crym("second"); }'
    ))
    assert output(capsys) == ['first']


def test_skipped_branches_have_no_effect(capsys):
    interpreter = run_source(wrap_main(
        'if (false) { int hidden = 1; crym("hidden"); Sleep(oops); }\n'
        'crym("shown");'
    ))
    assert 'hidden' not in interpreter.vars
    assert output(capsys) == ['shown']


def test_nested_conditionals(capsys):
    run_source(wrap_main(
        'int x = 5;\n'
        'if (x > 1) {\n'
        '    if (x > 10) { crym("big"); }\n'
        '    else if (x > 3) { crym("medium"); }\n'
        '    else { crym("small"); }\n'
        '    crym("done");\n'
        '} else {\n'
        '    crym("tiny");\n'
        '}'
    ))
    assert output(capsys) == ['medium', 'done']


def test_chain_stops_at_plain_else(capsys):
    run_source(wrap_main(
        'if (false) { crym("A"); } else { crym("B"); } else { crym("C"); }\n'
        'crym("end");'
    ))
    assert output(capsys) == ['B', 'C', 'end']


def test_malformed_else_if_is_dropped(capsys):
    run_source(wrap_main(
        'if (false) { crym("A"); } else if true { crym("B"); } else { crym("C"); }'
    ))
    assert output(capsys) == ['B', 'C']


def test_if_without_parentheses_is_skipped(capsys):
    run_source(wrap_main('if true { crym("body"); }\ncrym("end");'))
    assert output(capsys) == ['body', 'end']


def test_malformed_call_in_skipped_branch_keeps_else(capsys):
    run_source(wrap_main('if (1 > 2) { crym("hi"; } else { crym("other"); }\ncrym("end");'))
    assert output(capsys) == ['other', 'end']


def test_malformed_call_stays_inside_its_branch(capsys):
    run_source(wrap_main(
        'if (2 > 1) { crym("hi"; crym("x"); } else { crym("other"); }\ncrym("end");'
    ))
    assert output(capsys) == ['hi', 'end']


@pytest.mark.parametrize("condition", ['nan < 1', 'inf > 1', '1 <= infinity'])
def test_non_finite_ordering_operands_abort(condition):
    with pytest.raises(NonNumericOperandException):
        run_source(wrap_main(f'if ({condition}) {{ crym("x"); }}'))
