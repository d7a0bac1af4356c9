import pytest

from oop_notes.abstraction import Document, Printable
from oop_notes.overloading import Adder, Printer
from oop_notes.overriding import Child, Parent, call_print


@pytest.fixture
def printer():
    return Printer()


@pytest.mark.parametrize("args, expected", [
    ((), "print function"),
    ((5,), "print function with int parameter"),
    ((5.5,), "print function with double parameter"),
])
def test_overload_selected_by_argument_type(printer, capsys, args, expected):
    printer.print(*args)
    assert capsys.readouterr().out.strip() == expected


def test_overload_rejects_unknown_type(printer):
    with pytest.raises(TypeError):
        printer.print("five")


def test_operator_overload(capsys):
    a = Adder()
    assert (a + 5) is a
    assert (a + 5.5) is a
    out = capsys.readouterr().out
    assert "operator+ function with int parameter" in out
    assert "operator+ function with double parameter" in out


def test_operator_overload_unsupported_operand():
    with pytest.raises(TypeError):
        Adder() + "x"


def test_override_dispatches_on_runtime_type(capsys):
    for obj in [Parent(), Child()]:
        call_print(obj)
    assert capsys.readouterr().out.splitlines() == ["print function", "print function in Child"]


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Printable()


def test_subclass_missing_print_is_still_abstract():
    class Incomplete(Printable):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_concrete_subclass(capsys):
    d = Document()
    d.print()
    d.show()
    assert capsys.readouterr().out.splitlines() == [
        "print function in Document",
        "show function in Printable",
    ]


def test_child_message_is_fixed_for_subclasses(capsys):
    class GrandChild(Child):
        pass

    call_print(GrandChild())
    assert capsys.readouterr().out.strip() == "print function in Child"
