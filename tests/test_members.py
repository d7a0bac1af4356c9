import copy

import pytest

from oop_notes.encapsulation import Teacher, access_conventions
from oop_notes.static_members import InstanceCounter, SharedValue


@pytest.fixture
def fresh_counter(monkeypatch):
    monkeypatch.setattr(InstanceCounter, "count", 0)
    return InstanceCounter


@pytest.mark.parametrize("n", [0, 1, 5])
def test_counter_reads_number_constructed(fresh_counter, n):
    for _ in range(n):
        fresh_counter()
    assert fresh_counter.count == n


def test_counter_survives_instances_going_out_of_scope(fresh_counter, capsys):
    kept = fresh_counter()
    for _ in range(3):
        fresh_counter()
    del kept
    fresh_counter.display_count()
    assert fresh_counter.count == 4
    assert capsys.readouterr().out.strip() == "Count: 4"


def test_shared_value_without_instance(monkeypatch):
    monkeypatch.setattr(SharedValue, "value", 0)
    SharedValue.set_value(7)
    assert SharedValue.get_value() == 7
    assert SharedValue().get_value() == 7


def test_teacher_constructor_forms(capsys):
    t1 = Teacher()
    t2 = Teacher("aniket")
    assert capsys.readouterr().out.splitlines() == ["Constructor1 called", "Constructor2 called"]
    assert t1.dept == t2.dept == "CSE"
    assert t2.name == "aniket"


def test_teacher_salary_is_private():
    t = Teacher("aniket")
    t.set_salary(100000)
    assert t.get_salary() == 100000
    assert not hasattr(t, "__salary")
    assert t._Teacher__salary == 100000


def test_teacher_copy_constructor(capsys):
    t1 = Teacher("aniket")
    t1.subject = "OOP"
    t1.set_salary(100000)
    t1.change_dept("ECE")
    t3 = copy.copy(t1)
    assert "Copy constructor called" in capsys.readouterr().out
    assert (t3.name, t3.dept, t3.subject, t3.get_salary()) == ("aniket", "ECE", "OOP", 100000)


def test_access_conventions_table():
    table = access_conventions()
    assert list(table["Convention"]) == ["public", "protected", "private"]


def test_teacher_default_salary_is_zero():
    assert Teacher().get_salary() == 0


def test_teacher_deepcopy_uses_copy_constructor(capsys):
    t1 = Teacher("aniket")
    t1.set_salary(5)
    capsys.readouterr()
    t2 = copy.deepcopy(t1)
    assert "Copy constructor called" in capsys.readouterr().out
    assert t2.get_salary() == 5
