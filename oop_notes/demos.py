"""
demos.py — Lesson Runners
=========================
One function per lesson, plus a small registry so the CLI can list and pick
them by name.
"""

import copy

import pandas as pd

from . import config
from .abstraction import Document, Printable
from .copying import StudentDeep, StudentShallow
from .encapsulation import Teacher, access_conventions
from .hierarchies import INHERITANCE_KINDS, construction_chain
from .inheritance import Student
from .overloading import Adder, Printer
from .overriding import Child, Parent, call_print
from .static_members import InstanceCounter, SharedValue


# ── Lessons ───────────────────────────────────────────────────────────────────
def demo_encapsulation():
    t1 = Teacher(config.TEACHER_NAME)
    t2 = Teacher()
    t1.subject = config.TEACHER_SUBJECT
    # t1.__salary is not reachable here; go through the setter
    t1.set_salary(config.TEACHER_SALARY)
    print(t1.get_salary())
    t1.change_dept("CSE")
    t3 = copy.copy(t1)
    print(t3)
    print(f"Default-constructed: {t2}")

    print("\n  Access Conventions:")
    print(access_conventions().to_string(index=False))


def demo_shallow():
    name, cgpa = config.SHALLOW_STUDENT
    s1 = StudentShallow(name, cgpa)
    s1.get_info()
    s2 = copy.copy(s1)
    s2.cgpa = config.UPDATED_CGPA
    s1.get_info()  # changed too: s1 and s2 share one cell
    s2.get_info()
    print(f"Shared cell: {s1.cgpa_cell.shares_memory(s2.cgpa_cell)}")
    # Both owners release the same cell when this function returns


def demo_deep():
    name, cgpa = config.DEEP_STUDENT
    s3 = StudentDeep(name, cgpa)
    s3.get_info()
    s4 = copy.copy(s3)
    s4.cgpa = config.UPDATED_CGPA
    s3.get_info()  # unchanged: s4 owns its own cell
    s4.get_info()
    print(f"Shared cell: {s3.cgpa_cell.shares_memory(s4.cgpa_cell)}")


def demo_inheritance():
    name, age, rollno = config.PERSON_STUDENT
    s1 = Student(name, age, rollno)
    s1.get_info()
    del s1


def demo_hierarchies():
    for i, (kind, cls) in enumerate(INHERITANCE_KINDS.items(), start=1):
        chain = " -> ".join(construction_chain(cls))
        print(f"\n[{i}/{len(INHERITANCE_KINDS)}] {kind}: {chain}")
        cls()


def demo_overloading():
    p = Printer()
    p.print()
    p.print(5)
    p.print(5.5)
    a = Adder()
    a + 5
    a + 5.5


def demo_overriding():
    for obj in [Parent(), Child()]:
        call_print(obj)


def demo_abstraction():
    try:
        Printable()
    except TypeError as e:
        print(f"  [WARN] {e}")
    d = Document()
    d.print()
    d.show()


def demo_static():
    for _ in range(config.STATIC_INSTANCES):
        InstanceCounter()  # discarded immediately, count still grows
    InstanceCounter.display_count()
    SharedValue.set_value(config.SHARED_VALUE)
    print(f"Value: {SharedValue.get_value()}")


# ── Registry ──────────────────────────────────────────────────────────────────
DEMOS = {
    "encapsulation": ("Encapsulation",           "Constructors, copy constructor, private salary", demo_encapsulation),
    "shallow":       ("Shallow Copy Example",    "Copies alias one CGPA cell",                     demo_shallow),
    "deep":          ("Deep Copy Example",       "Copies own independent CGPA cells",              demo_deep),
    "inheritance":   ("Inheritance",             "Base built first, torn down last",               demo_inheritance),
    "hierarchies":   ("Types of Inheritance",    "Single, multilevel, hierarchical, multiple, hybrid", demo_hierarchies),
    "overloading":   ("Overloading",             "Method and operator selection by argument type", demo_overloading),
    "overriding":    ("Overriding",              "Runtime dispatch on the actual class",           demo_overriding),
    "abstraction":   ("Abstraction",             "Abstract base cannot be instantiated",           demo_abstraction),
    "static":        ("Static Members",          "Class-wide counter and static functions",        demo_static),
}


def get_demo(name: str):
    name = name.lower().strip()
    if name not in DEMOS:
        raise ValueError(f"Unknown demo: {name}")
    return DEMOS[name]


def demo_table() -> pd.DataFrame:
    return pd.DataFrame(
        [{"demo": key, "topic": topic, "summary": summary}
         for key, (topic, summary, _) in DEMOS.items()]
    )


def run_demos(names):
    # Look every name up first so a typo fails before any output
    selected = [get_demo(n) for n in names]
    for topic, _, runner in selected:
        print(f"=== {topic} ===")
        runner()
        print()
