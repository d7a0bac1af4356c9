"""
oop_notes — Object-Oriented Programming Notes
=============================================
Small runnable lessons on constructors, copy semantics, inheritance,
polymorphism, abstraction and static members.

Usage:
    python -m oop_notes [--demo inheritance] [--list]
"""

from .abstraction import Document, Printable
from .copying import NumericCell, StudentDeep, StudentShallow
from .encapsulation import Teacher
from .inheritance import Person, Student
from .overloading import Adder, Printer
from .overriding import Child, Parent
from .static_members import InstanceCounter, SharedValue

__all__ = [
    "Adder",
    "Child",
    "Document",
    "InstanceCounter",
    "NumericCell",
    "Parent",
    "Person",
    "Printable",
    "Printer",
    "SharedValue",
    "Student",
    "StudentDeep",
    "StudentShallow",
    "Teacher",
]
