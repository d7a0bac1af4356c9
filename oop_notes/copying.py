"""
copying.py — Shallow vs Deep Copy
=================================
A shallow copy duplicates the fields of an object verbatim, so any mutable
resource it holds ends up shared between the two objects. A deep copy also
duplicates that resource, so each object owns its own.

Both student classes below hold a NumericCell: one float64 slot on its own
numpy buffer, allocated at construction and released when the owner is torn
down. The shallow variant shares the cell and therefore releases it twice;
that is the point of the lesson and is left as-is.
"""

import numpy as np


class NumericCell:
    """A single heap-style float slot with an explicit release."""

    def __init__(self, value=0.0):
        self._buffer = np.zeros(1, dtype=np.float64)
        self._buffer[0] = value
        self.release_count = 0

    @property
    def value(self) -> float:
        return float(self._buffer[0])

    @value.setter
    def value(self, new_value: float):
        self._buffer[0] = new_value

    def shares_memory(self, other: "NumericCell") -> bool:
        return bool(np.shares_memory(self._buffer, other._buffer))

    def clone(self) -> "NumericCell":
        """Allocate a new cell holding the same value."""
        return NumericCell(self.value)

    def release(self):
        self.release_count += 1
        if self.release_count > 1:
            print(f"  [WARN] Cell {id(self):#x} released {self.release_count} times "
                  "(double release)")


class _CgpaStudent:
    """Shared layout for the two copy lessons: a name plus an owned CGPA cell."""

    def __init__(self, name: str, cgpa: float):
        self.name = name
        self.cgpa_cell = NumericCell(cgpa)

    @property
    def cgpa(self) -> float:
        return self.cgpa_cell.value

    @cgpa.setter
    def cgpa(self, value: float):
        # Writes go through the cell, so aliased owners see them too
        self.cgpa_cell.value = value

    def get_info(self):
        print(f"Name: {self.name}")
        print(f"CGPA: {self.cgpa}")

    def __del__(self):
        cell = getattr(self, "cgpa_cell", None)
        if cell is not None:
            cell.release()


class StudentShallow(_CgpaStudent):
    """Copies share one CGPA cell with the original."""

    def __copy__(self):
        # Same result as the default copy.copy: the cell reference is duplicated
        print("Shallow copy constructor called")
        clone = type(self).__new__(type(self))
        clone.name = self.name
        clone.cgpa_cell = self.cgpa_cell
        return clone

    def __deepcopy__(self, memo):
        # One copy constructor: copy.deepcopy aliases the cell as well
        return self.__copy__()


class StudentDeep(_CgpaStudent):
    """Copies get a fresh CGPA cell holding the same value."""

    def __copy__(self):
        print("Copy constructor (Deep copy) called")
        clone = type(self).__new__(type(self))
        clone.name = self.name
        clone.cgpa_cell = self.cgpa_cell.clone()
        return clone

    def __deepcopy__(self, memo):
        return self.__copy__()
