import pandas as pd


class Teacher:
    """Bundles a teacher's data with the methods that work on it."""

    def __init__(self, name=None):
        # One constructor, two forms: Teacher() and Teacher("name")
        if name is None:
            print("Constructor1 called")
            name = ""
        else:
            print("Constructor2 called")
        self.name = name
        self.dept = "CSE"
        self.subject = ""
        self.__salary = 0  # private, stored as _Teacher__salary

    def __copy__(self):
        """Copy constructor: copy.copy(t) duplicates every field, private ones included."""
        print("Copy constructor called")
        clone = type(self).__new__(type(self))
        clone.name = self.name
        clone.dept = self.dept
        clone.subject = self.subject
        clone.__salary = self.__salary
        return clone

    def __deepcopy__(self, memo):
        return self.__copy__()

    def change_dept(self, new_dept):
        self.dept = new_dept

    def set_salary(self, s):
        self.__salary = s

    def get_salary(self):
        return self.__salary

    def __str__(self):
        return f"Teacher: {self.name}, Dept: {self.dept}, Subject: {self.subject}"


def access_conventions() -> pd.DataFrame:
    """
    Python has no access modifiers; visibility is a naming convention.
    Double-underscore names are mangled to _ClassName__name, which hides
    them from subclasses and casual outside access.
    """
    rows = [
        {"Convention": "public",    "Example": "name",
         "Inside class": "Yes", "Subclass": "Yes", "Outside": "Yes"},
        {"Convention": "protected", "Example": "_name",
         "Inside class": "Yes", "Subclass": "Yes", "Outside": "By convention, no"},
        {"Convention": "private",   "Example": "__name",
         "Inside class": "Yes", "Subclass": "No (mangled)", "Outside": "Only as _Class__name"},
    ]
    return pd.DataFrame(rows)
