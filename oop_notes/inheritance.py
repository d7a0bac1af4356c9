# Base Class #
class Person:
    """Root of the hierarchy. Constructed first, torn down last."""

    def __init__(self, name, age):
        print("Person constructor called")
        self.name = name
        self.age = age

    def __del__(self):
        print("Person destructor called")


# Child Class of Person #
class Student(Person):
    """Inherits name and age from Person, adds a roll number."""

    def __init__(self, name, age, rollno):
        # Base part is built before anything Student-specific
        super().__init__(name, age)
        print("Student constructor called")
        self.rollno = rollno

    def get_info(self):
        print(f"Name: {self.name}")
        print(f"Age: {self.age}")
        print(f"Roll No: {self.rollno}")

    def __del__(self):
        # Reverse order: Student teardown, then Person
        print("Student destructor called")
        super().__del__()
