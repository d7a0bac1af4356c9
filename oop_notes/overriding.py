class Parent:
    def print(self):
        print("print function")


class Child(Parent):
    def print(self):
        """Overrides Parent.print."""
        print("print function in Child")


def call_print(obj: Parent):
    # Resolved at call time from the object's actual class
    obj.print()
