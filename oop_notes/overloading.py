from functools import singledispatchmethod


class Printer:
    """print() picks its implementation from the argument's type."""

    def print(self, *args):
        if not args:
            print("print function")
            return
        self._print_one(*args)

    @singledispatchmethod
    def _print_one(self, x):
        raise TypeError(f"No print overload for {type(x).__name__}")

    @_print_one.register
    def _(self, x: int):
        print("print function with int parameter")

    @_print_one.register
    def _(self, x: float):
        print("print function with double parameter")


class Adder:
    """Operator overloading: the same + behaves per operand type."""

    def __add__(self, other):
        # bool is an int subclass; exclude it like any other non-number
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            print("operator+ function with int parameter")
            return self
        if isinstance(other, float):
            print("operator+ function with double parameter")
            return self
        return NotImplemented
