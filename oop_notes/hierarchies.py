"""
hierarchies.py — Types of Inheritance
=====================================
  1. single:       Vehicle -> Car
  2. multilevel:   Vehicle -> Car -> SportsCar
  3. hierarchical: Vehicle -> Car, Vehicle -> Truck
  4. multiple:     Engine, Radio -> SmartCar
  5. hybrid:       Car, Truck -> Ute   (diamond over Vehicle)

Each constructor calls its base constructors by name, in the order the bases
are declared, and prints once they have run. Bases therefore report first,
left to right. Vehicle skips itself if it has already run on this object, so
the diamond builds it exactly once.
"""


class Vehicle:
    def __init__(self):
        if getattr(self, "_vehicle_built", False):
            return
        self._vehicle_built = True
        print("Vehicle constructor called")


class Car(Vehicle):
    def __init__(self):
        Vehicle.__init__(self)
        print("Car constructor called")


class Truck(Vehicle):
    def __init__(self):
        Vehicle.__init__(self)
        print("Truck constructor called")


class SportsCar(Car):
    def __init__(self):
        Car.__init__(self)
        print("SportsCar constructor called")


class Engine:
    def __init__(self):
        print("Engine constructor called")


class Radio:
    def __init__(self):
        print("Radio constructor called")


class SmartCar(Engine, Radio):
    def __init__(self):
        Engine.__init__(self)
        Radio.__init__(self)
        print("SmartCar constructor called")


class Ute(Car, Truck):
    def __init__(self):
        Car.__init__(self)
        Truck.__init__(self)
        print("Ute constructor called")


INHERITANCE_KINDS = {
    "single":       Car,
    "multilevel":   SportsCar,
    "hierarchical": Truck,
    "multiple":     SmartCar,
    "hybrid":       Ute,
}


def construction_chain(cls) -> list[str]:
    """Class names in the order their constructors print: bases left to right, each once."""
    chain = []

    def visit(klass):
        for base in klass.__bases__:
            if base is not object:
                visit(base)
        if klass.__name__ not in chain:
            chain.append(klass.__name__)

    visit(cls)
    return chain
