from abc import ABC, abstractmethod


# 1. The Abstract Interface
class Printable(ABC):
    @abstractmethod
    def print(self):
        pass

    def show(self):
        print("show function in Printable")


# 2. Concrete Implementation
class Document(Printable):
    def print(self):
        print("print function in Document")
