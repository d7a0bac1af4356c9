class InstanceCounter:
    """count belongs to the class and is shared by every instance."""

    count = 0

    def __init__(self):
        InstanceCounter.count += 1

    @staticmethod
    def display_count():
        print(f"Count: {InstanceCounter.count}")


class SharedValue:
    """Static functions: usable without creating an object, touch only class state."""

    value = 0

    @staticmethod
    def set_value(v):
        SharedValue.value = v

    @staticmethod
    def get_value():
        return SharedValue.value
