class Backlash:
    """
    Deadband with memory: the output only follows the input once the input
    has left the window of +/- width/2 around the last accepted value.
    """

    def __init__(self, width: int):
        self._width = width
        self._half = width // 2
        self._value = 0

    def update(self, value: int) -> int:
        if value > self._value + self._half:
            self._value = value - self._half
        elif value < self._value - self._half:
            self._value = value + self._half
        return self._value

    @property
    def value(self) -> int:
        return self._value

    @property
    def width(self) -> int:
        return self._width
