"""Small program inspected by the introspection and pipeline tests.

Keep it free of imports: anything imported here would show up as a member
of the module (and be filtered by ``__module__``), which only adds noise.
"""

MAX_RETRIES = 3
GREETING = "hello"
EMPTY_LABEL = ""
lowercase_setting = 5


def zeta(value, *args, **kwargs):
    """Last function in the reference.

    @param mixed value Anything at all
    """
    return value


def add(a, b=5, label=""):
    """Adds two numbers.

    @param int a First operand
    @param int b Second operand,
        defaults to five
    @return int
    """
    return a + b


def undocumented():
    return None


class Calculator:
    """A tiny calculator.

    @since 1.0
    """

    def __init__(self, precision=2):
        self.precision = precision

    def subtract(self, a, b):
        """Subtract b from a."""
        return a - b

    def add(self, a, b=0):
        """Add b to a."""
        return a + b

    @staticmethod
    def describe():
        return "calculator"

    @classmethod
    def create(cls, precision=2):
        """Alternate constructor."""
        return cls(precision)


class Accumulator(Calculator):
    def reset(self):
        return None
