"""Runtime values. Values are immutable and copied freely; str gives the form printed by the shell."""

from dataclasses import dataclass


class Value:
    """Superclass of every runtime value."""
    kind = "value"


@dataclass(frozen=True)
class Integer(Value):
    value: int
    kind = "integer"

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Float(Value):
    value: float
    kind = "float"

    def __str__(self):
        if self.value.is_integer():
            return str(int(self.value))  # 3.0 prints as 3
        return repr(self.value)


@dataclass(frozen=True)
class Boolean(Value):
    value: bool
    kind = "boolean"

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NoneValue(Value):
    """Absence of a value, e.g. the result of let or ()."""
    kind = "empty value"

    def __str__(self):
        return "()"


NONE = NoneValue()
