"""
Validation functions for attr.

Decoded values are never rejected on range grounds; these validators are
run through :py:func:`check` so a failure becomes an advisory message.
"""
from typing import Any, Iterable

import attr
from attr.validators import in_

__all__ = ['in_', 'range_', 'check']


@attr.s(repr=False, slots=True, hash=True)
class _RangeValidator(object):
    minimum = attr.ib()
    maximum = attr.ib()

    def __call__(self, inst, attr, value):
        try:
            in_range = self.minimum <= value and value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise ValueError(
                "'{name}' must be in range [{minimum!r}, {maximum!r}]: {value!r}".format(
                    name=attr.name, minimum=self.minimum, maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self):
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def range_(minimum, maximum):
    """
    A validator that raises a :exc:`ValueError` if the initializer is called
    with a value that does not belong in the [minimum, maximum] range. The
    check is performed using ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum)


def check(inst: Any, checks: Iterable[tuple]) -> list:
    """
    Runs ``(attribute name, validator)`` pairs against ``inst``.

    :return: list of failure messages, empty when every value is legal.
    """
    messages = []
    fields = attr.fields_dict(inst.__class__)
    for name, validator in checks:
        try:
            validator(inst, fields[name], getattr(inst, name))
        except ValueError as e:
            messages.append(str(e.args[0]) if e.args else str(e))
    return messages
