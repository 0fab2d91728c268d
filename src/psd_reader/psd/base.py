"""
Base data structures intended for inheritance.

All the data objects in this subpackage inherit from the base classes here.
That means, all the data structures in the :py:mod:`psd_reader.psd`
subpackage implement :py:meth:`~psd_reader.psd.base.BaseElement.read` over a
shared :py:class:`~psd_reader.psd.bin_utils.Cursor`.

Objects that inherit from the :py:class:`~psd_reader.psd.base.BaseElement`
typically get frozen attrs_ decoration to have data fields.

.. _attrs: https://www.attrs.org/en/stable/index.html
"""

import logging
from enum import Enum
from typing import Any, Callable, Generator, Optional, TypeVar

from attrs import define, field, fields, has

from psd_reader.exceptions import DecodeWarning
from psd_reader.psd.bin_utils import Cursor, trimmed_repr

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseElement")


class BaseElement:
    """
    Base element of various PSD file structs. All the data objects in
    :py:mod:`psd_reader.psd` subpackage inherit from this class.

    .. py:classmethod:: read(cls, cursor, **kwargs)

        Decode the element at the cursor position. On return the cursor
        is at the first byte past the element.

    .. py:classmethod:: frombytes(self, data, *args, **kwargs)

        Read the element from bytes.
    """

    @classmethod
    def read(cls: type[T], cursor: Cursor, **kwargs: Any) -> T:
        raise NotImplementedError()

    @classmethod
    def frombytes(cls: type[T], data: bytes, *args: Any, **kwargs: Any) -> T:
        return cls.read(Cursor(data), *args, **kwargs)

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("{name}(...)".format(name=self.__class__.__name__))
            return

        with p.group(2, "{name}(".format(name=self.__class__.__name__), ")"):
            p.breakable("")
            field_list = [f for f in fields(self.__class__) if f.repr]  # type: ignore[arg-type]
            for idx, field_item in enumerate(field_list):
                if idx:
                    p.text(",")
                    p.breakable()
                p.text("{field}=".format(field=field_item.name))
                value = getattr(self, field_item.name)
                if isinstance(value, bytes):
                    p.text(trimmed_repr(value))
                elif isinstance(value, Enum):
                    p.text(value.name)
                else:
                    p.pretty(value)
            p.breakable("")

    def _find(
        self, condition: Optional[Callable[[Any], bool]] = None
    ) -> Generator[Any, None, None]:
        """
        Traversal API intended for debugging.
        """
        for _ in BaseElement._traverse(self, condition):
            yield _

    @staticmethod
    def _traverse(
        element: Any, condition: Optional[Callable[[Any], bool]] = None
    ) -> Generator[Any, None, None]:
        """
        Depth-first traversal in field order, which is also decode order.
        """
        if condition is None or condition(element):
            yield element
        if isinstance(element, (ListElement, list, tuple)):
            for child in element:
                for _ in BaseElement._traverse(child, condition):
                    yield _
        elif isinstance(element, BaseElement) and has(element.__class__):
            for field_item in fields(element.__class__):
                child = getattr(element, field_item.name)
                for _ in BaseElement._traverse(child, condition):
                    yield _

    def iter_warnings(self) -> Generator[DecodeWarning, None, None]:
        """
        Iterate over advisory :py:class:`~psd_reader.exceptions.DecodeWarning`
        records found in this element and its children, in decode order.
        """
        return self._find(lambda x: isinstance(x, DecodeWarning))


@define(repr=False, frozen=True)
class ListElement(BaseElement):
    """
    Read-only list-like element that has `items` tuple.
    """

    _items: tuple = field(factory=tuple, converter=tuple)

    def index(self, x: Any) -> int:
        return self._items.index(x)

    def count(self, x: Any) -> int:
        return self._items.count(x)

    def __len__(self) -> int:
        return self._items.__len__()

    def __iter__(self) -> Any:
        return self._items.__iter__()

    def __getitem__(self, key: Any) -> Any:
        return self._items.__getitem__(key)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return list(self._items).__repr__()

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("[...]")
            return

        with p.group(2, "[", "]"):
            p.breakable("")
            for idx in range(len(self._items)):
                if idx:
                    p.text(",")
                    p.breakable()
                value = self._items[idx]
                if isinstance(value, bytes):
                    value = trimmed_repr(value)
                p.pretty(value)
            p.breakable("")
