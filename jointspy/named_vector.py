from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from jointspy.exceptions import NameNotFound

T = TypeVar("T")


class NamedVector(Generic[T]):
    """A list of elements with an optional, parallel list of names.

    ``names`` is either empty or has one entry per element, so that
    ``names[i]`` names ``elements[i]``.
    """

    def __init__(
        self,
        names: Optional[List[str]] = None,
        elements: Optional[List[T]] = None,
        element_factory: Callable[[], T] = lambda: None,
    ) -> None:
        self.names: List[str] = list(names) if names is not None else []
        self.elements: List[T] = list(elements) if elements is not None else []
        self.element_factory = element_factory

    def size(self) -> int:
        return len(self.elements)

    def empty(self) -> bool:
        return not self.elements

    def has_names(self) -> bool:
        return bool(self.names)

    def has_consistent_names(self) -> bool:
        return not self.names or len(self.names) == len(self.elements)

    def clear(self) -> None:
        self.names.clear()
        self.elements.clear()

    def resize(self, size: int) -> None:
        """Resize names and elements to ``size`` entries.

        Existing entries are kept, new names are empty strings and new elements
        are created with the element factory.
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        _resize_list(self.elements, size, self.element_factory)
        _resize_list(self.names, size, str)

    def map_name_to_index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise NameNotFound(name) from None

    def get_element_by_name(self, name: str) -> T:
        return self.elements[self.map_name_to_index(name)]

    def set_element_by_name(self, name: str, value: T) -> None:
        self.elements[self.map_name_to_index(name)] = value

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NamedVector):
            return NotImplemented
        return self.names == other.names and self.elements == other.elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}(names={self.names!r}, elements={self.elements!r})"


def _resize_list(values: list, size: int, factory: Callable[[], Any]) -> None:
    if size < len(values):
        del values[size:]
    else:
        values.extend(factory() for _ in range(size - len(values)))
