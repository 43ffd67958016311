import re
import operator
from types import NotImplementedType
from typing import Any, Callable, Iterable, Iterator, Mapping

import numpy as np

from .errors import InvalidInput, InvalidIndex, DimensionMismatch, DivisionByZero, EmptyVector

# Leading decimal integer of a string component, e.g. "5.0" -> "5"
INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")

FLOAT_MAX : float = float(np.finfo(np.float64).max)

def _bounded(number : int) -> int | float:
    # Integers beyond the float64 range are stored as signed infinity
    if abs(number) > FLOAT_MAX:
        return float("inf") if number > 0 else float("-inf")
    return number

def _format_component(value : int | float) -> str:
    if isinstance(value, float):
        if np.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)

def parse_component(value : Any) -> int | float:
    """
    Normalize a single vector component.

    Strings are read as decimal integers, keeping only the leading integer
    part ("5.0" becomes 5). Numbers are kept as they are, with numpy scalars
    converted to the matching python number.

    Parameters
    ----------
    value : Any
        Raw component value

    Returns
    -------
    int | float
        Component value ready for storage

    Raises
    ------
    InvalidInput
        If the value is None, a non-numeric object, an unparseable string or NaN
    """
    if value is None:
        raise InvalidInput("Vector components can not be None.")

    if isinstance(value, str):
        digits = INTEGER_PREFIX.match(value)
        if digits is None:
            raise InvalidInput(f"Unable to parse '{value}' as a vector component.")
        text : str = digits.group(1)
        try:
            return _bounded(int(text))
        except ValueError:
            # Past the interpreter's int digit limit, the value is far outside float range
            return float(text)

    # bool is an int subclass in python, but not a number here
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInput("Vector cannot be constructed from boolean values.")
    if isinstance(value, (np.integer, np.floating)):
        value = value.item()
    if not isinstance(value, (int, float)):
        raise InvalidInput(f"Vector cannot be constructed from non-number values ({type(value).__name__}).")
    if isinstance(value, float) and np.isnan(value):
        raise InvalidInput("Vector cannot be constructed from NaN values.")
    if isinstance(value, int):
        return _bounded(value)
    return value


class Vector:
    """
    An ordered numeric container with a runtime-determined number of
    dimensions, supporting component management and elementwise arithmetic.

    Component management (push, remove, clear) modifies the vector in place,
    while arithmetic (add, sub, mul, div) always returns a new Vector.

    Attributes
    ----------
    _components : list[int | float]
        The stored components, in coordinate order

    Raises
    ------
    InvalidInput
        If the input sequence is None, not a sequence, or holds a value
        that can not be read as a number
    """
    def __init__(self, inputs : Iterable[int | float | str]) -> None:
        if inputs is None:
            raise InvalidInput("Vector can not be constructed from None, use [] to create an empty vector.")
        if isinstance(inputs, (str, bytes, Mapping)):
            raise InvalidInput(f"Vector can not be constructed from a {type(inputs).__name__}.")
        try:
            values : list[Any] = list(inputs)
        except TypeError:
            raise InvalidInput(f"Vector input must be a sequence, not {type(inputs).__name__}.")

        if any(value is None for value in values):
            raise InvalidInput("Vector values can not be None.")

        self._components : list[int | float] = [parse_component(value) for value in values]

    # ---------------------------------------------------------------------------- #
    #                              Getters and Setters                             #
    # ---------------------------------------------------------------------------- #

    # -------------------------------- dimensions -------------------------------- #

    @property
    def dimensions(self) -> int:
        """
        Returns the vector cardinality.

        Returns
        -------
        int
            Number of components held by the vector
        """
        return len(self._components)

    # -------------------------------- components -------------------------------- #

    @property
    def components(self) -> list[int | float]:
        """
        Returns a copy of the vector components.

        Returns
        -------
        list[int | float]
            Components in coordinate order
        """
        return list(self._components)

    # ---------------------------------------------------------------------------- #
    #                             Component Management                             #
    # ---------------------------------------------------------------------------- #

    def _check_index(self, i : Any) -> int:
        if i is None:
            raise InvalidIndex("Index can not be None.")
        if isinstance(i, (bool, np.bool_)) or not isinstance(i, (int, float, np.integer, np.floating)):
            raise InvalidIndex(f"Index must be an integer, not {type(i).__name__}.")
        if i < 0:
            raise InvalidIndex("Index should not be negative.")
        if not isinstance(i, (int, np.integer)) and not float(i).is_integer():
            raise InvalidIndex(f"Index should be an integer, got {i}.")
        return int(i)

    def get(self, i : int) -> int | float | None:
        """
        Retrieve a component based on its index.

        Parameters
        ----------
        i : int
            Index of the component to retrieve

        Returns
        -------
        int | float | None
            The component value, or None if the index is out of range

        Raises
        ------
        InvalidIndex
            If the index is None, negative or not an integer
        """
        index : int = self._check_index(i)
        if index >= self.dimensions:
            return None
        return self._components[index]

    def push(self, value : int | float | str) -> int:
        """
        Append a component to the vector.

        Parameters
        ----------
        value : int | float | str
            Component to append, read with the same rules as construction

        Returns
        -------
        int
            Index of the newly pushed component

        Raises
        ------
        InvalidInput
            If the value is None or can not be read as a number
        """
        if value is None:
            raise InvalidInput("Pushed component can not be None.")
        self._components.append(parse_component(value))
        return self.dimensions - 1

    def remove(self, i : int) -> int | float | None:
        """
        Remove a component based on its index, shifting later components down.

        Parameters
        ----------
        i : int
            Index of the component to remove

        Returns
        -------
        int | float | None
            The removed component value, or None if the index is out of range

        Raises
        ------
        InvalidIndex
            If the index is None, negative or not an integer
        """
        index : int = self._check_index(i)
        if index >= self.dimensions:
            return None
        return self._components.pop(index)

    def clear(self) -> "Vector":
        """
        Remove every component of the vector.

        Returns
        -------
        Vector
            The same vector, now zero-dimensional
        """
        self._components.clear()
        return self

    def copy(self) -> "Vector":
        """
        Returns an independent vector with the same components.

        Returns
        -------
        Vector
            New vector of the same class
        """
        return type(self)(self._components)

    def to_array(self) -> np.ndarray:
        """
        Copy the components into a numpy array.

        Returns
        -------
        numpy.ndarray
            1D float64 array of the components
        """
        return np.array(self._components, dtype=np.float64)

    # ---------------------------------------------------------------------------- #
    #                             Arithmetic Operations                            #
    # ---------------------------------------------------------------------------- #

    def _check_operand(self, v : Any, action : str) -> None:
        if v is None:
            raise InvalidInput(f"Vector to {action} can not be None.")
        if not isinstance(v, Vector):
            raise InvalidInput(f"Unable to {action} a {type(v).__name__}, a Vector is required.")
        if v.dimensions != self.dimensions:
            raise DimensionMismatch(f"Vectors must have the same dimensions to {action} " \
                                    f"({self.dimensions} != {v.dimensions}).")

    def _elementwise(self, v : "Vector", operation : Callable[[Any, Any], Any]) -> "Vector":
        return type(self)([operation(a, b) for a, b in zip(self._components, v._components)])

    def add(self, v : "Vector") -> "Vector":
        """
        Elementwise addition.

        Parameters
        ----------
        v : Vector
            Vector to add

        Returns
        -------
        Vector
            New vector holding self[k] + v[k]

        Raises
        ------
        InvalidInput
            If v is None or not a Vector
        DimensionMismatch
            If v does not have the same dimensions
        """
        self._check_operand(v, "add")
        return self._elementwise(v, operator.add)

    def sub(self, v : "Vector") -> "Vector":
        """
        Elementwise subtraction, self[k] - v[k].
        """
        self._check_operand(v, "subtract")
        return self._elementwise(v, operator.sub)

    def mul(self, v : "Vector") -> "Vector":
        """
        Elementwise multiplication, self[k] * v[k].
        """
        self._check_operand(v, "multiply")
        return self._elementwise(v, operator.mul)

    def div(self, v : "Vector") -> "Vector":
        """
        Elementwise division.

        Parameters
        ----------
        v : Vector
            Divisor vector

        Returns
        -------
        Vector
            New vector holding self[k] / v[k]

        Raises
        ------
        InvalidInput
            If v is None or not a Vector
        DimensionMismatch
            If v does not have the same dimensions
        DivisionByZero
            If any component of v is zero
        """
        self._check_operand(v, "divide")
        # Check every divisor before computing anything
        for k, divisor in enumerate(v._components):
            if divisor == 0:
                raise DivisionByZero(f"Division by zero at component {k} is not allowed.")
        return self._elementwise(v, operator.truediv)

    def length(self) -> float:
        """
        Computes the euclidean length of the vector.

        Returns
        -------
        float
            Square root of the sum of squared components

        Raises
        ------
        EmptyVector
            If the vector has no components
        """
        if self.dimensions == 0:
            raise EmptyVector("Cannot compute length on vector with cardinality 0.")
        return float(np.sqrt(np.sum(np.square(self.to_array()))))

    # ---------------------------------------------------------------------------- #
    #                             Comparison Operations                            #
    # ---------------------------------------------------------------------------- #

    def equals(self, other : "Vector") -> bool:
        """
        Checks whether two vectors hold exactly the same components.

        Parameters
        ----------
        other : Vector
            Vector to compare against

        Returns
        -------
        bool
            False if the dimensions differ, otherwise whether every
            component pair is exactly equal

        Raises
        ------
        InvalidInput
            If other is None or not a Vector
        """
        if other is None:
            raise InvalidInput("Vector to compare against can not be None.")
        if not isinstance(other, Vector):
            raise InvalidInput(f"Unable to compare a Vector with a {type(other).__name__}.")
        if other.dimensions != self.dimensions:
            return False
        return all(a == b for a, b in zip(self._components, other._components))

    def to_string(self) -> str:
        """
        Converts the vector to a readable string.

        Integral floats are shown without a fraction and infinities as
        Infinity, e.g. Vector[2 0.5 Infinity].

        Returns
        -------
        str
            Space separated components, or Vector[Empty] for a zero-dimensional vector
        """
        if self.dimensions == 0:
            return "Vector[Empty]"
        return f"Vector[{' '.join(map(_format_component, self._components))}]"

    # ---------------------------------------------------------------------------- #
    #                                 Magic Methods                                #
    # ---------------------------------------------------------------------------- #

    def __len__(self) -> int:
        return self.dimensions

    def __iter__(self) -> Iterator[int | float]:
        return iter(list(self._components))

    def __getitem__(self, index : int) -> int | float:
        value : int | float | None = self.get(index)
        if value is None:
            raise InvalidIndex(f"Index {index} is out of range for a {self.dimensions}-dimensional Vector.")
        return value

    def __repr__(self) -> str:
        return f"Vector([{', '.join(map(str, self._components))}])"

    def __str__(self) -> str:
        return self.to_string()

    def __add__(self, other) -> "Vector | NotImplementedType":
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other) -> "Vector | NotImplementedType":
        if isinstance(other, Vector):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other) -> "Vector | NotImplementedType":
        if isinstance(other, Vector):
            return self.mul(other)
        return NotImplemented

    def __truediv__(self, other) -> "Vector | NotImplementedType":
        if isinstance(other, Vector):
            return self.div(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return False
        return self.equals(other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    # Mutable container
    __hash__ = None
