from typing import Iterable

from ..datatypes import Vector, NoImplementation
from ..debug.verbose import errPrint
from .backend import Backend, get_backend

class VectorFactory:
    """
    Creates vectors with a configurable implementation.

    Alternate implementations are injected through the constructor, so
    no global state is shared between factories.

    Attributes
    ----------
    implementation : type[Vector] | None, optional
        Vector class used to build new vectors, by default Vector.
        None disables creation entirely.
    verbose : bool, optional
        Print every created vector to stderr, by default False

    Raises
    ------
    TypeError
        If the implementation is not a Vector subclass or verbose is not a bool
    """
    def __init__(self, implementation : type[Vector] | None = Vector, verbose : bool = False) -> None:
        self.implementation = implementation
        self.verbose = verbose

    @classmethod
    def from_backend(cls, backend : Backend | str, verbose : bool = False) -> "VectorFactory":
        """
        Build a factory from a backend member or its label.

        Parameters
        ----------
        backend : Backend | str
            Backend to build vectors with
        verbose : bool, optional
            Verbose mode of the factory, by default False

        Returns
        -------
        VectorFactory
            Factory using the backend implementation
        """
        if isinstance(backend, str):
            backend = get_backend(backend)
        if not isinstance(backend, Backend):
            raise TypeError("backend must be a Backend or a backend label!")
        return cls(backend.implementation(), verbose)

    # ---------------------------------------------------------------------------- #
    #                              Getters and Setters                             #
    # ---------------------------------------------------------------------------- #

    # ------------------------------ implementation ------------------------------ #

    @property
    def implementation(self) -> type[Vector] | None:
        return self._implementation

    @implementation.setter
    def implementation(self, value) -> None:
        if value is not None and not (isinstance(value, type) and issubclass(value, Vector)):
            raise TypeError("implementation must be a Vector subclass or None!")
        self._implementation : type[Vector] | None = value

    # ---------------------------------- verbose --------------------------------- #

    @property
    def verbose(self) -> bool:
        return self._verbose

    @verbose.setter
    def verbose(self, value) -> None:
        if not isinstance(value, bool):
            raise TypeError("verbose must be a boolean value!")
        self._verbose : bool = value

    # ---------------------------------------------------------------------------- #
    #                                   Creation                                   #
    # ---------------------------------------------------------------------------- #

    def create(self, inputs : Iterable[int | float | str]) -> Vector:
        """
        Create a new vector.

        Parameters
        ----------
        inputs : Iterable[int | float | str]
            Vector components, strings are read as integers

        Returns
        -------
        Vector
            Newly created vector

        Raises
        ------
        NoImplementation
            If the factory has no implementation configured
        InvalidInput
            If the inputs can not build a vector
        """
        if self._implementation is None:
            raise NoImplementation("No valid vector implementation currently available.")

        vector : Vector = self._implementation(inputs)
        if self._verbose:
            errPrint(f"Created {vector} ({vector.dimensions} dimensions) " \
                     f"with {self._implementation.__name__}")
        return vector

    def __repr__(self) -> str:
        name : str = "None" if self._implementation is None else self._implementation.__name__
        return f"VectorFactory(implementation={name}, verbose={self._verbose})"


DEFAULT_FACTORY = VectorFactory()

def create_vector(inputs : Iterable[int | float | str], factory : VectorFactory | None = None) -> Vector:
    """
    Create a new vector, with the default factory unless one is given.

    Parameters
    ----------
    inputs : Iterable[int | float | str]
        Vector components
    factory : VectorFactory | None, optional
        Factory to create the vector with, by default the module default factory

    Returns
    -------
    Vector
        Newly created vector
    """
    if factory is None:
        factory = DEFAULT_FACTORY
    return factory.create(inputs)
