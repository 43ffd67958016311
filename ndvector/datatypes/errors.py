class VectorError(Exception):
    """
    Base class for every error raised by a Vector operation.
    """

class InvalidInput(VectorError, ValueError):
    """
    Raised when a required argument is missing or cannot be read as a number
    (input sequence, component, operand vector, pushed value).
    """

class InvalidIndex(VectorError, IndexError):
    """
    Raised when a component index is missing, negative or not an integer.
    """

class DimensionMismatch(VectorError, ValueError):
    """
    Raised when an elementwise operation receives vectors with different dimensions.
    """

class DivisionByZero(VectorError, ZeroDivisionError):
    """
    Raised when a divisor vector holds a zero component.
    """

class EmptyVector(VectorError, ValueError):
    """
    Raised when the length of a zero-dimensional vector is requested.
    """

class NoImplementation(VectorError, NotImplementedError):
    """
    Raised when a factory has no vector implementation to build with.
    """
