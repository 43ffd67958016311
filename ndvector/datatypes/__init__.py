from .errors import VectorError, InvalidInput, InvalidIndex, DimensionMismatch, DivisionByZero, EmptyVector, NoImplementation
from .vector import Vector, parse_component
