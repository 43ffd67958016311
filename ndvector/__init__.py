from .datatypes import Vector, VectorError, InvalidInput, InvalidIndex, DimensionMismatch, DivisionByZero, EmptyVector, NoImplementation
from .factory import VectorFactory, Backend, get_backend, create_vector
