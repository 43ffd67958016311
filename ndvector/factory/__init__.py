from .backend import Backend, get_backend
from .factory import VectorFactory, create_vector, DEFAULT_FACTORY
