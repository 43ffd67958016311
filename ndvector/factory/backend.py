from enum import Enum

from ..datatypes import Vector
from ..debug.verbose import errPrint

class Backend(Enum):
    """
    Enum Class for the built-in vector implementations

    The NONE member carries no implementation, factories built from it
    refuse to create vectors.
    """
    DEFAULT = 0, "default", Vector
    NONE = 1, "none", None

    def __str__(self):
        return self.value[1]

    def __int__(self):
        return self.value[0]

    def implementation(self) -> type[Vector] | None:
        return self.value[2]

def get_backend(label : str) -> Backend:
    """
    Find the backend matching a configuration label.

    Parameters
    ----------
    label : str
        Backend name, case insensitive

    Returns
    -------
    Backend
        Matching backend, DEFAULT when the label is unknown
    """
    match label.strip().lower():
        case 'default' | 'vector' | 'dense':
            return Backend.DEFAULT
        case 'none' | 'disabled' | 'off':
            return Backend.NONE
        case _:
            errPrint(f"Warning: {label} is not a valid vector backend, using default")
            return Backend.DEFAULT
