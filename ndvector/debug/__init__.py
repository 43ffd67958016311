from .verbose import errPrint
