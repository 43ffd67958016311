import sys

def errPrint(*args, **kwargs) -> None:
    """
    Print diagnostics to standard error, keeping standard output clean for callers.
    """
    print(*args, file=sys.stderr, **kwargs)
