from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")
