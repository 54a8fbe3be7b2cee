"""Factorial as a floating-point value."""


def factorial(k: int) -> float:
    """Return k! as a float; 0! and 1! are 1."""
    if k < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1.0
    for i in range(2, k + 1):
        result *= i
    return result