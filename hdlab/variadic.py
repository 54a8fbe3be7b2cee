"""Printing of an initial label followed by any number of string arguments."""


def format_variadic(initial: str, *args: str) -> str:
    """Return the text that ``variadic_print`` writes."""
    for arg in args:
        if not isinstance(arg, str):
            raise TypeError(f"arguments must be strings, got {type(arg).__name__}")
    lines = [
        f"variadic_print called with {len(args)} parameters.",
        f"{initial}: ",
        *(f"arg: {cnt}, value: {value}" for cnt, value in enumerate(args, start=1)),
    ]
    return "\n".join(lines) + "\n\n\n"


def variadic_print(initial: str, *args: str) -> None:
    """Print the label and each argument with its position."""
    print(format_variadic(initial, *args), end="")


def main(argv: list[str] | None = None) -> int:
    """Print three examples with zero, one and two arguments."""
    variadic_print("initial")
    variadic_print("initial", "test1")
    variadic_print("initial", "test1", "test2")
    return 0