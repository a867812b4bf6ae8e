"""Example: a class with __call__ and a lambda passed to the same higher-order function."""


class Adder:
    def __init__(self, offset: int) -> None:
        self.offset = offset

    def __call__(self, a: int, b: int) -> int:
        return a + b + self.offset


def apply(a: int, b: int, func) -> int:
    return func(a, b)


def main() -> None:
    functor = Adder(0)
    closure = lambda a, b: a + b  # noqa: E731
    print("ok", apply(2, 3, functor), apply(2, 3, closure), callable(functor), callable(closure))


if __name__ == "__main__":
    main()
