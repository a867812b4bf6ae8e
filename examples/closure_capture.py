"""Example: late binding, default-argument capture and nonlocal mutation."""


def make_readers():
    late = []
    frozen = []
    for i in range(3):
        late.append(lambda: i)
        frozen.append(lambda i=i: i)
    return late, frozen


def make_setter():
    thing = 0

    def set_thing(value: int) -> None:
        nonlocal thing
        thing = value

    def get_thing() -> int:
        return thing

    return set_thing, get_thing


def main() -> None:
    late, frozen = make_readers()
    set_thing, get_thing = make_setter()
    before = get_thing()
    set_thing(2)
    # Minimal stable output
    print("ok", [f() for f in late], [f() for f in frozen], before, get_thing())


if __name__ == "__main__":
    main()
