"""Basic usage example for cdllist."""

from cdllist import CdlList


def main() -> None:
    """Demonstrate basic list operations."""
    lst = CdlList[int]()

    print("=== Pushing at both ends ===\n")
    lst.push_front(1)
    lst.push_back(2)
    lst.push_front(3)
    print(f"List: {lst}")
    print(f"Size: {lst.size()}\n")

    front = lst.peek_front()
    back = lst.peek_back()
    if front is not None and back is not None:
        print(f"Front: {front.value}, back: {back.value}\n")

    print("=== Indexed edits ===\n")
    lst.insert_at(1, 10)
    print(f"After insert_at(1, 10): {lst}")
    if not lst.insert_at(99, 0):
        print("insert_at(99, 0) was out of range")
    print(f"remove_at(2) -> {lst.remove_at(2)}")
    print(f"List: {lst}\n")

    print("=== Popping ===\n")
    while not lst.is_empty():
        print(f"  pop_back -> {lst.pop_back()}")

    print(f"\nFinal: {lst!r}")


if __name__ == "__main__":
    main()
