"""Example showing how peek views expire after the list changes."""

from cdllist import CdlList, StaleReferenceError


def main() -> None:
    """Take a view, mutate the list, then try to read the view."""
    lst = CdlList(["alpha", "beta", "gamma"])

    head = lst.peek_front()
    assert head is not None
    print(f"Head before pop: {head.value}")

    lst.pop_front()
    print(f"View still valid: {head.is_valid}")

    try:
        print(head.value)
    except StaleReferenceError as exc:
        print(f"Reading the old view failed: {exc}")

    fresh = lst.peek_front()
    assert fresh is not None
    print(f"New head: {fresh.value}")


if __name__ == "__main__":
    main()
