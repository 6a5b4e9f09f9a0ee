from dataclasses import dataclass
from typing import Iterator


@dataclass
class LinkedPair:
    key: str
    value: str
    next: "LinkedPair | None" = None


Chain = LinkedPair | None


def create_pair(key: str, value: str) -> LinkedPair:
    if not isinstance(key, str) or not isinstance(value, str):
        raise TypeError("keys and values must be str", key, value)
    return LinkedPair(key=key, value=value)


def chain_pairs(head: Chain) -> Iterator[LinkedPair]:
    curr = head
    while curr is not None:
        yield curr
        curr = curr.next


def find_pair(head: Chain, key: str) -> tuple[Chain, Chain]:
    """Return (predecessor, match); match is None when the key is absent."""
    last: Chain = None
    curr = head
    while curr is not None and curr.key != key:
        last = curr
        curr = curr.next
    return last, curr


def chain_put(head: Chain, key: str, value: str) -> tuple[LinkedPair, bool]:
    """Store key/value in the chain, returning the new head and whether the key is new.

    An existing pair is replaced by a fresh one at the same position.
    """
    pair = create_pair(key, value)
    last, curr = find_pair(head, key)

    if curr is None:
        pair.next = head
        return pair, True

    pair.next = curr.next
    curr.next = None
    if last is None:
        return pair, False

    last.next = pair
    assert head is not None
    return head, False


def chain_unlink(head: Chain, key: str) -> tuple[Chain, bool]:
    last, curr = find_pair(head, key)
    if curr is None:
        return head, False

    if last is None:
        head = curr.next
    else:
        last.next = curr.next
    curr.next = None
    return head, True
