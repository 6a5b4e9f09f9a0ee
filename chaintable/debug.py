from typing import TYPE_CHECKING, Iterator

from .chain import chain_pairs
from .hashing import hash_string
from .shared import printf

if TYPE_CHECKING:
    from .table import HashTable


def print_table(table: "HashTable", name: str):
    printf("== {0:s} ==\n", name)
    for index in range(table.capacity):
        print_bucket(table, index)


def print_bucket(table: "HashTable", index: int):
    printf("{0:04d} ", index)

    head = table.storage[index]
    if head is None:
        printf("-\n")
        return

    printf(
        "{0:s}\n",
        " -> ".join("{0:s}={1:s}".format(p.key, p.value) for p in chain_pairs(head)),
    )


def walk_entries(table: "HashTable") -> Iterator[tuple[int, str, str]]:
    for index, head in enumerate(table.storage):
        for pair in chain_pairs(head):
            yield index, pair.key, pair.value


def count_entries(table: "HashTable") -> int:
    return sum(1 for _ in walk_entries(table))


def check_invariants(table: "HashTable") -> list[str]:
    """Walk the whole table and describe every broken invariant."""
    problems: list[str] = []

    if len(table.storage) != table.capacity:
        problems.append(
            "storage has {0:d} buckets, capacity is {1:d}".format(
                len(table.storage), table.capacity
            )
        )

    seen: set[str] = set()
    count = 0
    for index, key, _ in walk_entries(table):
        count += 1
        if key in seen:
            problems.append("duplicate key '{0:s}'".format(key))
        seen.add(key)

        expected = hash_string(key, table.capacity)
        if expected != index:
            problems.append(
                "key '{0:s}' in bucket {1:d}, hashes to {2:d}".format(
                    key, index, expected
                )
            )

    if count != table.num_used:
        problems.append(
            "num_used is {0:d}, walked {1:d} entries".format(table.num_used, count)
        )

    return problems
