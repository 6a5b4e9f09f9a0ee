from dataclasses import dataclass, field
import sys

from .chain import Chain, chain_pairs, chain_put, chain_unlink, find_pair
from .debug import print_table
from .hashing import hash_string
from .shared import printf


MAX_LOAD = 0.7
MIN_LOAD = 0.2
MIN_CAPACITY = 1


_debug_trace_table = False


def set_debug_trace_table(b: bool):
    global _debug_trace_table
    _debug_trace_table = b


class TableDestroyedError(Exception):
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class RemoveOk:
    pass


@dataclass(frozen=True)
class KeyNotFound:
    key: str


RemoveResult = RemoveOk | KeyNotFound


@dataclass
class HashTable:
    capacity: int
    num_used: int
    resized: bool
    storage: list[Chain] = field(repr=False)
    shrink_on_remove: bool = False
    destroyed: bool = False

    def __len__(self) -> int:
        return self.num_used

    def __contains__(self, key: str) -> bool:
        return not isinstance(self.retrieve(key), NotFound)

    def load_factor(self) -> float:
        self._check_alive()
        return self.num_used / self.capacity

    def insert(self, key: str, value: str):
        self._put(key, value)
        self._settle()

    def retrieve(self, key: str) -> str | NotFound:
        index = self._index(key)
        _, pair = find_pair(self.storage[index], key)
        if pair is None:
            return NotFound()
        return pair.value

    def remove(self, key: str) -> RemoveResult:
        index = self._index(key)
        head, removed = chain_unlink(self.storage[index], key)
        if not removed:
            if _debug_trace_table:
                print(
                    "Key not found while trying to remove: '{0:s}'".format(key),
                    file=sys.stderr,
                )
            return KeyNotFound(key)

        self.storage[index] = head
        self.num_used -= 1
        if self.shrink_on_remove:
            self._settle()
        return RemoveOk()

    def resize(self):
        self._adopt(rebuild(self, self.capacity * 2), "resize")

    def shrink(self):
        if not self._can_shrink():
            raise ValueError("capacity is already at its minimum", self.capacity)
        self._adopt(rebuild(self, self.capacity // 2), "shrink")

    def destroy(self):
        for head in self.storage:
            while head is not None:
                next_pair = head.next
                head.next = None
                head = next_pair

        self.storage = []
        self.capacity = 0
        self.num_used = 0
        self.destroyed = True

    def _put(self, key: str, value: str):
        index = self._index(key)
        head, is_new_key = chain_put(self.storage[index], key, value)
        self.storage[index] = head
        if is_new_key:
            self.num_used += 1

    def _settle(self):
        # grows repeat until the load is back under MAX_LOAD; a shrink halves once
        load = self.load_factor()
        if load > MAX_LOAD:
            while load > MAX_LOAD:
                self.resize()
                load = self.load_factor()
        elif self.resized and load < MIN_LOAD and self._can_shrink():
            self.shrink()

    def _can_shrink(self) -> bool:
        return self.capacity // 2 >= MIN_CAPACITY

    def _adopt(self, rebuilt: "HashTable", kind: str):
        old_capacity = self.capacity
        self.capacity = rebuilt.capacity
        self.num_used = rebuilt.num_used
        self.storage = rebuilt.storage
        self.resized = True

        if _debug_trace_table:
            printf("{0:s} {1:d} -> {2:d}\n", kind, old_capacity, self.capacity)
            print_table(self, kind)

    def _index(self, key: str) -> int:
        self._check_alive()
        return hash_string(key, self.capacity)

    def _check_alive(self):
        if self.destroyed:
            raise TableDestroyedError("hash table used after destroy()")


def create_hash_table(capacity: int, shrink_on_remove: bool = False) -> HashTable:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError("capacity must be an int", capacity)
    if capacity < MIN_CAPACITY:
        raise ValueError("capacity must be positive", capacity)

    return HashTable(
        capacity=capacity,
        num_used=0,
        resized=False,
        storage=[None for _ in range(capacity)],
        shrink_on_remove=shrink_on_remove,
    )


def rebuild(table: HashTable, capacity: int) -> HashTable:
    """Copy every pair of `table` into a new table of `capacity` buckets.

    Old buckets are walked in ascending order, each chain from head to tail,
    and each pair goes through the plain chain insert, so the result does not
    depend on the load-factor policy. `table` itself is left untouched.
    """
    table._check_alive()
    new_table = create_hash_table(capacity, table.shrink_on_remove)

    for head in table.storage:
        for pair in chain_pairs(head):
            new_table._put(pair.key, pair.value)

    new_table.resized = True
    return new_table
