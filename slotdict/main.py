import sys
from typing import Any

from .collisions import (
    DEFAULT_OBJECT_COUNT,
    find_collisions,
    generate_keys,
    print_report,
)
from .debug import dump_table
from .keys import StringKey
from .shared import printf, printf_err, set_debug_trace
from .table import Collision, NotFound, NullKey, Ok, Table


_USAGE = "Usage: slotdict [demo | collisions [count]] [--trace]\n"


def describe(result: Any) -> str:
    match result:
        case Ok(value=value):
            return repr(value)
        case NotFound():
            return "not found"
        case NullKey() | Collision():
            return "error: " + result.message
        case _:
            raise Exception("Wrong result type", type(result), result)


def run_demo():
    table = Table()

    printf("--- Basics ---\n")
    printf("Empty at start? {0}\n", table.is_empty())
    printf("Initial size: {0:d}\n", table.size())

    for name, value in (("manzana", 10), ("banana", 20), ("cereza", 30)):
        printf("put {0!r}: {1:s}\n", name, describe(table.put(StringKey(name), value)))

    printf("\n--- Lookups ---\n")
    for name in ("manzana", "banana", "cereza", "uva"):
        printf("get {0!r}: {1:s}\n", name, describe(table.get(StringKey(name))))
    printf("Size: {0:d}\n", table.size())
    printf("Empty now? {0}\n", table.is_empty())

    printf("\n--- None key ---\n")
    printf("put None: {0:s}\n", describe(table.put(None, 100)))
    printf("get None: {0:s}\n", describe(table.get(None)))
    printf("remove None: {0:s}\n", describe(table.remove(None)))
    printf("contains_key None: {0:s}\n", describe(table.contains_key(None)))

    printf("\n--- Collisions ---\n")
    first, second = StringKey("frutilla"), StringKey("naranja")
    printf(
        "{0!s} -> slot {1:d}, {2!s} -> slot {3:d}\n",
        first,
        table.index(first).value,
        second,
        table.index(second).value,
    )
    printf("put {0!r}: {1:s}\n", str(first), describe(table.put(first, 100)))
    printf("put {0!r}: {1:s}\n", str(second), describe(table.put(second, 200)))
    printf("get {0!r}: {1:s}\n", str(first), describe(table.get(first)))
    printf("get {0!r}: {1:s}\n", str(second), describe(table.get(second)))
    printf("contains {0!r}: {1:s}\n", str(second), describe(table.contains_key(second)))
    printf("Size: {0:d}\n", table.size())

    printf("\n--- Re-inserting an existing key ---\n")
    printf("put 'manzana': {0:s}\n", describe(table.put(StringKey("manzana"), 101)))
    printf("get 'manzana': {0:s}\n", describe(table.get(StringKey("manzana"))))

    printf("\n--- Removal ---\n")
    printf("remove 'banana': {0:s}\n", describe(table.remove(StringKey("banana"))))
    printf("get 'banana': {0:s}\n", describe(table.get(StringKey("banana"))))
    printf(
        "remove 'inexistente': {0:s}\n",
        describe(table.remove(StringKey("inexistente"))),
    )
    printf("Size: {0:d}\n", table.size())

    printf("\n")
    dump_table(table, "demo")


def run_collisions(count: int):
    printf("Searching for hash collisions among {0:d} keys...\n\n", count)
    report = find_collisions(generate_keys(count))
    print_report(report)


def main(argv: list[str] | None = None):
    args = list(sys.argv[1:] if argv is None else argv)

    if "--trace" in args:
        args.remove("--trace")
        set_debug_trace(True)

    match args:
        case [] | ["demo"]:
            run_demo()
        case ["collisions"]:
            run_collisions(DEFAULT_OBJECT_COUNT)
        case ["collisions", count] if count.isascii() and count.isdigit():
            run_collisions(int(count))
        case _:
            printf_err(_USAGE)
            sys.exit(64)
