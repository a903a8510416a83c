# Minimal CLI using argparse that builds a structure from the given values and prints it.
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, List

from data_structures.components import (
    BinaryMinHeap,
    BinarySearchTree,
    DoublyLinkedList,
    Graph,
    HashTable,
    SinglyLinkedList,
    Tree,
    Trie,
)
from data_structures.core.config import StructuresConfig, load_config
from data_structures.core.errors import DataStructureError

logger = logging.getLogger(__name__)


def parse_value(raw: str) -> Any:
    """Integer-looking arguments become ints, anything else stays a string."""
    try:
        return int(raw)
    except ValueError:
        return raw


def demo_sll(values: List[Any], config: StructuresConfig) -> str:
    ll: SinglyLinkedList[Any] = SinglyLinkedList()
    for v in values:
        ll.insert(v)
    return repr(ll) or "<empty>"


def demo_dll(values: List[Any], config: StructuresConfig) -> str:
    dll: DoublyLinkedList[Any] = DoublyLinkedList()
    for v in values:
        dll.insert(v)
    return repr(dll) or "<empty>"


def demo_bst(values: List[Any], config: StructuresConfig) -> str:
    bst: BinarySearchTree[Any] = BinarySearchTree()
    for v in values:
        bst.insert(v)
    return bst.pretty_print()


def demo_tree(values: List[Any], config: StructuresConfig) -> str:
    tree: Tree[Any] = Tree()
    for v in values:
        tree.insert(v)
    return repr(tree)


def demo_heap(values: List[Any], config: StructuresConfig) -> str:
    heap: BinaryMinHeap[Any] = BinaryMinHeap()
    for v in values:
        heap.insert(v)
    order = []
    while not heap.is_empty():
        order.append(heap.extract_min())
    return " ".join(str(v) for v in order)


def demo_trie(values: List[Any], config: StructuresConfig) -> str:
    trie = Trie(root_marker=config.trie_root_marker)
    for v in values:
        trie.add_word(v)
    return "\n".join(trie.words())


def demo_hash(values: List[Any], config: StructuresConfig) -> str:
    table = HashTable(capacity=config.hash_table_capacity)
    for v in values:
        table.set(v)
    return repr(table)


def demo_graph(values: List[Any], config: StructuresConfig) -> str:
    graph: Graph[Any] = Graph()
    for v in values:
        if v not in graph:
            graph.add_vertex(v)
    for source, destination in zip(values, values[1:]):
        graph.add_edge(source, destination)
    return "\n".join(repr(vertex) for vertex in graph)


DEMOS: Dict[str, Callable[[List[Any], StructuresConfig], str]] = {
    "sll": demo_sll,
    "dll": demo_dll,
    "bst": demo_bst,
    "tree": demo_tree,
    "heap": demo_heap,
    "trie": demo_trie,
    "hash": demo_hash,
    "graph": demo_graph,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ds-demo", description="Build a data structure from values and print it"
    )
    p.add_argument("structure", choices=sorted(DEMOS), help="Structure to build")
    p.add_argument("values", nargs="*", help="Values to insert, in order")
    p.add_argument("--config", type=Path, help="TOML configuration file (optional)")
    p.add_argument("--log-level", type=str, help="Logging level, overrides the config file")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else StructuresConfig()
        if args.log_level:
            config = replace(config, log_level=args.log_level)
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}")
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    values = [parse_value(v) for v in args.values]
    logger.info(f"Building {args.structure} from {len(values)} value(s)")

    try:
        output = DEMOS[args.structure](values, config)
    except (DataStructureError, TypeError) as e:
        print(f"Error: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
