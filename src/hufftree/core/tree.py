from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Iterator, List, Union


# -------------------
# Nodi dell'albero
# -------------------
@dataclass(frozen=True)
class Leaf:
    """
    weight ha senso solo sugli alberi di make_tree_from_counts: gli alberi
    letti dall'header non portano pesi (weight=0 ovunque).
    """

    symbol: int  # 0-255 oppure PSEUDO_EOF
    weight: int = 0


@dataclass(frozen=True)
class Internal:
    """weight = somma dei figli, ma solo se costruito da make_tree_from_counts."""

    left: "Node"
    right: "Node"
    weight: int = 0


Node = Union[Leaf, Internal]


def make_tree_from_counts(freq: List[int]) -> Node:
    """
    Huffman greedy: unisce sempre i due nodi di peso minimo.

    Tie-break deterministico: a parita' di peso vince l'ordine di inserimento
    (FIFO). Le foglie entrano in ordine crescente di simbolo, ogni nodo fuso
    riceve il prossimo numero di sequenza. Il primo estratto va a sinistra.
    """
    heap: List[tuple[int, int, Node]] = []
    counter = itertools.count()

    for sym, f in enumerate(freq):
        if f > 0:
            heapq.heappush(heap, (f, next(counter), Leaf(symbol=sym, weight=f)))

    if not heap:
        raise ValueError("make_tree_from_counts: nessun simbolo con frequenza > 0")

    while len(heap) > 1:
        f1, _, left = heapq.heappop(heap)
        f2, _, right = heapq.heappop(heap)
        parent = Internal(left=left, right=right, weight=f1 + f2)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


def iter_leaves(root: Node) -> Iterator[Leaf]:
    """Foglie da sinistra a destra (stesso ordine dell'header)."""
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def tree_depth(root: Node) -> int:
    if isinstance(root, Leaf):
        return 0
    return 1 + max(tree_depth(root.left), tree_depth(root.right))
