from __future__ import annotations

from typing import Dict, Tuple

from .tree import Leaf, Node

Code = Tuple[int, ...]


def make_codings_from_tree(root: Node) -> Dict[int, Code]:
    """
    simbolo -> codice (0 = sinistra, 1 = destra).
    Albero con una sola foglia: codice vuoto (zero bit), ed e' valido.
    """
    codes: Dict[int, Code] = {}

    def dfs(node: Node, path: Code) -> None:
        if isinstance(node, Leaf):
            codes[node.symbol] = path
            return
        dfs(node.left, path + (0,))
        dfs(node.right, path + (1,))

    dfs(root, ())
    return codes


def code_value(code: Code) -> int:
    v = 0
    for bit in code:
        v = (v << 1) | bit
    return v


def code_to_str(code: Code) -> str:
    return "".join("1" if bit else "0" for bit in code)
