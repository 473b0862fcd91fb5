"""
Graph utilities.
Inspect and summarize the computation graph reachable from an output Var.
"""

import numpy as np
from typing import Dict, List
from collections import Counter

from .engine import topological_nodes
from .node import Node
from .var import Var


def reachable_nodes(output: Var) -> List[Node]:
    """Distinct nodes reachable from `output`, operands before results."""
    return topological_nodes(output)


def count_paths(output: Var) -> int:
    """
    Number of node visits `backward` performs from `output`:
    one per path from the output to each reachable node.
    """
    paths: Dict[int, int] = {id(output.node): 1}
    for node in reversed(topological_nodes(output)):
        k = paths[id(node)]
        for _, parent in node.parents:
            key = id(parent.node)
            paths[key] = paths.get(key, 0) + k
    return sum(paths.values())


def get_graph_stats(output: Var) -> Dict:
    """
    Collect graph statistics (no printing).

    Returns:
        statistics dictionary
    """
    nodes = topological_nodes(output)
    n_nodes = len(nodes)
    n_edges = sum(len(node.parents) for node in nodes)

    # fan-in: operands per node
    fan_ins = [len(node.parents) for node in nodes]

    # fan-out: how many results consume each node
    fan_out_by_id: Dict[int, int] = {id(node): 0 for node in nodes}
    for node in nodes:
        for _, parent in node.parents:
            fan_out_by_id[id(parent.node)] += 1
    fan_outs = list(fan_out_by_id.values())

    op_counter = Counter(node.op_tag for node in nodes)

    return {
        'nodes': n_nodes,
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'edges': n_edges,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'paths': count_paths(output),
        'operations': dict(op_counter),
    }


def print_graph_summary(output: Var) -> Dict:
    """
    Print a summary of the graph reachable from `output`.

    Returns:
        the dictionary from `get_graph_stats`
    """
    stats = get_graph_stats(output)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print(f"Backward visits:    {stats['paths']:,}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("="*70 + "\n")

    return stats
