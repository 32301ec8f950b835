# algodeck

A small collection of classic algorithms and data structures in plain Python,
with no dependencies beyond the standard library.

## What is inside

### Graph algorithms

Vertices are the integers `0 .. n-1`. Unreachable distances are `math.inf`.
A vertex out of range or a negative vertex count raises `ValueError`.

- `algodeck.dijkstra` – undirected `Graph(num_vertices)` with
  `add_edge(u, v, weight)` (negative weights raise `ValueError`) and
  `dijkstra(source)`, which returns a list of distances.
- `algodeck.bellman_ford` – directed `Graph(num_vertices)` with
  `add_edge(src, dest, weight)` and `bellman_ford(source)`. Negative weights
  are allowed; a negative cycle reachable from the source raises
  `NegativeCycleError` (a `ValueError`). Edges are kept as `Edge` records in
  `graph.edges`. `format_distances(dist)` renders a vertex/distance table.
- `algodeck.floyd_warshall` – `floyd_warshall(graph)` takes a square
  adjacency matrix (missing edges as `INF`) and returns a new matrix of
  shortest distances. `format_matrix(dist)` renders it as tab-separated rows,
  writing `INF` for unreachable pairs.
- `algodeck.johnson` – `johnson(num_vertices, edges)` takes `(u, v, weight)`
  triples, negative weights allowed, and returns the all-pairs distance
  matrix; a negative cycle raises `NegativeCycleError`.
- `algodeck.max_flow` – `ford_fulkerson(capacity, source, sink)` returns the
  maximum flow through a square capacity matrix, using breadth-first
  augmenting paths. The input matrix is left unchanged.
- `algodeck.kruskal` – `Graph(num_vertices)` with `add_edge(u, v, weight)`
  and `kruskal_mst()`, which returns the `Edge` records of a minimum spanning
  forest, lightest first. `UnionFind(n)` offers `find(u)` and `union(u, v)`;
  `union` returns `False` when the two were already joined.
- `algodeck.prims` – `Graph(num_vertices)` with `add_edge(u, v, weight)` and
  `prim_mst()`, which grows the tree from vertex 0 and returns
  `(parent, vertex, weight)` for every other vertex; a vertex it never reaches
  has parent `None` and weight `INF`.

### Data structures

- `algodeck.avl.AVLTree` – self-balancing search tree: `insert`, `remove`,
  `in_order`, `pre_order`, `height`; also supports `in`, `len()` and
  iteration in ascending order. Duplicates are ignored and removing a missing
  key does nothing.
- `algodeck.splay.SplayTree` – self-adjusting search tree: `insert` and
  `search` splay the key towards the root; `search` returns whether the key is
  found. Also `remove`, `in_order`, `pre_order`, and `root_key`, which raises
  `LookupError` on an empty tree.
- `algodeck.skiplist.SkipList(max_level=16, rng=None)` – probabilistic sorted
  set. `insert` and `remove` return whether anything changed, `search` returns
  whether the key is present, and `levels()` lists the keys linked on each
  level from level 0 up. Pass a seeded `random.Random` as `rng` for
  reproducible level choices.
- `algodeck.binomial_heap.BinomialHeap` – mergeable min-heap: `insert`,
  `find_min`, `extract_min` (both raise `IndexError` when empty), `len()`, and
  `trees()`, which returns `(degree, keys)` for each binomial tree.
- `algodeck.hashtable.HashTable(size=10)` – separate-chaining hash map:
  `insert`, `search` (raises `KeyError` when absent), `remove` (returns
  whether the key was present), `keys`, `values`, `buckets`, `load_factor`,
  `max_bucket_size` and `resize(new_size)`. Also supports `table[key]`,
  `table[key] = value`, `in`, `len()` and iteration over keys.

### Dynamic programming and backtracking

- `algodeck.knapsack.knapsack(capacity, weights, values)` – best total value
  for the 0-1 knapsack problem. Mismatched lengths, a negative capacity or a
  negative weight raise `ValueError`.
- `algodeck.nqueens` – `solve_n_queens(n)` yields every placement of `n`
  non-attacking queens as a tuple of columns, one per row; `is_safe(queens,
  row, col)` checks one square against earlier rows; `format_board(queens)`
  renders a placement with `Q` and `.` cells.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algodeck.knapsack import knapsack
from algodeck.dijkstra import Graph
from algodeck.avl import AVLTree

print(knapsack(50, [10, 20, 30], [60, 100, 120]))   # 220

g = Graph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
print(g.dijkstra(0))                                 # [0, 4, 5]

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)
tree.remove(30)
print(tree.in_order())                               # [10, 20, 25, 40, 50]
```

## Command-line demos

Every module has a demo command:

```
algodeck-knapsack
algodeck-nqueens
algodeck-floyd-warshall
algodeck-max-flow
algodeck-bellman-ford
algodeck-dijkstra
algodeck-johnson
algodeck-kruskal
algodeck-prims
algodeck-avl
algodeck-hashtable
algodeck-binomial-heap
algodeck-skiplist
algodeck-splay
```

`algodeck-knapsack` reads whitespace-separated integers from standard input:
the item count, then the values, then the weights, then the capacity.
`algodeck-nqueens` reads the board size from standard input and prints every
solution. Both exit with status 1 on malformed or missing input.

## What it does not do

The other demos run on a fixed built-in example and print the result; they
take no input and cannot load graphs or data from files. There is no
persistence: every structure lives in memory only.