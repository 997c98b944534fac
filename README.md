# cpalgo

Algorithms and data structures for competitive programming and
algorithmic work, in plain Python with no runtime dependencies.
Everything is a library: import the module you need and call it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

Arrays and sequences

- `cpalgo.segtree`: `Segtree(op, e, data)` and
  `LazySegtree(op, composition, mapping, e, identity, data)`, where `data`
  is a size or an iterable of initial values. Both offer `set`, `get`,
  `prod(l, r)`, `all_prod`, `min_left` and `max_right`; the lazy tree adds
  `apply(p, f)` and `apply_range(l, r, f)`.
- `cpalgo.deque_aggregation`: `DequeAggregation(identity, op)`, a deque with
  `push_front`, `push_back`, `pop_front`, `pop_back` and `fold()`, the fold of
  all elements front to back.
- `cpalgo.affine`: `AffineMod(a, b, mod)`, the map `x -> a*x + b`;
  `f + g` applies `f` then `g`, `AffineMod.identity(mod)` is the identity.
- `cpalgo.wavelet`: `WaveletMatrix(max_value, values)` with `get`, `count`,
  `count_less`, `count_between`, `kth_smallest` and `max_no_greater_than`.
- `cpalgo.bbst_list`: `BbstList(items, op, identity)`, a sorted list of
  `(key, value)` pairs with `insert`, `erase`, `change_key`, `set`, bound
  searches, `kth` and `sum(first, last)` over `BbstCursor` positions.
- `cpalgo.lichao`: `LiChaoTreeFlexible(n, inf, evaluate)` holding arbitrary
  function handles, with `add_line`, `add_segment` and `min_func`.
- `cpalgo.minplus`: `min_plus_convolution_concave_a` and
  `min_plus_convolution_convex_a`, returning `(value, index into a)` pairs.
- `cpalgo.divisor`: `divisor_zeta`, `divisor_reversed_zeta`,
  `divisor_mobius`, `divisor_reversed_mobius` (in place, 1-indexed),
  `gcd_convolution`, `lcm_convolution` and `sum_for_coprime_index`.
- `cpalgo.cartesian_tree`: `cartesian_tree(values)`, the `(parent, child)`
  edges of the min-Cartesian tree.
- `cpalgo.lex_sort`: `PointUpdateLexSort`, dense lexicographic ranks of all
  versions of an array under point updates (`mutate`, `process`, `rank`).
- `cpalgo.csr`: `CsrArray`, many lists stored back to back.
- `cpalgo.bits`: `popcount`, `msb_index`, `lsb_index` on 64-bit words.
- `cpalgo.rng`: `Xoshiro256pp` with `random_unsigned`, `random_signed`,
  `random_npr`, `shuffle` and `shuffle_inplace`.

Geometry

- `cpalgo.vec2`: frozen integer `Vec2` with `dot`, `cross` and `norm`.
- `cpalgo.delaunay`: `DelaunayTriangulation(points)` with `edges()`,
  `virtual_circumcenters()`, `virtual_circumcenters_float()` and
  `voronoi_diagram()`; `Circumcenter` keeps points as exact fractions.

Trees

- `cpalgo.tree_shape`: `tree_diameter`, `tree_center` and `tree_centroid`
  on adjacency lists.
- `cpalgo.tree_dp`: `TreeDP(n, edges, node, rake, compress)`, rerooting DP
  with `at_vertex`, `at_edge` and `edge_between`.
- `cpalgo.incremental_forest`: `IncrementalForest`, a growing forest with
  `add_node`, `add_edge`, `lca`, `dist`, `middle`, `level_ancestor`, `jump`
  and `children`; queries across different trees return `None`.
- `cpalgo.centroid_binary_tree`: `CentroidDecompositionBinaryTree`, turning
  "vertices at distance in `[l, r)`" into `QueryRange` slices of a few arrays,
  with `UpdatePoint` positions for each vertex.

Counting (modulo a prime, 998244353 by default)

- `cpalgo.sps`: `sps_power_projection` for set power series.
- `cpalgo.chromatic`: `chromatic_polynomial` and `set_cover_polynomial`,
  coefficients in ascending order.
- `cpalgo.counting`: `count_directed_spanning_trees` and `count_euler_cycles`.

## Examples

```python
from cpalgo.segtree import Segtree

st = Segtree(lambda a, b: a + b, 0, [1, 1, 1, 1, 1])
st.prod(1, 4)                          # 3
st.max_right(0, lambda s: s <= 2)      # 2
```

```python
from cpalgo.affine import AffineMod
from cpalgo.deque_aggregation import DequeAggregation

MOD = 998244353
dq = DequeAggregation(AffineMod.identity(MOD), lambda a, b: a + b)
dq.push_back(AffineMod(2, 3, MOD))
dq.push_back(AffineMod(5, 1, MOD))
dq.fold().eval(1)                      # 5 * (2 * 1 + 3) + 1 = 26
```

```python
from cpalgo.wavelet import WaveletMatrix
from cpalgo.tree_shape import tree_diameter, tree_center

wm = WaveletMatrix(7, [3, 1, 4, 1, 5])
wm.kth_smallest(0, 5, 2)               # 3
wm.count(0, 5, 1)                      # 2

path = [[1], [0, 2], [1]]
tree_diameter(path)                    # [0, 1, 2]
tree_center(path)                      # [1]
```

## What it does not do

There is no command-line program and no reader for contest-style input:
the package only provides the functions and classes above, to be called
from your own code.