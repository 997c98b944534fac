"""Delaunay triangulation by divide and conquer, with a virtual Voronoi diagram."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .csr import CsrArray
from .vec2 import Vec2


@dataclass(frozen=True)
class Circumcenter:
    """The point ``(x / d, y / d)`` kept as exact integers."""

    x: int
    y: int
    d: int

    @classmethod
    def from_three_points(cls, p1: Vec2, p2: Vec2, p3: Vec2) -> "Circumcenter":
        dp1 = p2 - p1
        dp2 = p3 - p1
        d1 = dp1.norm()
        d2 = dp2.norm()
        w = 2 * dp1.cross(dp2)
        px = dp2.y * d1 - dp1.y * d2 + w * p1.x
        py = dp1.x * d2 - dp2.x * d1 + w * p1.y
        return cls(px, py, w)


@dataclass(slots=True)
class _HalfEdge:
    to: int = 0
    ccw: int = 0
    cw: int = 0
    rev: int = 0
    enabled: bool = False


def _as_vec(p) -> Vec2:
    if isinstance(p, Vec2):
        return p
    x, y = p
    return Vec2(x, y)


class DelaunayTriangulation:
    """Delaunay triangulation of integer points; duplicates are joined to one copy."""

    def __init__(self, points: Iterable = ()):
        self._pos: list[Vec2] = [_as_vec(p) for p in points]
        self._pts: list[Vec2] = []
        self._edges: list[_HalfEdge] = []
        self._free: list[int] = []
        self._mappings: list[int] = []
        self._outer = -1
        self._circumcenters: list[Circumcenter] = []
        self._voronoi: CsrArray | None = None
        self._solve()

    # --- half-edge bookkeeping -------------------------------------------------

    def _alloc(self) -> int:
        if self._free:
            return self._free.pop()
        self._edges.append(_HalfEdge())
        return len(self._edges) - 1

    def _new_edge(self, u: int, v: int) -> tuple[int, int]:
        euv = self._alloc()
        evu = self._alloc()
        edges = self._edges
        edges[euv].ccw = edges[euv].cw = euv
        edges[evu].ccw = edges[evu].cw = evu
        edges[euv].to = v
        edges[evu].to = u
        edges[euv].rev = evu
        edges[evu].rev = euv
        edges[euv].enabled = True
        edges[evu].enabled = True
        return euv, evu

    def _erase_single(self, e: int) -> None:
        edges = self._edges
        eccw, ecw = edges[e].ccw, edges[e].cw
        edges[eccw].cw = ecw
        edges[ecw].ccw = eccw
        edges[e].enabled = False

    def _erase_both(self, e: int) -> None:
        ex = self._edges[e].rev
        self._erase_single(e)
        self._erase_single(ex)
        self._free.append(e)
        self._free.append(ex)

    def _insert_ccw_after(self, e: int, x: int) -> None:
        edges = self._edges
        xccw = edges[x].ccw
        edges[e].ccw = xccw
        edges[xccw].cw = e
        edges[e].cw = x
        edges[x].ccw = e

    def _insert_cw_after(self, e: int, x: int) -> None:
        edges = self._edges
        xcw = edges[x].cw
        edges[e].cw = xcw
        edges[xcw].ccw = e
        edges[e].ccw = x
        edges[x].cw = e

    # --- geometric predicates ---------------------------------------------------

    def _ccw(self, a: int, b: int, c: int) -> int:
        pts = self._pts
        cp = (pts[b] - pts[a]).cross(pts[c] - pts[a])
        return (cp > 0) - (cp < 0)

    def _in_circle(self, a: int, b: int, c: int, d: int) -> bool:
        pts = self._pts
        pd = pts[d]
        pa, pb, pc = pts[a] - pd, pts[b] - pd, pts[c] - pd
        val = pb.cross(pc) * pa.norm() + pc.cross(pa) * pb.norm() + pa.cross(pb) * pc.norm()
        return val > 0

    # --- merging ------------------------------------------------------------------

    def _go_next(self, ea: int) -> tuple[int, int]:
        edges = self._edges
        return edges[ea].to, edges[edges[ea].rev].ccw

    def _go_prev(self, ea: int) -> tuple[int, int]:
        edges = self._edges
        cw = edges[ea].cw
        return edges[cw].to, edges[cw].rev

    def _go_bottom(self, a: int, ea: int, b: int, eb: int) -> tuple[int, int, int, int]:
        while True:
            ap, eap = self._go_prev(ea)
            if self._ccw(b, a, ap) > 0:
                a, ea = ap, eap
                continue
            bp, ebp = self._go_next(eb)
            if self._ccw(a, b, bp) < 0:
                b, eb = bp, ebp
                continue
            return a, ea, b, eb

    def _extreme(self, a: int, ea: int, to_min: bool) -> tuple[int, int]:
        best = (a, ea)
        p, ep = a, ea
        while True:
            p, ep = self._go_next(ep)
            cand = (p, ep)
            best = min(best, cand) if to_min else max(best, cand)
            if ep == ea:
                return best

    def _merge(self, a: int, ea: int, b: int, eb: int) -> tuple[int, int]:
        edges = self._edges
        a, ea = self._extreme(a, ea, False)
        b, eb = self._extreme(b, eb, True)
        al, eal, bl, ebl = self._go_bottom(a, ea, b, eb)
        bu, ebu, au, eau = self._go_bottom(b, eb, a, ea)
        ebl = edges[ebl].cw
        ebu = edges[ebu].cw

        abl, bal = self._new_edge(al, bl)
        self._insert_cw_after(abl, eal)
        self._insert_ccw_after(bal, ebl)
        if al == au:
            eau = abl
        if bl == bu:
            ebu = bal

        ap, eap = al, eal
        bp, ebp = bl, ebl
        while ap != au or bp != bu:
            a2 = edges[eap].to
            b2 = edges[ebp].to
            nxeap = edges[eap].ccw
            nxebp = edges[ebp].cw

            if eap != eau and nxeap != abl:
                a1 = edges[nxeap].to
                if self._in_circle(ap, bp, a2, a1):
                    self._erase_both(eap)
                    eap = nxeap
                    continue

            if ebp != ebu and nxebp != bal:
                b1 = edges[nxebp].to
                if self._in_circle(b2, ap, bp, b1):
                    self._erase_both(ebp)
                    ebp = nxebp
                    continue

            choose_a = ebp == ebu
            if eap != eau and ebp != ebu:
                if self._ccw(ap, bp, b2) < 0:
                    choose_a = True
                elif self._ccw(a2, ap, bp) < 0:
                    choose_a = False
                else:
                    choose_a = self._in_circle(ap, bp, b2, a2)

            if choose_a:
                nxeap = edges[edges[eap].rev].ccw
                hab, hba = self._new_edge(a2, bp)
                self._insert_cw_after(hab, nxeap)
                self._insert_ccw_after(hba, ebp)
                eap, ap = nxeap, a2
            else:
                nxebp = edges[edges[ebp].rev].cw
                hba, hab = self._new_edge(b2, ap)
                self._insert_ccw_after(hba, nxebp)
                self._insert_cw_after(hab, eap)
                ebp, bp = nxebp, b2

        return al, abl

    def _solve_range(self, l: int, r: int) -> tuple[int, int]:
        if r - l == 2:
            uv, _ = self._new_edge(l, l + 1)
            return l, uv
        if r - l == 3:
            u, v, w = l, l + 1, l + 2
            uv, vu = self._new_edge(u, v)
            vw, wv = self._new_edge(v, w)
            turn = self._ccw(u, v, w)
            if turn == 0:
                self._insert_ccw_after(vu, vw)
            elif turn > 0:
                uw, wu = self._new_edge(u, w)
                self._insert_cw_after(uv, uw)
                self._insert_cw_after(vw, vu)
                self._insert_cw_after(wu, wv)
            else:
                uw, wu = self._new_edge(u, w)
                self._insert_ccw_after(uv, uw)
                self._insert_ccw_after(vw, vu)
                self._insert_ccw_after(wu, wv)
                return v, vu
            return u, uv
        m = (l + r) // 2
        a, ea = self._solve_range(l, m)
        b, eb = self._solve_range(m, r)
        return self._merge(a, ea, b, eb)

    def _solve(self) -> None:
        pos = self._pos
        n = len(pos)
        if n <= 1:
            return
        order = sorted(range(n), key=lambda i: (pos[i].x, pos[i].y))
        kept: list[int] = []
        self._mappings = [0] * n
        for v in order:
            if kept and pos[kept[-1]] == pos[v]:
                self._mappings[v] = kept[-1]
            else:
                kept.append(v)
                self._mappings[v] = v
        self._pts = [pos[v] for v in kept]
        if len(kept) >= 2:
            self._outer = self._solve_range(0, len(kept))[1]
        for e in self._edges:
            e.to = kept[e.to]

    # --- Voronoi ------------------------------------------------------------------

    def _solve_voronoi(self) -> None:
        if self._voronoi is not None:
            return
        pos = self._pos
        edges = self._edges
        if not edges:
            self._voronoi = CsrArray([], [0] * (len(pos) + 1))
            return
        m = len(edges)
        ref = [-1] * m
        eu = self._outer
        start = eu
        while True:
            eu = edges[eu].rev
            ref[eu] = -2
            eu = edges[eu].ccw
            if eu == start:
                break
        centers = self._circumcenters
        for e in range(m):
            if ref[e] == -1 and edges[e].enabled:
                f = edges[edges[e].rev].cw
                g = edges[edges[f].rev].cw
                v, w, u = edges[e].to, edges[f].to, edges[g].to
                c = len(centers)
                centers.append(Circumcenter.from_three_points(pos[u], pos[v], pos[w]))
                ref[e] = ref[f] = ref[g] = c
        for e in range(m):
            if ref[e] != -2:
                continue
            f = edges[e].rev
            v = edges[e].to
            u = edges[f].to
            pu, pv = pos[u], pos[v]
            if ref[f] == -2:
                ref[e] = len(centers)
                centers.append(Circumcenter(
                    pu.x + pv.x + (pv.y - pu.y), pu.y + pv.y - (pv.x - pu.x), 2))
                ref[f] = len(centers)
                centers.append(Circumcenter(
                    pu.x + pv.x - (pv.y - pu.y), pu.y + pv.y + (pv.x - pu.x), 2))
            else:
                q = centers[ref[f]]
                d = pv - pu
                ref[e] = len(centers)
                centers.append(Circumcenter(q.x - q.d * d.y, q.y + q.d * d.x, q.d))
        one_edge = [-1] * len(pos)
        for e in range(m):
            if edges[e].enabled:
                one_edge[edges[e].to] = edges[e].rev
        cells: list[tuple[int, int]] = []
        positions = [0]
        for es in one_edge:
            if es >= 0:
                e = es
                while True:
                    cells.append((ref[edges[e].rev], ref[e]))
                    e = edges[e].ccw
                    if e == es:
                        break
            positions.append(len(cells))
        self._voronoi = CsrArray(cells, positions)

    # --- public queries -----------------------------------------------------------

    def edges(self) -> list[tuple[int, int]]:
        """Triangulation edges as index pairs, then each duplicate joined to its copy."""
        res = []
        for e, edge in enumerate(self._edges):
            if not edge.enabled or e < edge.rev:
                continue
            res.append((edge.to, self._edges[edge.rev].to))
        res.extend((v, m) for v, m in enumerate(self._mappings) if m != v)
        return res

    def virtual_circumcenters(self) -> list[Circumcenter]:
        """Voronoi nodes; hull edges get a virtual node outside the hull."""
        self._solve_voronoi()
        return list(self._circumcenters)

    def virtual_circumcenters_float(self) -> list[tuple[float, float]]:
        self._solve_voronoi()
        return [(c.x / c.d, c.y / c.d) for c in self._circumcenters]

    def voronoi_diagram(self) -> CsrArray:
        """For each point, pairs of node indices bounding the Voronoi edges of its cell."""
        self._solve_voronoi()
        return self._voronoi