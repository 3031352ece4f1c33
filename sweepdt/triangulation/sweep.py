import numpy as np

from sweepdt.config import EPSILON, SUPER_TRIANGLE_SCALE, MIN_POINTS, MAX_POINTS
from sweepdt.primitives.geometry import (
    DegenerateTriangleError, bounding_box, super_triangle, circumcircle
)
from sweepdt.primitives.edges import triangle_edges, dedupe_edges

INIT = "init"
SWEEPING = "sweeping"
FINALIZING = "finalizing"
DONE = "done"
FAILED = "failed"


class SweepTriangulation:
    """
    超级三角形 + 按 x 扫描的增量 Delaunay 三角剖分。

    每个实例只跑一次，自己持有点集副本、候选列表和锁定列表，
    不共享任何可变状态。

    状态：init -> sweeping -> finalizing -> done，任何
    DegenerateTriangleError 都会进入 failed 并继续向上抛出。
    """

    def __init__(self, vertices, epsilon=EPSILON, scale=SUPER_TRIANGLE_SCALE, max_points=MAX_POINTS):
        self.epsilon = epsilon
        self.scale = scale
        self.max_points = max_points
        # 工作副本，调用方的序列不会被修改
        self.vertices = [(float(v[0]), float(v[1])) for v in vertices]
        self.n = len(self.vertices)
        self.order = []
        self.candidates = []
        self.locked = []
        self.state = INIT

    def accepts(self) -> bool:
        return MIN_POINTS <= self.n <= self.max_points

    def setup(self):
        n = self.n
        points = self.vertices
        # 按 x 降序排列，x 相同时按 (y 升序, 下标升序)；扫描从尾部开始，即从左往右
        self.order = sorted(range(n), key=lambda idx: (-points[idx][0], points[idx][1], idx))

        x_min, y_min, x_max, y_max = bounding_box(points)
        if y_max - y_min < self.epsilon:
            raise DegenerateTriangleError("Can't triangulate since all points are y-aligned")

        points.extend(super_triangle(points, self.scale))
        self.candidates = [circumcircle(points, n, n + 1, n + 2, self.epsilon)]
        self.locked = []

    def _drop_candidate(self, idx):
        # 与末尾交换后弹出；末尾元素已经扫描过
        last = self.candidates.pop()
        if idx < len(self.candidates):
            self.candidates[idx] = last

    def step(self, c):
        """插入第 c 个点：锁定、保留或打碎每个候选三角形，再用空腔边界重建。"""
        x, y = self.vertices[c]
        edges = []
        for idx in range(len(self.candidates) - 1, -1, -1):
            t = self.candidates[idx]
            dx = x - t.x
            # 点在外接圆右侧：后面的点 x 只会更大，这个三角形定了
            if dx > 0.0 and dx * dx > t.r:
                self.locked.append(t)
                self._drop_candidate(idx)
                continue
            dy = y - t.y
            if dx * dx + dy * dy - t.r > self.epsilon:
                continue
            # 点在外接圆内（含容差）
            edges.extend(triangle_edges(t))
            self._drop_candidate(idx)

        dedupe_edges(edges)
        for a, b in reversed(edges):
            self.candidates.append(circumcircle(self.vertices, a, b, c, self.epsilon))

    def finalize(self):
        self.locked.extend(reversed(self.candidates))
        self.candidates = []

    def triangles(self):
        """去掉用到超级三角形角点的三角形，按 [i0, j0, k0, i1, j1, k1, ...] 输出"""
        out = []
        for t in self.locked:
            if not t.touches_super(self.n):
                out.extend(t.indices)
        return out

    def run(self):
        if self.state == DONE:
            return self.triangles()
        if not self.accepts():
            self.state = DONE
            return []
        try:
            self.setup()
            self.state = SWEEPING
            for c in reversed(self.order):
                self.step(c)
            self.state = FINALIZING
            self.finalize()
        except DegenerateTriangleError:
            self.state = FAILED
            raise
        self.state = DONE
        return self.triangles()


def calc_delaunay_triangulation(vertices, epsilon=EPSILON, scale=SUPER_TRIANGLE_SCALE, max_points=MAX_POINTS):
    """
    计算点集的 Delaunay 三角剖分。

    参数
    ----
    vertices : (x, y) 序列、sweepdt.primitives.vertex.Vertex 列表或 (n, 2) ndarray
        只读取 v[0], v[1]，不会修改。
    epsilon : float
        圆内判断与 y 对齐判断的容差。
    scale : float
        超级三角形放大倍数。
    max_points : int
        点数上限，超过直接返回空列表。

    返回
    ----
    list[int]
        长度为 3 的倍数，每三个下标是一个三角形，下标都 < n。
        n < 3 或 n > max_points 时返回 []。

    抛出
    ----
    DegenerateTriangleError
        某次外接圆计算遇到水平共线的三点。
    """
    return SweepTriangulation(vertices, epsilon=epsilon, scale=scale, max_points=max_points).run()


def triangles_as_array(indices):
    return np.asarray(indices, dtype=int).reshape(-1, 3)
