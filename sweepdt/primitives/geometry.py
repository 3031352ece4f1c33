import numpy as np

from sweepdt.config import EPSILON, SUPER_TRIANGLE_SCALE
from sweepdt.primitives.triangle import Triangle


class DegenerateTriangleError(ValueError):
    """三点（近似）共线且水平对齐，外接圆无定义。"""


def orientation(p, q, r):
    """
    计算向量 (q - p) 与 (r - p) 的叉积；
        > 0 表示 r 在有向线段 p->q 的左侧，
        = 0 表示三点共线，
        < 0 表示在右侧。
    p, q, r 为 (x, y)。
    """
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def circumcircles_batch(points, triangles):
    """
    按三角形下标批量求外接圆。

    以每个三角形的第一个顶点为原点计算，坐标很小或离原点很远时
    都不会丢精度；不依赖 y 对齐判断，顶点顺序任意。

    参数
    ----
    points : (n, 2) 点坐标
    triangles : 扁平下标列表或 (m, 3) 下标数组

    返回
    ----
    centers : ndarray, shape (m, 2)
    r2 : ndarray, shape (m,)
        半径的平方；三点共线的行为 NaN。
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    tris = np.asarray(triangles, dtype=int).reshape(-1, 3)

    origin = pts[tris[:, 0]]
    b = pts[tris[:, 1]] - origin
    c = pts[tris[:, 2]] - origin
    b2 = (b ** 2).sum(axis=1)
    c2 = (c ** 2).sum(axis=1)
    d = 2.0 * (b[:, 0] * c[:, 1] - b[:, 1] * c[:, 0])

    with np.errstate(divide="ignore", invalid="ignore"):
        ux = (c[:, 1] * b2 - b[:, 1] * c2) / d
        uy = (b[:, 0] * c2 - c[:, 0] * b2) / d
    colinear = d == 0
    ux[colinear] = np.nan
    uy[colinear] = np.nan

    centers = origin + np.stack([ux, uy], axis=1)
    return centers, ux ** 2 + uy ** 2


def bounding_box(vertices):
    """
    一次遍历求点集的轴对齐包围盒。

    返回
    ----
    (x_min, y_min, x_max, y_max)
    """
    x_min = y_min = float("inf")
    x_max = y_max = float("-inf")
    count = 0
    for v in vertices:
        x, y = v[0], v[1]
        if x < x_min: x_min = x
        if x > x_max: x_max = x
        if y < y_min: y_min = y
        if y > y_max: y_max = y
        count += 1
    if count == 0:
        raise ValueError("empty set")
    return x_min, y_min, x_max, y_max


def super_triangle(vertices, scale=SUPER_TRIANGLE_SCALE):
    """
    由包围盒构造一个严格包住所有点的超级三角形。

    d = max(包围盒宽, 包围盒高)，(cx, cy) 为包围盒中心，
    返回 [(cx - s*d, cy - d), (cx, cy + s*d), (cx + s*d, cy - d)]，s = scale。
    """
    x_min, y_min, x_max, y_max = bounding_box(vertices)
    x_diff = x_max - x_min
    y_diff = y_max - y_min
    d = max(x_diff, y_diff)
    cx = x_min + x_diff * 0.5
    cy = y_min + y_diff * 0.5
    return [
        (cx - scale * d, cy - d),
        (cx, cy + scale * d),
        (cx + scale * d, cy - d),
    ]


def circumcircle(vertices, i, j, k, epsilon=EPSILON):
    """
    计算 vertices[i], vertices[j], vertices[k] 的外接圆。

    用边 (i,j) 与 (j,k) 的中垂线（点斜式）求交点。某条边两端 y 差小于
    epsilon 时，它的中垂线是竖直的，圆心 x 直接取该边中点的 x。

    参数
    ----
    vertices : 点序列，每个点为 (x, y)
    i, j, k : int
        三个顶点下标。
    epsilon : float
        y 对齐判断的容差。

    返回
    ----
    Triangle(i, j, k, cx, cy, r)，r 为圆心到 vertices[j] 距离的平方。

    抛出
    ----
    DegenerateTriangleError
        (i,j) 与 (j,k) 两条边都水平对齐，或两条中垂线平行。
    """
    x_i, y_i = vertices[i][0], vertices[i][1]
    x_j, y_j = vertices[j][0], vertices[j][1]
    x_k, y_k = vertices[k][0], vertices[k][1]

    y_diff_ij = abs(y_i - y_j)
    y_diff_jk = abs(y_j - y_k)

    if y_diff_ij < epsilon and y_diff_jk < epsilon:
        raise DegenerateTriangleError(
            f"Can't get circumcircle since points {i}, {j}, {k} are y-aligned")

    x_mid_ij = (x_i + x_j) / 2.0
    x_mid_jk = (x_j + x_k) / 2.0
    y_mid_ij = (y_i + y_j) / 2.0
    y_mid_jk = (y_j + y_k) / 2.0

    if y_diff_ij < epsilon:
        m2 = -((x_k - x_j) / (y_k - y_j))
        x_center = x_mid_ij
        y_center = m2 * (x_center - x_mid_jk) + y_mid_jk
    elif y_diff_jk < epsilon:
        m1 = -((x_j - x_i) / (y_j - y_i))
        x_center = x_mid_jk
        y_center = m1 * (x_center - x_mid_ij) + y_mid_ij
    else:
        m1 = -((x_j - x_i) / (y_j - y_i))
        m2 = -((x_k - x_j) / (y_k - y_j))
        if m1 == m2:
            raise DegenerateTriangleError(
                f"Can't get circumcircle since points {i}, {j}, {k} are colinear")
        x_center = (m1 * x_mid_ij - m2 * x_mid_jk + y_mid_jk - y_mid_ij) / (m1 - m2)
        # 在 y 差更大的那条边的中垂线上取 y，数值更稳
        if y_diff_ij > y_diff_jk:
            y_center = m1 * (x_center - x_mid_ij) + y_mid_ij
        else:
            y_center = m2 * (x_center - x_mid_jk) + y_mid_jk

    x_diff = x_j - x_center
    y_diff = y_j - y_center
    return Triangle(i, j, k, x_center, y_center, x_diff * x_diff + y_diff * y_diff)
