import math

import numpy as np

from sweepdt.config import GRID_SPACING, SCATTER_AMOUNT


def grid_size_for_window(view_w, view_h, window_w, window_h, spacing=GRID_SPACING):
    """
    把窗口像素下的网格间距换算到画布（viewBox）坐标。
    窗口比画布更宽时按宽度换算，否则按高度。
    """
    if min(view_w, view_h, window_w, window_h) <= 0:
        raise ValueError("view and window sizes must be positive")
    if window_w / window_h > view_w / view_h:
        return spacing * view_w / window_w
    return spacing * view_h / window_h


def scattered_grid_points(width, height, grid_size, scatter=SCATTER_AMOUNT, rng=None):
    """
    在 width x height 的画布上生成抖动网格点。

    网格列 x = floor(width/grid_size)+1 ... -1（行同理），多出一圈覆盖边缘；
    整体偏移 (width % grid_size)/2，每个坐标再随机偏移 scatter*(u-0.5) 个格子。

    返回
    ----
    points : ndarray, shape (m, 2)
    """
    if grid_size <= 0:
        raise ValueError("grid_size must be positive")
    rng = np.random.default_rng(rng)

    x_offset = (width % grid_size) / 2
    y_offset = (height % grid_size) / 2
    xs = np.arange(math.floor(width / grid_size) + 1, -2, -1)
    ys = np.arange(math.floor(height / grid_size) + 1, -2, -1)
    # x 外层、y 内层
    cells = np.array(np.meshgrid(xs, ys, indexing="ij"), dtype=float).reshape(2, -1).T

    jitter = scatter * (rng.random(cells.shape) - 0.5)
    return np.array([x_offset, y_offset]) + grid_size * (cells + jitter)


def random_points_in_triangle(n, A, B, C, seed=42):
    """
    在 △ABC 内均匀生成 n 个随机点
    """
    rng = np.random.default_rng(seed)
    A, B, C = (np.asarray(p, dtype=float) for p in (A, B, C))
    u = rng.random(n)
    v = rng.random(n)
    # 反射法把 (u,v) 保持在 u+v<=1 的区域
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    # 仿射组合
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def random_points_in_polygon(k, radius, n_interior, interior_radius, seed=None, phase=0.1):
    """
    正 k 边形的顶点 + 中心小圆盘内均匀分布的 n_interior 个点。
    前 k 个点就是凸包。
    """
    rng = np.random.default_rng(seed)
    angles = 2 * np.pi * np.arange(k) / k + phase
    corners = radius * np.stack([np.cos(angles), np.sin(angles)], axis=1)

    theta = rng.random(n_interior) * 2 * np.pi
    rho = np.sqrt(rng.random(n_interior)) * interior_radius
    interior = np.stack([rho * np.cos(theta), rho * np.sin(theta)], axis=1)
    return np.vstack([corners, interior])
