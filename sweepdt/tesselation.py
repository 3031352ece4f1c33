import re

import numpy as np

from sweepdt.config import GRID_SPACING, SCATTER_AMOUNT
from sweepdt.GlobalTestDelaunay import GlobalTestDelaunay
from sweepdt.PointDistribution import grid_size_for_window, scattered_grid_points
from sweepdt.triangulation.sweep import calc_delaunay_triangulation, triangles_as_array


class Frame:
    """一帧三角剖分：点坐标 (m, 2) 与扁平三角形下标列表"""

    def __init__(self, vertices, triangles):
        self.vertices = vertices
        self.triangles = triangles

    def __len__(self):
        return len(self.triangles) // 3

    def polygons(self):
        return triangle_polygons(self.vertices, self.triangles)

    def __repr__(self):
        return f"Frame(points={len(self.vertices)}, triangles={len(self)})"


class TesselationContext:
    """
    背景三角剖分的状态：画布尺寸、当前帧、上一帧。
    由调用方持有并传给 next_tesselation。
    """

    def __init__(self, width: float, height: float, spacing=GRID_SPACING, scatter=SCATTER_AMOUNT):
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self.spacing = spacing
        self.scatter = scatter
        self.current = None
        self.previous = None

    @classmethod
    def from_view_box(cls, view_box: str, **kwargs):
        """'min-x min-y width height'，取后两个数"""
        parts = [p for p in re.split(r"[\s,]+", view_box.strip()) if p]
        if len(parts) != 4:
            raise ValueError(f"bad viewBox: {view_box!r}")
        return cls(float(parts[2]), float(parts[3]), **kwargs)

    def __repr__(self):
        return f"TesselationContext({self.width}x{self.height}, current={self.current}, previous={self.previous})"


def triangle_polygons(vertices, triangles):
    """每个三角形的三个顶点坐标，shape (m, 3, 2)"""
    pts = np.asarray(vertices, dtype=float).reshape(-1, 2)
    return pts[triangles_as_array(triangles)]


def next_tesselation(ctx: TesselationContext, window_w, window_h, rng=None) -> Frame:
    """
    生成新的一帧：抖动网格点 -> 三角剖分。
    原来的当前帧移到 ctx.previous，等待调用方淘汰。
    """
    grid_size = grid_size_for_window(ctx.width, ctx.height, window_w, window_h, ctx.spacing)
    vertices = scattered_grid_points(ctx.width, ctx.height, grid_size, ctx.scatter, rng)
    frame = Frame(vertices, calc_delaunay_triangulation(vertices))

    ctx.previous = ctx.current
    ctx.current = frame
    return frame


def main():
    ctx = TesselationContext.from_view_box("0 0 1920 1080")
    rng = np.random.default_rng(0)
    for _ in range(2):
        frame = next_tesselation(ctx, 1920, 1080, rng)
        print(frame, "Delaunay:", GlobalTestDelaunay(frame.vertices, frame.triangles))
    print(ctx)


if __name__ == "__main__":
    main()
