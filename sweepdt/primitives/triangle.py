class Triangle:
    """
    候选 / 锁定三角形的描述符。

    i, j, k : int
        工作点集中的三个顶点下标（两两不同）。
    x, y : float
        外接圆圆心。
    r : float
        外接圆半径的**平方**，比较时一律用平方距离。

    创建后不可修改。
    """
    __slots__ = ("i", "j", "k", "x", "y", "r")

    def __init__(self, i: int, j: int, k: int, x: float, y: float, r: float):
        for name, value in (("i", i), ("j", j), ("k", k), ("x", x), ("y", y), ("r", r)):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("Triangle is immutable")

    @property
    def indices(self):
        return (self.i, self.j, self.k)

    def touches_super(self, n: int) -> bool:
        """下标 >= n 的顶点是超级三角形的角点"""
        return self.i >= n or self.j >= n or self.k >= n

    def __repr__(self):
        return f"Triangle({self.i}, {self.j}, {self.k}, c=({self.x:.3f}, {self.y:.3f}), r2={self.r:.3f})"
