import math


class Vertex:
    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vertex is immutable")

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, idx):
        return (self.x, self.y)[idx]

    def __len__(self):
        return 2

    def __repr__(self):
        return f"Vertex({self.x:.2f}, {self.y:.2f})"

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        # 浮点比较用 isclose
        return math.isclose(self.x, other.x, rel_tol=1e-9) and math.isclose(self.y, other.y, rel_tol=1e-9)
