from sweepdt.primitives.triangle import Triangle


def triangle_edges(t: Triangle):
    return [(t.i, t.j), (t.j, t.k), (t.k, t.i)]


def dedupe_edges(edges):
    """
    删除被两个破碎三角形共享的边（正反方向都算同一条），原地修改。

    从尾部开始，每条边与它前面最近的一条相同边配对，两条一起删掉；
    剩下的就是空腔的外边界。
    每个点打碎的三角形很少，所以 O(m^2) 的两两比较够用。

    :param edges: list[(int, int)]
    :return: 同一个 list
    """
    j = len(edges)
    while j > 0:
        j -= 1
        a, b = edges[j]
        for i in range(j - 1, -1, -1):
            m, n = edges[i]
            if (a == m and b == n) or (a == n and b == m):
                del edges[j]
                del edges[i]
                # edges[i+1 .. j-1] 左移了一位
                j -= 1
                break
    return edges
