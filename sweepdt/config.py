# 三角剖分的可调参数

# 2^-20，外接圆 / 共线判断的数值容差
EPSILON = 1.0 / 1048576.0

# 超级三角形相对包围盒边长的放大倍数（经验值，不是推导出的界）
SUPER_TRIANGLE_SCALE = 20

# 点数少于 MIN_POINTS 或多于 MAX_POINTS 时直接返回空结果
MIN_POINTS = 3
MAX_POINTS = 2000

# 抖动网格点集
GRID_SPACING = 250
SCATTER_AMOUNT = 0.75
