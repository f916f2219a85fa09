#!/usr/bin/env python3
"""
Hosts Merge - 主入口点

把一个或多个 hosts 文件合并为去重、排序后的单个文件。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostsmerge 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostsmerge.cli import main


if __name__ == '__main__':
    sys.exit(main())
