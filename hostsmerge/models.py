"""
Hosts Merge 数据模型
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目

    同一 hostname 的两个条目视为同一条记录，合并时后出现的覆盖先出现的。

    属性:
        address: 地址字面量（不做 IP 合法性校验，可能已被改写）
        hostname: 主机名，去重的唯一键
        comment: 行尾注释（不含 #），可为空
        enabled: False 表示以注释形式输出的禁用条目
    """

    address: Optional[str]
    hostname: str
    comment: str = ""
    enabled: bool = True

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: [#]<地址> <主机名>[ # <注释>]

        返回:
            格式化的 hosts 文件行（不含换行符）
        """
        prefix = "" if self.enabled else "#"
        line = f"{prefix}{self.address} {self.hostname}"
        if self.comment:
            line += f" # {self.comment}"
        return line

    def sort_key(self) -> Tuple[bool, str, str]:
        """
        排序键：先按地址、再按主机名的字典序

        没有地址的条目排在所有有地址的条目之后。
        """
        if self.address is None:
            return (True, "", self.hostname)
        return (False, self.address, self.hostname)

    def __str__(self) -> str:
        return f"{self.hostname} -> {self.address}"
