"""
hosts 文件行解析模块
"""

import re
from typing import List, Optional

from hostsmerge.models import HostEntry
from hostsmerge.rewrite import NO_REWRITE, AddressRewrite

# 宽松的 hosts 行格式，兼容 IPv4 和 IPv6
HOST_LINE = re.compile(
    r"^#?([0-9:.]+)[ \t\n\x0b\f\r]+([a-z0-9\-._\t ]+)(#.*)?$",
    re.IGNORECASE,
)


def sanitize_comment(comment: Optional[str]) -> str:
    """去掉注释开头的一个 # 及两端空白；没有注释时返回空字符串"""
    if comment is None:
        return ""
    if comment.startswith("#"):
        return comment[1:].strip()
    return comment


def parse_line(line: str, rewrite: AddressRewrite = NO_REWRITE) -> List[HostEntry]:
    """
    把一行 hosts 文本解析为零个或多个条目

    不匹配的行（空行、纯注释、格式错误）返回空列表，不视为错误。
    同一行的所有主机名共享改写后的地址、禁用标记和注释。

    参数:
        line: 不含换行符的单行文本
        rewrite: 地址改写策略

    返回:
        HostEntry 列表，每个主机名一个
    """
    match = HOST_LINE.match(line)
    if not match:
        return []

    address = rewrite.rewrite(match.group(1))
    hostnames = match.group(2).split()
    if not address or not hostnames:
        return []

    enabled = not line.startswith("#")
    comment = sanitize_comment(match.group(3))
    return [
        HostEntry(address=address, hostname=hostname, comment=comment, enabled=enabled)
        for hostname in hostnames
    ]
