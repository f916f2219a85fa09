"""
Hosts Merge - 合并、去重并排序多个 hosts 文件
"""

__version__ = "1.0.0"
__author__ = "Hosts Merge Project"

from hostsmerge.app import HostsMerge
from hostsmerge.config import Config
from hostsmerge.merger import MergeRunner
from hostsmerge.models import HostEntry
from hostsmerge.parser import parse_line
from hostsmerge.rewrite import AddressRewrite, RewriteMode
from hostsmerge.stream import FilesStream

__all__ = [
    "HostsMerge",
    "Config",
    "MergeRunner",
    "HostEntry",
    "parse_line",
    "AddressRewrite",
    "RewriteMode",
    "FilesStream",
]
