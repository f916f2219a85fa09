"""
合并流程模块：解析、去重、改写、排序并输出 hosts 条目
"""

import io
import logging
from typing import BinaryIO, Dict, Iterable, List

from hostsmerge.models import HostEntry
from hostsmerge.parser import parse_line
from hostsmerge.rewrite import NO_REWRITE, AddressRewrite

ENCODING = "utf-8"


class MergeRunner:
    """
    把一个输入流中的 hosts 条目合并后写入输出流

    状态: ready -> started -> success | failure，每个实例只能运行一次。
    输入中格式错误的行会被静默跳过；任何 I/O 错误都会中止运行并报告失败，
    已写出的部分输出不会回滚。
    """

    READY = "ready"
    STARTED = "started"
    SUCCESS = "success"
    FAILURE = "failure"

    def __init__(
        self,
        input: BinaryIO,
        output: BinaryIO,
        rewrite: AddressRewrite = NO_REWRITE,
        logger: logging.Logger = logging.getLogger("hostsmerge"),
    ):
        """
        初始化合并流程

        参数:
            input: 可读的字节流（文件、标准输入或 FilesStream）
            output: 可写的字节流
            rewrite: 地址改写策略
            logger: 日志记录器实例
        """
        self.input = input
        self.output = output
        self.rewrite = rewrite
        self.logger = logger
        self.state = self.READY
        self.lines_read = 0
        self.entries_parsed = 0

    def has_started(self) -> bool:
        """是否正在运行"""
        return self.state == self.STARTED

    def has_finished(self) -> bool:
        """是否已运行结束（成功或失败）"""
        return self.state in (self.SUCCESS, self.FAILURE)

    def is_success(self) -> bool:
        """是否已成功结束；未结束时返回 False"""
        return self.state == self.SUCCESS

    def is_failure(self) -> bool:
        """是否以失败结束；未结束时返回 False"""
        return self.state == self.FAILURE

    def run(self) -> bool:
        """
        执行完整的合并流程

        返回:
            成功返回 True，发生 I/O 错误返回 False

        异常:
            RuntimeError: 如果该实例已经运行过
        """
        if self.state != self.READY:
            raise RuntimeError(f"合并流程只能运行一次（当前状态: {self.state}）")
        self.state = self.STARTED

        try:
            entries = self.parse_input()
            written = self.write_output(entries)
        except OSError as e:
            self.state = self.FAILURE
            self.logger.error(f"合并失败: {e}")
            return False

        self.state = self.SUCCESS
        self.logger.info(
            f"已读取 {self.lines_read} 行，解析出 {self.entries_parsed} 条记录，"
            f"输出 {written} 条唯一记录"
        )
        return True

    def parse_input(self) -> Iterable[HostEntry]:
        """
        逐行读取输入并按主机名去重（后出现的覆盖先出现的）

        返回:
            去重后的条目
        """
        entries: Dict[str, HostEntry] = {}

        # newline=None 同时兼容 \n、\r\n 和 \r 结尾
        reader = io.TextIOWrapper(
            io.BufferedReader(_Unclosable(self.input)),
            encoding=ENCODING,
            errors="replace",
            newline=None,
        )
        with reader:
            for line in reader:
                self.lines_read += 1
                for entry in parse_line(line.rstrip("\n"), self.rewrite):
                    self.entries_parsed += 1
                    previous = entries.get(entry.hostname)
                    if previous is not None and previous != entry:
                        self.logger.debug(f"覆盖重复主机名: {previous} => {entry}")
                    entries[entry.hostname] = entry

        return entries.values()

    def write_output(self, entries: Iterable[HostEntry]) -> int:
        """
        按 (地址, 主机名) 排序后写入输出流

        返回:
            写入的条目数
        """
        hosts: List[HostEntry] = sorted(entries, key=HostEntry.sort_key)

        for entry in hosts:
            self.output.write((entry.to_hosts_line() + "\n").encode(ENCODING))
        self.output.flush()

        return len(hosts)


class _Unclosable(io.RawIOBase):
    """包装输入流，使 TextIOWrapper 关闭时不关闭调用方持有的流"""

    def __init__(self, raw: BinaryIO):
        super().__init__()
        self.raw = raw

    def readable(self) -> bool:
        """该流始终可读"""
        return True

    def readinto(self, buffer) -> int:
        data = self.raw.read(len(buffer))
        if not data:
            return 0
        count = len(data)
        buffer[:count] = data
        return count
