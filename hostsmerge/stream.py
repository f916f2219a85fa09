"""
多文件字节流模块

把一组候选文件（例如某个目录下的文件）拼接成一个连续的只读字节流。
"""

import fnmatch
import io
import logging
import os
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_LOGGER = logging.getLogger("hostsmerge")


class FilesStream(io.RawIOBase):
    """
    按顺序读取多个文件的原始字节流

    当前文件读完后立即关闭并打开下一个候选文件，文件之间不插入任何字节。
    不是普通文件的候选项（目录、已消失的条目等）会被跳过。
    """

    def __init__(
        self,
        candidates: Iterable[PathLike],
        listing: Optional[Iterator] = None,
        logger: logging.Logger = DEFAULT_LOGGER,
    ):
        """
        初始化文件流

        参数:
            candidates: 候选文件路径，按迭代顺序读取
            listing: 产生候选项的目录句柄，关闭流时一并关闭
            logger: 日志记录器实例
        """
        super().__init__()
        self.candidates = iter(candidates)
        self.listing = listing
        self.logger = logger
        self.current: Optional[BinaryIO] = None

    @classmethod
    def from_directory(
        cls,
        directory: PathLike,
        pattern: Optional[str] = None,
        predicate: Optional[Callable[[Path], bool]] = None,
        logger: logging.Logger = DEFAULT_LOGGER,
    ) -> "FilesStream":
        """
        为目录下的文件创建流（不递归）

        参数:
            directory: 要读取的目录
            pattern: 文件名 glob 模式，例如 "*.hosts"
            predicate: 对候选路径的过滤函数
            logger: 日志记录器实例

        返回:
            FilesStream 实例

        异常:
            FileNotFoundError: 目录不存在
            NotADirectoryError: 路径不是目录
        """
        listing = os.scandir(directory)

        def candidates() -> Iterator[Path]:
            for entry in listing:
                if pattern is not None and not fnmatch.fnmatch(entry.name, pattern):
                    continue
                path = Path(entry.path)
                if predicate is not None and not predicate(path):
                    continue
                yield path

        return cls(candidates(), listing=listing, logger=logger)

    def readable(self) -> bool:
        """该流始终可读"""
        return True

    def readinto(self, buffer) -> int:
        """
        读取字节到 buffer，在文件之间无缝切换

        返回:
            读取的字节数；0 表示所有文件都已读完
        """
        if self.closed:
            raise ValueError("I/O operation on closed file.")

        while True:
            if self.current is None:
                self.current = self._open_next()
                if self.current is None:
                    return 0

            count = self.current.readinto(buffer)
            if count:
                return count

            # 当前文件已读完，关闭后切换到下一个
            self._close_current()

    def close(self) -> None:
        """释放当前文件和目录句柄"""
        if self.closed:
            return
        try:
            self._close_current()
        finally:
            try:
                if self.listing is not None and hasattr(self.listing, "close"):
                    self.listing.close()
            finally:
                super().close()

    def _open_next(self) -> Optional[BinaryIO]:
        """打开下一个普通文件，没有剩余文件时返回 None"""
        for candidate in self.candidates:
            path = Path(candidate)
            if not path.is_file():
                self.logger.debug(f"跳过非普通文件: {path}")
                continue
            self.logger.debug(f"正在读取文件: {path}")
            return open(path, "rb")
        return None

    def _close_current(self) -> None:
        if self.current is not None:
            current, self.current = self.current, None
            current.close()
