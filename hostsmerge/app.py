"""
Hosts Merge 主应用模块
"""

import logging
import os
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO

from hostsmerge.config import STDIO, Config
from hostsmerge.merger import MergeRunner
from hostsmerge.stream import FilesStream


class HostsMerge:
    """
    主应用控制器，协调所有组件

    - 打开输入（标准输入、单个文件或目录下的所有文件）
    - 打开输出（标准输出或文件，必要时创建父目录）
    - 按配置构建地址改写策略并运行合并流程
    """

    def __init__(self, config: Config):
        """
        初始化 Hosts Merge 应用

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()
        self.rewrite = config.address_rewrite()

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        合并结果可能写到标准输出，所以日志写到标准错误。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostsmerge')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def open_input(self, stack: ExitStack) -> BinaryIO:
        """
        打开输入流

        参数:
            stack: 负责关闭已打开资源的 ExitStack

        返回:
            可读的字节流

        异常:
            FileNotFoundError: 输入路径不存在
            PermissionError: 没有读取权限
        """
        name = self.config.input_path
        if name == STDIO:
            return sys.stdin.buffer

        path = Path(name)
        if path.is_dir():
            self.logger.info(f"正在合并目录: {path}")
            return stack.enter_context(
                FilesStream.from_directory(
                    path, pattern=self.config.pattern, logger=self.logger
                )
            )

        return stack.enter_context(open(path, 'rb'))

    def open_output(self, stack: ExitStack) -> BinaryIO:
        """
        打开输出流，必要时创建父目录

        参数:
            stack: 负责关闭已打开资源的 ExitStack

        返回:
            可写的字节流
        """
        name = self.config.output_path
        if name == STDIO:
            return sys.stdout.buffer

        path = Path(name)
        if path.parent != Path('.'):
            os.makedirs(path.parent, exist_ok=True)

        mode = 'ab' if self.config.append else 'wb'
        return stack.enter_context(open(path, mode))

    def run(self) -> int:
        """
        运行一次合并

        返回:
            进程退出码：成功为 0，失败为 1

        异常:
            OSError: 打开输入或输出失败
        """
        self.logger.info(
            f"输入: {self.config.input_path}, 输出: {self.config.output_path}, "
            f"地址改写: {self.rewrite}"
        )

        with ExitStack() as stack:
            source = self.open_input(stack)
            target = self.open_output(stack)

            runner = MergeRunner(source, target, self.rewrite, self.logger)
            runner.run()

        return 0 if runner.is_success() else 1
