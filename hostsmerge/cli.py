"""
命令行接口
"""

import argparse
import sys
from typing import List, Optional

from hostsmerge import __version__
from hostsmerge.app import HostsMerge
from hostsmerge.config import Config
from hostsmerge.rewrite import RewriteMode

VERBOSE_LEVELS = ["WARNING", "INFO", "DEBUG"]


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="hostsmerge",
        description="合并、去重并排序 hosts 文件",
    )
    parser.add_argument(
        "-d", "--default", dest="rewrite", action="store_const",
        const=RewriteMode.DEFAULT.value,
        help="把 127.0.0.1 和 ::1 改写为 0.0.0.0",
    )
    parser.add_argument(
        "-l", "--loopback", dest="rewrite", action="store_const",
        const=RewriteMode.LOOPBACK.value,
        help="把 0.0.0.0 改写为 127.0.0.1",
    )
    parser.add_argument(
        "-6", "--loopback6", dest="rewrite", action="store_const",
        const=RewriteMode.LOOPBACK6.value,
        help="把 0.0.0.0 和 127.0.0.1 改写为 ::1",
    )
    parser.add_argument(
        "-A", "--all", dest="rewrite_all", action="store_true", default=None,
        help="所选改写方式作用于所有地址",
    )
    parser.add_argument(
        "-a", "--append", action="store_true", default=None,
        help="追加到输出文件而不是覆盖",
    )
    parser.add_argument(
        "-g", "--glob", dest="pattern", metavar="GLOB",
        help="输入为目录时只读取匹配该模式的文件",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="输出更多日志（可重复）",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "input", nargs="?", metavar="INPUT",
        help="要读取的文件或目录，省略或为 - 时读取标准输入",
    )
    parser.add_argument(
        "output", nargs="?", metavar="OUTPUT",
        help="要写入的文件，省略或为 - 时写入标准输出",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Config:
    """
    解析命令行参数，未指定的项使用环境变量中的配置

    参数:
        argv: 命令行参数，默认为 sys.argv[1:]

    返回:
        合并后的配置
    """
    args = build_parser().parse_args(argv)
    config = Config.from_env()

    if args.input is not None:
        config.input_path = args.input
    if args.output is not None:
        config.output_path = args.output
    if args.rewrite is not None:
        config.rewrite = args.rewrite
    if args.rewrite_all is not None:
        config.rewrite_all = args.rewrite_all
    if args.append is not None:
        config.append = args.append
    if args.pattern is not None:
        config.pattern = args.pattern
    if args.verbose:
        level = VERBOSE_LEVELS[min(args.verbose, len(VERBOSE_LEVELS) - 1)]
        config.log_level = level

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口，返回进程退出码"""
    try:
        hostsmerge = HostsMerge(parse_args(argv))
    except ValueError as e:
        print(f"初始化 Hosts Merge 失败: {e}", file=sys.stderr)
        return 1

    try:
        return hostsmerge.run()
    except OSError as e:
        hostsmerge.logger.error(f"打开或关闭输入输出失败: {e}")
        return 1
    except KeyboardInterrupt:
        hostsmerge.logger.info("被用户中断")
        return 1
    except Exception as e:
        hostsmerge.logger.error(f"致命错误: {e}", exc_info=True)
        return 1
