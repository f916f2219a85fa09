"""
配置管理模块，支持环境变量
"""

import os
from dataclasses import dataclass
from typing import Optional

from hostsmerge.rewrite import AddressRewrite, RewriteMode

STDIO = "-"


@dataclass
class Config:
    """应用配置类，从环境变量加载配置，命令行参数可覆盖"""

    input_path: str = STDIO
    output_path: str = STDIO
    append: bool = False
    rewrite: str = RewriteMode.NONE.value
    rewrite_all: bool = False
    pattern: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTSMERGE_INPUT: 输入文件或目录 (默认: - 即标准输入)
            HOSTSMERGE_OUTPUT: 输出文件 (默认: - 即标准输出)
            HOSTSMERGE_APPEND: 追加而不是覆盖输出文件 (默认: false)
            HOSTSMERGE_REWRITE: 地址改写方式 none/default/loopback/loopback6 (默认: none)
            HOSTSMERGE_REWRITE_ALL: 改写所有地址 (默认: false)
            HOSTSMERGE_GLOB: 输入为目录时的文件名模式 (默认: 所有文件)
            LOG_LEVEL: 日志级别 (默认: WARNING)
        """
        return cls(
            input_path=os.getenv("HOSTSMERGE_INPUT", STDIO),
            output_path=os.getenv("HOSTSMERGE_OUTPUT", STDIO),
            append=os.getenv("HOSTSMERGE_APPEND", "false").lower() == "true",
            rewrite=os.getenv("HOSTSMERGE_REWRITE", RewriteMode.NONE.value).lower(),
            rewrite_all=os.getenv("HOSTSMERGE_REWRITE_ALL", "false").lower() == "true",
            pattern=os.getenv("HOSTSMERGE_GLOB") or None,
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )

        valid_modes = [mode.value for mode in RewriteMode]
        if self.rewrite not in valid_modes:
            raise ValueError(
                f"无效的改写方式: {self.rewrite}. "
                f"必须是以下之一: {', '.join(valid_modes)}"
            )

    def address_rewrite(self) -> AddressRewrite:
        """根据配置构建地址改写策略"""
        return AddressRewrite(mode=RewriteMode(self.rewrite), all=self.rewrite_all)
