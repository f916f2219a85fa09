"""
地址改写策略模块

每种策略都是纯函数 address -> address，没有匹配规则时原样返回输入。
"""

from dataclasses import dataclass
from enum import Enum

DEFAULT_ADDRESS = "0.0.0.0"
LOOPBACK4 = "127.0.0.1"
LOOPBACK6 = "::1"


class RewriteMode(Enum):
    """可选的改写方式"""

    NONE = "none"
    DEFAULT = "default"
    LOOPBACK = "loopback"
    LOOPBACK6 = "loopback6"


@dataclass(frozen=True)
class AddressRewrite:
    """
    地址改写策略

    属性:
        mode: 改写方式
        all: 为 True 时把所有地址都改写为目标地址（对 NONE 无效）
    """

    mode: RewriteMode = RewriteMode.NONE
    all: bool = False

    def rewrite(self, address: str) -> str:
        """
        按配置的方式改写单个地址

        参数:
            address: 原始地址字面量

        返回:
            改写后的地址
        """
        if self.mode is RewriteMode.DEFAULT:
            if self.all or address in (LOOPBACK4, LOOPBACK6):
                return DEFAULT_ADDRESS
        elif self.mode is RewriteMode.LOOPBACK:
            if self.all or address == DEFAULT_ADDRESS:
                return LOOPBACK4
        elif self.mode is RewriteMode.LOOPBACK6:
            if self.all or address in (DEFAULT_ADDRESS, LOOPBACK4):
                return LOOPBACK6
        return address

    def __call__(self, address: str) -> str:
        return self.rewrite(address)

    def __str__(self) -> str:
        return f"{self.mode.value} (all)" if self.all else self.mode.value


NO_REWRITE = AddressRewrite()
