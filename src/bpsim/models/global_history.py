from bpsim.util import mask

__all__ = ["GlobalHistory"]


class GlobalHistory:
    """
    N位全局历史寄存器, 最新的结果放在最高位(bit N-1), 每次更新右移一位丢掉最旧的结果
    N为0时寄存器恒为0
    """

    def __init__(self, gh_len: int, init_val: int = 0):
        self._len = gh_len
        self._mask = mask(gh_len)
        self.value = init_val & self._mask

    def update(self, taken: bool) -> None:
        if self._len == 0:
            return
        g = self.value >> 1
        if taken:
            g |= 1 << (self._len - 1)
        self.value = g & self._mask

    def __len__(self) -> int:
        return self._len

    def __repr__(self):
        return f"GlobalHistory(len={self._len}, value={self.value:0{max(self._len, 1)}b})"
