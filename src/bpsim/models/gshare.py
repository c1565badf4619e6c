import toffee

from bpsim.models.counter_table import SaturatingCounterTable
from bpsim.models.global_history import GlobalHistory
from bpsim.parameter import GSHARE, GSHARE_LABEL, INST_OFFSET_BITS, PHT_INIT
from bpsim.util import bits, check_history_bits, mask

__all__ = ["GsharePredictor", "get_gshare_idx"]


def get_gshare_idx(pc: int, history: int, m1: int, n: int) -> int:
    """
    索引由两部分拼接而成:
    高N位: pc[M1+1:M1-N+2] ^ history[N-1:0]
    低M1-N位: pc[M1-N+1:2]
    :param history: 全局历史
    :return: [0, 2^M1) 之间的索引
    """
    low_width = m1 - n
    pc_high_n = bits(pc, low_width + INST_OFFSET_BITS, n)
    xor_part = pc_high_n ^ (history & mask(n))
    pc_low_bits = bits(pc, INST_OFFSET_BITS, low_width)
    return (xor_part << low_width) | pc_low_bits


class GsharePredictor:
    """
    2^M1项2位饱和计数器, 用pc和N位全局历史异或后的结果索引
    """
    name = GSHARE

    def __init__(self, m1: int, n: int):
        check_history_bits(m1, n)
        self.m1 = m1
        self.n = n
        self.table = SaturatingCounterTable(m1, PHT_INIT)
        self.ghv = GlobalHistory(n)

    def get_idx(self, pc: int) -> int:
        return get_gshare_idx(pc, self.ghv.value, self.m1, self.n)

    def predict(self, pc: int) -> bool:
        return self.table.predict(self.get_idx(pc))

    def train(self, pc: int, taken: bool) -> None:
        """
        只训练计数器, 不更新全局历史
        必须在update_history之前调用, 否则索引会用到新的历史
        """
        self.table.update(self.get_idx(pc), taken)

    def update_history(self, taken: bool) -> None:
        self.ghv.update(taken)

    def predict_and_update(self, pc: int, taken: bool) -> bool:
        idx = self.get_idx(pc)
        predict_taken = self.table.predict(idx)
        toffee.debug("Gshare: pc: %x, ghv: %d, idx: %d, ctr: %d, taken: %s",
                     pc, self.ghv.value, idx, self.table.read(idx), taken)
        self.table.update(idx, taken)
        self.ghv.update(taken)
        return predict_taken == taken

    def tables(self) -> list[tuple[str, SaturatingCounterTable]]:
        return [(GSHARE_LABEL, self.table)]
