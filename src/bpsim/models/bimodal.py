import toffee

from bpsim.models.counter_table import SaturatingCounterTable
from bpsim.parameter import BIMODAL, BIMODAL_LABEL, INST_OFFSET_BITS, PHT_INIT
from bpsim.util import bits, check_index_bits

__all__ = ["BimodalPredictor", "get_bimodal_idx"]


def get_bimodal_idx(pc: int, width: int) -> int:
    """
    :return: 去掉低INST_OFFSET_BITS位对齐位后的pc低width位
    """
    return bits(pc, INST_OFFSET_BITS, width)


class BimodalPredictor:
    """
    2^M2项2位饱和计数器, 通过pc[M2+1:2]直接索引
    """
    name = BIMODAL

    def __init__(self, m2: int):
        self.m2 = check_index_bits("M2", m2)
        self.table = SaturatingCounterTable(m2, PHT_INIT)

    def get_idx(self, pc: int) -> int:
        return get_bimodal_idx(pc, self.m2)

    def predict(self, pc: int) -> bool:
        return self.table.predict(self.get_idx(pc))

    def train(self, pc: int, taken: bool) -> None:
        """
        训练计数器, 不跳转减一, 跳转加一
        """
        self.table.update(self.get_idx(pc), taken)

    def predict_and_update(self, pc: int, taken: bool) -> bool:
        idx = self.get_idx(pc)
        predict_taken = self.table.predict(idx)
        toffee.debug("Bimodal: pc: %x, idx: %d, ctr: %d, taken: %s", pc, idx, self.table.read(idx), taken)
        self.table.update(idx, taken)
        return predict_taken == taken

    def tables(self) -> list[tuple[str, SaturatingCounterTable]]:
        return [(BIMODAL_LABEL, self.table)]
