import toffee

from bpsim.customtypes import HybridMeta
from bpsim.models.bimodal import BimodalPredictor, get_bimodal_idx
from bpsim.models.counter_table import SaturatingCounterTable
from bpsim.models.gshare import GsharePredictor
from bpsim.parameter import (
    BIMODAL_LABEL, CHOOSER_INIT, CHOOSER_LABEL, CTR_TAKEN_THRESHOLD, GSHARE_LABEL, HYBRID
)
from bpsim.util import check_history_bits, check_index_bits

__all__ = ["HybridPredictor"]


class HybridPredictor:
    """
    gshare和bimodal的混合预测器, 由2^K项选择器决定采用哪一个的预测结果
    选择器 >= 0b10 用gshare, 否则用bimodal
    """
    name = HYBRID

    def __init__(self, k: int, m1: int, n: int, m2: int):
        self.k = check_index_bits("K", k)
        check_history_bits(m1, n)
        check_index_bits("M2", m2)
        self.gshare = GsharePredictor(m1, n)
        self.bimodal = BimodalPredictor(m2)
        self.chooser = SaturatingCounterTable(k, CHOOSER_INIT)

    @property
    def ghv(self):
        return self.gshare.ghv

    def get_chooser_idx(self, pc: int) -> int:
        return get_bimodal_idx(pc, self.k)

    def resolve(self, pc: int, taken: bool) -> HybridMeta:
        """ 处理一条分支
        1. 读取gshare, bimodal和选择器, 选择器 >= 0b10 时采用gshare的结果
        2. 只训练被选中的预测器
        3. 无条件更新全局历史
        4. 只有一个预测器正确时更新选择器, 向正确的一方靠拢
        """
        chooser_idx = self.get_chooser_idx(pc)
        chooser_ctr = self.chooser.read(chooser_idx)
        meta = HybridMeta(
            chooser_idx=chooser_idx,
            chooser_ctr=chooser_ctr,
            gshare_idx=self.gshare.get_idx(pc),
            gshare_taken=self.gshare.predict(pc),
            bimodal_idx=self.bimodal.get_idx(pc),
            bimodal_taken=self.bimodal.predict(pc),
            use_gshare=chooser_ctr >= CTR_TAKEN_THRESHOLD,
            taken=taken,
        )
        toffee.debug("Hybrid: pc: %x, %s", pc, meta)

        if meta.use_gshare:
            self.gshare.train(pc, taken)
        else:
            self.bimodal.train(pc, taken)

        self.gshare.update_history(taken)

        if meta.gshare_correct and not meta.bimodal_correct:
            self.chooser.increment(chooser_idx)
        elif meta.bimodal_correct and not meta.gshare_correct:
            self.chooser.decrement(chooser_idx)

        return meta

    def predict(self, pc: int) -> bool:
        if self.chooser.predict(self.get_chooser_idx(pc)):
            return self.gshare.predict(pc)
        return self.bimodal.predict(pc)

    def predict_and_update(self, pc: int, taken: bool) -> bool:
        return self.resolve(pc, taken).correct

    def tables(self) -> list[tuple[str, SaturatingCounterTable]]:
        return [
            (CHOOSER_LABEL, self.chooser),
            (GSHARE_LABEL, self.gshare.table),
            (BIMODAL_LABEL, self.bimodal.table),
        ]
