from toffee.utils import TwoBitsCounter

from bpsim.parameter import CTR_MIN, CTR_MAX, CTR_TAKEN_THRESHOLD, PHT_INIT

__all__ = ["SaturatingCounterTable"]


class SaturatingCounterTable:
    """
    2^width个2位饱和计数器
    counter >= 0b10 预测跳转, 否则预测不跳转
    """

    def __init__(self, width: int, init_value: int = PHT_INIT):
        assert CTR_MIN <= init_value <= CTR_MAX, f"Counter init value {init_value} out of range"
        self.width = width
        self.table: tuple[TwoBitsCounter, ...] = tuple(
            TwoBitsCounter(init_value) for _ in range(1 << width)
        )

    def __len__(self) -> int:
        return len(self.table)

    def read(self, idx: int) -> int:
        return self.get_ctr(idx).counter

    def predict(self, idx: int) -> bool:
        return self.get_ctr(idx).counter >= CTR_TAKEN_THRESHOLD

    def increment(self, idx: int) -> None:
        self.get_ctr(idx).update(True)

    def decrement(self, idx: int) -> None:
        self.get_ctr(idx).update(False)

    def update(self, idx: int, taken: bool) -> None:
        self.get_ctr(idx).update(taken)

    def values(self) -> list[int]:
        return [ctr.counter for ctr in self.table]

    def get_ctr(self, idx: int) -> TwoBitsCounter:
        assert 0 <= idx < len(self.table), f"Index {idx} out of range for table of {len(self.table)} counters"
        return self.table[idx]

    def __repr__(self):
        return f"SaturatingCounterTable(width={self.width}, values={self.values()})"
