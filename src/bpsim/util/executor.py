from typing import Iterator

from bpsim.customtypes import BranchEvent

__all__ = ["Executor", "TraceFormatError"]

OUTCOMES = {"t": True, "n": False}


class TraceFormatError(ValueError):
    def __init__(self, filename, lineno: int, line: str, reason: str):
        self.filename = filename
        self.lineno = lineno
        self.line = line
        super().__init__(f"{filename}:{lineno}: {reason}: {line!r}")


class Executor:
    """Replay the branch records of a trace file in file order."""

    def __init__(self, filename):
        self.filename = filename

    def __iter__(self) -> Iterator[BranchEvent]:
        # Decoded line by line so a bad byte is reported with its own line number
        with open(self.filename, "rb") as f:
            for lineno, raw in enumerate(f, 1):
                try:
                    line = raw.decode("ascii")
                    if not line.strip():
                        continue
                    event = self.parse_line(line)
                except ValueError as e:
                    text = raw.decode("ascii", "backslashreplace").rstrip("\r\n")
                    raise TraceFormatError(self.filename, lineno, text, str(e)) from e
                yield event

    @staticmethod
    def parse_line(line: str) -> BranchEvent:
        """
        :param line: "<十六进制地址> <t|n>", 地址可以带0x前缀和前导0
        """
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected 2 fields, got {len(fields)}")
        addr, outcome = fields
        pc = int(addr, 16)
        if pc < 0:
            raise ValueError(f"negative address {addr}")
        if outcome not in OUTCOMES:
            raise ValueError(f"outcome must be 't' or 'n', got {outcome!r}")
        return BranchEvent(pc, OUTCOMES[outcome])
