from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BufferSummary:
    """Point-in-time snapshot of every statistic a StatBuffer tracks."""

    capacity: int
    count: int
    min: Optional[int]
    max: Optional[int]
    range: Optional[int]
    sum: int
    mean: float
    mode: Optional[int]
    std_dev: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def format_summary(self) -> List[str]:
        """Return a list of lines forming the human-readable report."""
        mode = "none" if self.mode is None else str(self.mode)
        lines = ["--- statbuf summary ---"]
        lines.append(f"  count:    {self.count}/{self.capacity}")
        if self.count == 0:
            lines.append("  (empty)")
            return lines
        lines.append(f"  min:      {self.min}")
        lines.append(f"  max:      {self.max}")
        lines.append(f"  range:    {self.range}")
        lines.append(f"  sum:      {self.sum}")
        lines.append(f"  mean:     {self.mean:.4f}")
        lines.append(f"  mode:     {mode}")
        lines.append(f"  std dev:  {self.std_dev:.4f}")
        return lines
