"""Data type definitions for toonify"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}


@dataclass
class TokenReport:
    """Estimated token counts before and after a conversion."""

    input_tokens: int
    output_tokens: int

    @property
    def difference(self) -> int:
        return self.output_tokens - self.input_tokens

    @property
    def percent_change(self) -> float:
        if self.input_tokens == 0:
            return 0.0
        return self.difference / self.input_tokens * 100

    @property
    def saved(self) -> bool:
        return self.difference < 0
