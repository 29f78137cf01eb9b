from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class StaticSiteReport:
    """Outcome of a static site build."""

    output_dir: Path
    written: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output_dir": str(self.output_dir),
            "written": [str(path) for path in self.written],
            "skipped": list(self.skipped),
            "failures": list(self.failures),
        }
