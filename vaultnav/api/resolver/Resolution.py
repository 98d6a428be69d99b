"""Resolution model (UNO: single model)."""

from dataclasses import dataclass, field

from ..wikilink.TargetKind import TargetKind
from ..wikilink.WikilinkToken import WikilinkToken
from .NavigationTarget import NavigationTarget
from .ResolutionResult import ResolutionResult
from .ResolutionState import ResolutionState


@dataclass
class Resolution:
    """Trace of one resolver run."""

    state: ResolutionState = ResolutionState.IDLE
    token: WikilinkToken | None = None
    reference: str | None = None
    kind: TargetKind | None = None
    result: ResolutionResult = field(default_factory=ResolutionResult)
    target: NavigationTarget | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "token": self.token.raw_content if self.token else "",
            "reference": self.reference or "",
            "kind": self.kind.value if self.kind else "",
            "state": self.state.value,
            "candidates": list(self.result.candidates),
            "target": self.target.path if self.target else "",
        }
