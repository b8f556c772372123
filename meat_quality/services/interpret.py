from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

# output order of the model
CLASSES: Tuple[Tuple[str, str, str], ...] = (
    ("Fresh", "Good to Go", "This item is perfectly fresh and ready to use."),
    ("Borderline", "On the Edge",
     "This item is still usable but might not last long. Use it soon after checking carefully."),
    ("Spoiled", "No Good", "This item is spoiled and should be discarded."),
)

CLASS_NAMES = [c[0] for c in CLASSES]


@dataclass
class ClassificationResult:
    index: int
    label: str
    headline: str
    advisory: str
    confidences: List[float] = field(default_factory=list)

    @property
    def text(self) -> str:
        return f"Prediction: {self.label}\n{self.headline}: {self.advisory}"


def argmax_first(confidences: Sequence[float]) -> int:
    # only a strictly greater value moves the max, so ties keep the earliest index
    max_pos = 0
    max_conf = confidences[0]
    for i, c in enumerate(confidences):
        logger.debug("Confidence for class %d: %s", i, c)
        if c > max_conf:
            max_conf = c
            max_pos = i
    return max_pos


def interpret(confidences: Sequence[float]) -> ClassificationResult:
    confs = [float(c) for c in confidences]
    idx = argmax_first(confs)
    label, headline, advisory = CLASSES[idx]
    return ClassificationResult(
        index=idx,
        label=label,
        headline=headline,
        advisory=advisory,
        confidences=confs,
    )
