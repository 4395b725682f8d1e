"""Editable pool of labels that boards are dealt from."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidLabel, OutOfRange

logger = logging.getLogger(__name__)

FREE_LABEL = "FREE"


def _clean_label(text: str) -> str:
    label = (text or "").strip()
    if not label:
        raise InvalidLabel("label must not be empty")
    return label


@dataclass
class LabelPool:
    """Ordered labels plus an optional designation of the free-cell label.

    ``free_index`` is either ``None`` or a valid index into ``labels``. With no
    designation the free cell shows :data:`FREE_LABEL` and every label is dealt.
    """

    labels: List[str] = field(default_factory=list)
    free_index: Optional[int] = None

    def __post_init__(self) -> None:
        self.labels = [_clean_label(text) for text in self.labels]
        if self.free_index is not None:
            self._check_index(self.free_index)

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def free_label(self) -> str:
        if self.free_index is None:
            return FREE_LABEL
        return self.labels[self.free_index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.labels):
            raise OutOfRange(f"label index {index} outside [0, {len(self.labels)})")

    def add(self, text: str) -> None:
        label = _clean_label(text)
        self.labels.append(label)
        logger.debug("Added label %r (pool size %d)", label, len(self.labels))

    def remove(self, index: Optional[int] = None) -> str:
        """Remove and return the label at ``index`` (the last one when omitted)."""
        if index is None:
            index = len(self.labels) - 1
        self._check_index(index)
        label = self.labels.pop(index)
        if self.free_index is not None:
            if index == self.free_index:
                self.free_index = None
            elif index < self.free_index:
                # keep pointing at the same label
                self.free_index -= 1
        logger.debug("Removed label %r at %d", label, index)
        return label

    def set_free_designation(self, index: Optional[int]) -> None:
        if index is not None:
            self._check_index(index)
        self.free_index = index
        logger.debug("Free designation set to %s", index)

    def body_labels(self, exclude_free: bool = True) -> List[str]:
        if not exclude_free or self.free_index is None:
            return list(self.labels)
        return [label for i, label in enumerate(self.labels) if i != self.free_index]
