"""Palette index permutations for the colour-swap previews."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .constants import PALETTE_SIZE
from .pixel_buffer import PixelBuffer


logger = logging.getLogger(__name__)

Mapping = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class PermutationPreview:
    mapping: Mapping
    buffer: PixelBuffer

    @property
    def is_identity(self) -> bool:
        return is_identity(self.mapping)

    def describe(self, names: Sequence[str]) -> str:
        """``"GREEN>RED RED>GREEN ..."`` style summary for tooltips."""

        return " ".join(f"{names[src]}>{names[dst]}" for src, dst in enumerate(self.mapping))


def _permute(remaining: List[int], prefix: List[int], results: List[Mapping]) -> None:
    if not remaining:
        results.append(tuple(prefix))
        return
    for i in range(len(remaining)):
        rest = remaining[:i] + remaining[i + 1 :]
        _permute(rest, prefix + [remaining[i]], results)


def enumerate_permutations(size: int = PALETTE_SIZE) -> List[Mapping]:
    """All orderings of ``range(size)``; the identity comes first."""

    results: List[Mapping] = []
    _permute(list(range(size)), [], results)
    return results


def is_identity(mapping: Sequence[int]) -> bool:
    return all(value == index for index, value in enumerate(mapping))


def validate_mapping(mapping: Sequence[int]) -> Mapping:
    values = tuple(int(value) for value in mapping)
    if sorted(values) != list(range(PALETTE_SIZE)):
        raise ValueError(f"Mapping {values} is not a permutation of 0..{PALETTE_SIZE - 1}")
    return values


def apply_permutation(buffer: PixelBuffer, mapping: Sequence[int]) -> PixelBuffer:
    """Return a re-indexed copy: ``out[i] = mapping[buffer[i]]``."""

    lut = np.asarray(validate_mapping(mapping), dtype=np.uint8)
    return PixelBuffer(lut[buffer.pixels])


def build_previews(buffer: PixelBuffer) -> List[PermutationPreview]:
    """One preview per permutation; ``buffer`` itself is left untouched."""

    previews = [
        PermutationPreview(mapping=mapping, buffer=apply_permutation(buffer, mapping))
        for mapping in enumerate_permutations()
    ]
    logger.debug("build_previews count=%s", len(previews))
    return previews
