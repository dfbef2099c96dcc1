#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MojiPack Grapheme Segmenter
===========================

Splits a string into extended grapheme clusters, restricted to the
sequence shapes found in emoji catalogs:

  (a) regional indicator pairs (flags)
  (b) ZWJ chains between pictographic scalars
  (c) emoji modifiers (skin tones)
  (d) variation selectors
  (e) tag sequences (subdivision flags)
  (f) combining enclosing marks (keycaps)

Every other scalar starts a cluster of its own. The scan is a single
left-to-right pass that only looks at the previous scalar and a small
amount of per-cluster state, so no backtracking is needed.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator, List, Tuple

# ---------------------------------------------------------------------------
# Scalar classes
# ---------------------------------------------------------------------------

ZWJ = 0x200D
REGIONAL_INDICATORS = (0x1F1E6, 0x1F1FF)
EMOJI_MODIFIERS = (0x1F3FB, 0x1F3FF)
VARIATION_SELECTORS = ((0xFE00, 0xFE0F), (0xE0100, 0xE01EF))
TAGS = (0xE0020, 0xE007E)
CANCEL_TAG = 0xE007F

# Approximation of the Extended_Pictographic property (emoji-data.txt).
PICTOGRAPHIC_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x00A9, 0x00A9), (0x00AE, 0x00AE), (0x203C, 0x203C), (0x2049, 0x2049),
    (0x2122, 0x2122), (0x2139, 0x2139), (0x2194, 0x2199), (0x21A9, 0x21AA),
    (0x231A, 0x231B), (0x2328, 0x2328), (0x2388, 0x2388), (0x23CF, 0x23CF),
    (0x23E9, 0x23F3), (0x23F8, 0x23FA), (0x24C2, 0x24C2), (0x25AA, 0x25AB),
    (0x25B6, 0x25B6), (0x25C0, 0x25C0), (0x25FB, 0x25FE), (0x2600, 0x2605),
    (0x2607, 0x2612), (0x2614, 0x2685), (0x2690, 0x2705), (0x2708, 0x2712),
    (0x2714, 0x2714), (0x2716, 0x2716), (0x271D, 0x271D), (0x2721, 0x2721),
    (0x2728, 0x2728), (0x2733, 0x2734), (0x2744, 0x2744), (0x2747, 0x2747),
    (0x274C, 0x274C), (0x274E, 0x274E), (0x2753, 0x2755), (0x2757, 0x2757),
    (0x2763, 0x2767), (0x2795, 0x2797), (0x27A1, 0x27A1), (0x27B0, 0x27B0),
    (0x27BF, 0x27BF), (0x2934, 0x2935), (0x2B05, 0x2B07), (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50), (0x2B55, 0x2B55), (0x3030, 0x3030), (0x303D, 0x303D),
    (0x3297, 0x3297), (0x3299, 0x3299),
    (0x1F000, 0x1F0FF), (0x1F10D, 0x1F10F), (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171), (0x1F17E, 0x1F17F), (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A), (0x1F1AD, 0x1F1E5), (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A), (0x1F22F, 0x1F22F), (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F), (0x1F249, 0x1F3FA), (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F), (0x1F680, 0x1F6FF), (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF), (0x1F80C, 0x1F80F), (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F), (0x1F888, 0x1F88F), (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A), (0x1F93C, 0x1F945), (0x1F947, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)

# Scalar kinds used by the scanner.
OTHER = 0
PICTOGRAPHIC = 1
REGIONAL = 2
JOINER = 3
EXTEND = 4


def _in_range(cp: int, bounds: Tuple[int, int]) -> bool:
    return bounds[0] <= cp <= bounds[1]


def is_pictographic(cp: int) -> bool:
    # Ranges are sorted; everything pictographic is >= U+00A9.
    if cp < 0x00A9:
        return False
    for lo, hi in PICTOGRAPHIC_RANGES:
        if cp < lo:
            return False
        if cp <= hi:
            return True
    return False


def is_extender(cp: int) -> bool:
    """
    True for scalars that always attach to the preceding cluster:
    emoji modifiers, variation selectors, tags, the cancel tag and
    combining enclosing marks.
    """
    if _in_range(cp, EMOJI_MODIFIERS):
        return True
    if any(_in_range(cp, vs) for vs in VARIATION_SELECTORS):
        return True
    if _in_range(cp, TAGS) or cp == CANCEL_TAG:
        return True
    return unicodedata.category(chr(cp)) == "Me"


def classify(ch: str) -> int:
    cp = ord(ch)
    if cp == ZWJ:
        return JOINER
    if _in_range(cp, REGIONAL_INDICATORS):
        return REGIONAL
    if is_extender(cp):
        return EXTEND
    if is_pictographic(cp):
        return PICTOGRAPHIC
    return OTHER


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------

def iter_graphemes(text: str) -> Iterator[str]:
    """
    Yield the grapheme clusters of ``text`` from left to right.

    Per-cluster state:
        regional_run : regional indicators in the cluster so far
        chain        : the cluster started with a pictographic scalar and
                       has only been extended since, so a ZWJ may join
                       another pictographic scalar onto it
    """
    start = 0
    prev = OTHER
    regional_run = 0
    chain = False

    for i, ch in enumerate(text):
        kind = classify(ch)

        if i == 0:
            joins = False
        elif kind in (EXTEND, JOINER):
            joins = True
        elif kind == REGIONAL:
            joins = prev == REGIONAL and regional_run % 2 == 1
        elif kind == PICTOGRAPHIC:
            joins = prev == JOINER and chain
        else:
            joins = False

        if not joins:
            if i > 0:
                yield text[start:i]
            start = i
            regional_run = 1 if kind == REGIONAL else 0
            chain = kind == PICTOGRAPHIC
        elif kind == REGIONAL:
            regional_run += 1

        prev = kind

    if text:
        yield text[start:]


def segment(text: str) -> Tuple[str, ...]:
    """
    Split ``text`` into grapheme clusters.

    The result is a tuple, so it can be iterated any number of times and
    ``"".join(segment(s)) == s`` always holds.
    """
    return tuple(iter_graphemes(text))


def count_graphemes(text: str) -> int:
    n = 0
    for _ in iter_graphemes(text):
        n += 1
    return n


def is_single_grapheme(text: str) -> bool:
    clusters: List[str] = []
    for cluster in iter_graphemes(text):
        clusters.append(cluster)
        if len(clusters) > 1:
            return False
    return len(clusters) == 1
