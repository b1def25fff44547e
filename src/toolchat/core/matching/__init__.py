"""Deterministic utterance-to-tool resolution."""

from toolchat.core.matching.extractor import extract_argument
from toolchat.core.matching.matcher import OVERLAP_THRESHOLD, resolve
from toolchat.core.matching.models import MatchResult, MatchRule

__all__ = [
    "OVERLAP_THRESHOLD",
    "MatchResult",
    "MatchRule",
    "extract_argument",
    "resolve",
]
