"""Reading ASE documents into reader node trees."""

from __future__ import annotations

import os

from marica.ase_node import NodeType, ReaderNode
from marica.ase_rules import Analyzer, DictRule, default_analyzer
from marica.ase_tokenizer import Tokenizer

__all__ = ["parse_ase", "load_ase"]


def parse_ase(text: str, analyzer: Analyzer | None = None) -> ReaderNode:
    """Parse ASE text into a dictionary node, using the default rules unless given others."""
    if analyzer is None:
        analyzer = default_analyzer()
    tokenizer = Tokenizer(text)
    if not len(tokenizer):
        return ReaderNode(NodeType.DICT)
    return DictRule(analyzer).analyze(tokenizer)


def load_ase(path: str | os.PathLike[str], analyzer: Analyzer | None = None) -> ReaderNode:
    """Read and parse the ASE file at ``path``."""
    with open(path, encoding="latin-1") as stream:
        return parse_ase(stream.read(), analyzer)