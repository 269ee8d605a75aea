"""Rules that turn ASE tokens into reader nodes."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from functools import partial

from marica.ase_node import NodeType, ReaderNode
from marica.ase_tokenizer import Tokenizer, TokenType

__all__ = [
    "Rule",
    "Analyzer",
    "DictRule",
    "FloatRule",
    "IntRule",
    "LambdaRule",
    "SetRule",
    "StringRule",
    "ValueRule",
    "default_analyzer",
]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


class Rule(ABC):
    """Reads one construct from the tokenizer and returns its node, or None."""

    @abstractmethod
    def analyze(self, tokenizer: Tokenizer) -> ReaderNode | None:
        raise NotImplementedError


class Analyzer:
    """Dispatches a key token to the rule registered for it."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._rules

    def add_rule(self, key: str, rule: Rule) -> None:
        """Register ``rule`` for ``key``; an existing registration is kept."""
        self._rules.setdefault(key, rule)

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode | None:
        """Consume the current key and its data; unknown keys are skipped with their blocks."""
        token = tokenizer.current()
        tokenizer.next_token()
        if token.type is not TokenType.KEY:
            return None
        rule = self._rules.get(token.data)
        if rule is not None:
            return rule.analyze(tokenizer)

        depth = 0
        while not tokenizer.is_last():
            kind = tokenizer.current().type
            if kind is TokenType.KEY and depth <= 0:
                break
            if kind is TokenType.BLOCK_START:
                depth += 1
            elif kind is TokenType.BLOCK_END:
                depth -= 1
            if depth < 0:
                break
            tokenizer.next_token()
        return None


class DictRule(Rule):
    """Reads keyed entries up to the closing brace, which it consumes."""

    def __init__(self, analyzer: Analyzer) -> None:
        self.analyzer = analyzer

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode:
        result = ReaderNode(NodeType.DICT)
        token = tokenizer.current()
        while token.type is not TokenType.BLOCK_END and not tokenizer.is_last():
            if token.type is TokenType.KEY:
                child = self.analyzer.analyze(tokenizer)
                if child is not None:
                    result.add_child(token.data, child)
            else:
                tokenizer.next_token()
            token = tokenizer.current()
        tokenizer.next_token()
        return result


class SetRule(Rule):
    """Reads keyed entries until a key repeats or a closing brace is reached."""

    def __init__(self, analyzer: Analyzer) -> None:
        self.analyzer = analyzer

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode:
        result = ReaderNode(NodeType.DICT)
        token = tokenizer.current()
        while token.type is not TokenType.BLOCK_END and not tokenizer.is_last():
            if token.type is TokenType.KEY:
                result.add_child(token.data, self.analyzer.analyze(tokenizer))
            else:
                tokenizer.next_token()
            token = tokenizer.current()
            if token.type is TokenType.KEY and result.has_child(token.data):
                return result
        return result


class ValueRule(Rule):
    """Wraps the keyed entry at the cursor in a one-child dictionary."""

    def __init__(self, analyzer: Analyzer) -> None:
        self.analyzer = analyzer

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode:
        result = ReaderNode(NodeType.DICT)
        key = tokenizer.current().data
        result.add_child(key, self.analyzer.analyze(tokenizer))
        return result


class IntRule(Rule):
    """Reads one integer value."""

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode:
        result = ReaderNode(NodeType.VALUE, _parse_int(tokenizer.current().data))
        tokenizer.next_token()
        return result


class FloatRule(Rule):
    """Reads one floating point value."""

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode:
        result = ReaderNode(NodeType.VALUE, _parse_float(tokenizer.current().data))
        tokenizer.next_token()
        return result


class StringRule(Rule):
    """Reads one token as text."""

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode:
        result = ReaderNode(NodeType.VALUE, tokenizer.current().data)
        tokenizer.next_token()
        return result


class LambdaRule(Rule):
    """Delegates to a callable; with no callable it reads nothing."""

    def __init__(self, func: Callable[[Tokenizer], ReaderNode | None] | None) -> None:
        self.func = func

    def analyze(self, tokenizer: Tokenizer) -> ReaderNode | None:
        if self.func is None:
            return None
        return self.func(tokenizer)


def _read_values(tokenizer: Tokenizer) -> list[str]:
    """Collect consecutive plain value tokens starting at the cursor."""
    values = []
    while True:
        token = tokenizer.current()
        if token.type is not TokenType.VALUE:
            break
        values.append(token.data)
        if tokenizer.is_last():
            break
        tokenizer.next_token()
    return values


def _value_array(convert: Callable[[str], object], tokenizer: Tokenizer) -> ReaderNode:
    result = ReaderNode(NodeType.ARRAY)
    for text in _read_values(tokenizer):
        result.add_element(ReaderNode(NodeType.VALUE, convert(text)))
    return result


def _labelled_pairs(tokenizer: Tokenizer) -> ReaderNode:
    """Read ``label value label value ...`` into an array of [label, int] arrays."""
    result = ReaderNode(NodeType.ARRAY)
    values = iter(_read_values(tokenizer))
    for label, number in zip(values, values):
        pair = ReaderNode(NodeType.ARRAY)
        pair.add_element(ReaderNode(NodeType.VALUE, label))
        pair.add_element(ReaderNode(NodeType.VALUE, _parse_int(number)))
        result.add_element(pair)
    return result


def _indexed_list(
    analyzer: Analyzer,
    entry_key: str,
    read_entry: Callable[[Tokenizer], ReaderNode],
    tokenizer: Tokenizer,
) -> ReaderNode:
    """Read a block of ``*ENTRY index data`` lines into an array ordered by index.

    Other keys inside the block are attached to the entry read before them.
    """
    result = ReaderNode(NodeType.ARRAY)
    last_entry: ReaderNode | None = None
    token = tokenizer.current()
    while token.type is not TokenType.BLOCK_END and not tokenizer.is_last():
        if token.type is TokenType.KEY and token.data == entry_key:
            tokenizer.next_token()
            index_token = tokenizer.current()
            if index_token.type is TokenType.VALUE:
                index = _parse_int(index_token.data)
                tokenizer.next_token()
            else:
                index = len(result)
            entry = ReaderNode(NodeType.DICT)
            entry.add_child(entry_key, read_entry(tokenizer))
            result.set_element(index, entry)
            last_entry = entry
        elif token.type is TokenType.KEY:
            child = analyzer.analyze(tokenizer)
            if child is not None and last_entry is not None:
                last_entry.add_child(token.data, child)
        else:
            tokenizer.next_token()
        token = tokenizer.current()
    tokenizer.next_token()
    return result


_BLOCK_KEYS = (
    "SCENE", "MATERIAL_LIST", "MATERIAL", "SUBMATERIAL", "MAP_DIFFUSE",
    "GEOMOBJECT", "NODE_TM", "MESH",
)
_INT_KEYS = (
    "3DSMAX_ASCIIEXPORT", "SCENE_FIRSTFRAME", "SCENE_LASTFRAME", "SCENE_FRAMESPEED",
    "SCENE_TICKSPERFRAME", "MATERIAL_COUNT", "NUMSUBMTLS", "TIMEVALUE",
    "MESH_NUMVERTEX", "MESH_NUMFACES", "MESH_NUMTVERTEX", "MESH_NUMTVFACES",
    "MESH_MTLID", "MATERIAL_REF", "PROP_MOTIONBLUR", "PROP_CASTSHADOW",
    "PROP_RECVSHADOW", "MAP_SUBNO",
)
_FLOAT_KEYS = (
    "MATERIAL_SHINE", "MATERIAL_SHINESTRENGTH", "MATERIAL_TRANSPARENCY",
    "MATERIAL_WIRESIZE", "MATERIAL_SELFILLUM", "MAP_AMOUNT", "UVW_U_OFFSET",
    "UVW_V_OFFSET", "UVW_U_TILING", "UVW_V_TILING", "UVW_ANGLE", "UVW_BLUR",
    "UVW_BLUR_OFFSET", "UVW_NOUSE_AMT", "UVW_NOISE_SIZE", "UVW_NOISE_LEVEL",
    "UVW_NOISE_PHASE", "TM_ROTANGLE", "TM_SCALEAXISANG",
)
_STRING_KEYS = (
    "COMMENT", "SCENE_FILENAME", "MATERIAL_NAME", "MATERIAL_CLASS", "MAP_NAME",
    "MAP_CLASS", "BITMAP", "NODE_NAME", "NODE_PARENT",
)
_VECTOR_KEYS = (
    "SCENE_BACKGROUND_STATIC", "SCENE_AMBIENT_STATIC", "MATERIAL_AMBIENT",
    "MATERIAL_DIFFUSE", "MATERIAL_SPECULAR", "TM_ROW0", "TM_ROW1", "TM_ROW2",
    "TM_ROW3", "TM_POS", "TM_ROTAXIS", "TM_SCALE", "TM_SCALEAXIS",
)


def _register(analyzer: Analyzer, keys: Iterable[str], rule: Rule) -> None:
    for key in keys:
        analyzer.add_rule(key, rule)


def default_analyzer() -> Analyzer:
    """Return a new analyzer with rules for the common ASE keys."""
    analyzer = Analyzer()
    floats = partial(_value_array, _parse_float)
    ints = partial(_value_array, _parse_int)

    _register(analyzer, _BLOCK_KEYS, DictRule(analyzer))
    _register(analyzer, _INT_KEYS, IntRule())
    _register(analyzer, _FLOAT_KEYS, FloatRule())
    _register(analyzer, _STRING_KEYS, StringRule())
    _register(analyzer, _VECTOR_KEYS, LambdaRule(floats))

    lists = {
        "MESH_VERTEX_LIST": ("MESH_VERTEX", floats),
        "MESH_TVERTLIST": ("MESH_TVERT", floats),
        "MESH_FACE_LIST": ("MESH_FACE", _labelled_pairs),
        "MESH_TFACELIST": ("MESH_TFACE", ints),
    }
    for key, (entry_key, reader) in lists.items():
        analyzer.add_rule(key, LambdaRule(partial(_indexed_list, analyzer, entry_key, reader)))
    return analyzer