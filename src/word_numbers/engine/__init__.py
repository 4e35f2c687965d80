"""Evaluation engine for number-word phrases."""

from word_numbers.engine.evaluator import (
    EvaluationResult,
    add_implicit_unit,
    evaluate,
    extract_sign,
    sum_groups,
)
from word_numbers.engine.expander import (
    CollectingSink,
    ExpansionReport,
    LiteralSink,
    NumberWordsError,
    expand,
    expand_source,
    num,
)
from word_numbers.engine.width import select_width

__all__ = [
    "CollectingSink",
    "EvaluationResult",
    "ExpansionReport",
    "LiteralSink",
    "NumberWordsError",
    "add_implicit_unit",
    "evaluate",
    "expand",
    "expand_source",
    "extract_sign",
    "num",
    "select_width",
    "sum_groups",
]
