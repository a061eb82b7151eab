"""Core vanity number engine."""

from .keypad import KEYPAD, digits_for_word
from .phone import format_digits, normalize_number, strip_country_code
from .word_index import (
    WordIndex,
    build_word_index,
    get_default_index,
    load_word_index,
    load_word_list,
)
from .candidates import generate_all_candidates
from .scoring import pick_top_n, score_candidate, sort_by_score
from .word_run import WordRun, find_word_run, is_word_only_candidate
from .render import render_dashed
from .fallback import FALLBACK_STAGES, expand_results
from .generator import get_vanity_numbers
from .contact import handle_contact_event, resolve_caller_number

__all__ = [
    "KEYPAD",
    "digits_for_word",
    "format_digits",
    "normalize_number",
    "strip_country_code",
    "WordIndex",
    "build_word_index",
    "get_default_index",
    "load_word_index",
    "load_word_list",
    "generate_all_candidates",
    "pick_top_n",
    "score_candidate",
    "sort_by_score",
    "WordRun",
    "find_word_run",
    "is_word_only_candidate",
    "render_dashed",
    "FALLBACK_STAGES",
    "expand_results",
    "get_vanity_numbers",
    "handle_contact_event",
    "resolve_caller_number",
]
