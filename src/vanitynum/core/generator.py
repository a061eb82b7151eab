"""Top-level vanity number generation."""

from typing import List, Optional

from ..config import DEFAULT_RESULT_COUNT, PHONE_DIGITS
from ..utils.logging import get_logger
from ..utils.validation import validate_count
from .candidates import generate_all_candidates
from .fallback import expand_results
from .phone import format_digits, normalize_number, strip_country_code
from .render import render_all
from .scoring import pick_top_n
from .word_index import WordIndex, get_default_index
from .word_run import is_word_only_candidate

logger = get_logger(__name__)


def get_vanity_numbers(
    phone: str, n: int = DEFAULT_RESULT_COUNT, index: Optional[WordIndex] = None
) -> List[str]:
    """Best ``n`` vanity renderings of ``phone``, most memorable first.

    Args:
        phone: Phone number in any formatting, e.g. ``"+1 (415) 555-2671"``
        n: Number of results wanted
        index: Word index to draw words from (default: the process-wide one)

    Returns:
        Strings like ``"415-JOKE-671"``. When no word fits, the single
        formatted number ``"(415) 555-2671"``; when the input is not a
        10-digit number, its digits unchanged.
    """
    validate_count(n)
    if index is None:
        index = get_default_index()

    logger.debug(f"Getting vanity numbers for {phone}")
    digits = normalize_number(phone)
    logger.debug(f"Normalized digits: {digits}")

    stripped = strip_country_code(digits)
    if stripped != digits:
        logger.debug("11-digit number, using last 10 digits")
        digits = stripped

    if len(digits) != PHONE_DIGITS:
        logger.info(f"Not a {PHONE_DIGITS}-digit number, returning it unchanged")
        return [format_digits(digits)]

    candidates = generate_all_candidates(digits, index)
    results = [
        text
        for text in pick_top_n(candidates, index, n)
        if is_word_only_candidate(text, index)
    ]
    logger.debug(f"{len(candidates)} candidates, {len(results)} strict in top {n}")

    if len(results) < n:
        results = expand_results(digits, index, results, n)

    if not results or all(text == digits for text in results):
        logger.info("No good candidates found, returning formatted number")
        return [format_digits(digits)]

    return render_all(results, index)
