"""Command-line interface using Click."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import DEFAULT_RESULT_COUNT, MIN_WORD_LENGTH
from .core.candidates import generate_all_candidates
from .core.contact import handle_contact_event
from .core.generator import get_vanity_numbers
from .core.keypad import digits_for_word
from .core.phone import normalize_number
from .core.scoring import score_candidate, sort_by_score
from .core.word_index import WordIndex, get_default_index, load_word_index
from .exceptions import VanityNumError
from .utils.logging import setup_logging
from .utils.validation import (
    validate_count, validate_digits, validate_phone, validate_word,
    validate_wordlist_path
)


def resolve_index(wordlist: Optional[str]) -> WordIndex:
    """Index for ``--wordlist``, or the process-wide default."""
    if wordlist:
        return load_word_index(validate_wordlist_path(wordlist))
    return get_default_index()


def read_event(event_file: str) -> dict:
    """Load a contact event from a JSON file, ``-`` meaning stdin."""
    if event_file == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(event_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise click.BadParameter(f"Cannot read event file: {e}")
    try:
        event = json.loads(text)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Event is not valid JSON: {e}")
    if not isinstance(event, dict):
        raise click.BadParameter("Event must be a JSON object")
    return event


def _fail(ctx, error: Exception) -> None:
    logger = ctx.obj['logger']
    if isinstance(error, VanityNumError):
        logger.error(f"❌ {error}")
    else:
        logger.error(f"❌ Unexpected error: {error}")
        if ctx.obj.get('verbose'):
            import traceback
            traceback.print_exc()
    sys.exit(1)


wordlist_option = click.option(
    '--wordlist', type=click.Path(),
    help='Word list file, one word per line (default: bundled list)'
)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """vanitynum - Find memorable vanity words in phone numbers."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "WARNING",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger
    ctx.obj['verbose'] = verbose


@cli.command()
@click.argument('phone')
@click.option('-n', '--count', type=int, default=DEFAULT_RESULT_COUNT,
              help='Number of vanity numbers to return')
@wordlist_option
@click.pass_context
def generate(ctx, phone, count, wordlist):
    """Generate vanity numbers for PHONE."""
    try:
        phone = validate_phone(phone)
        count = validate_count(count)
        index = resolve_index(wordlist)
        for result in get_vanity_numbers(phone, n=count, index=index):
            click.echo(result)
    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument('words', nargs=-1, required=True)
@click.pass_context
def digits(ctx, words):
    """Show the keypad digits that spell each of WORDS."""
    try:
        for word in words:
            word = validate_word(word)
            click.echo(f"{word} -> {digits_for_word(word)}")
    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument('number')
@click.option('--limit', type=int, default=20, help='Show at most N candidates')
@wordlist_option
@click.pass_context
def candidates(ctx, number, limit, wordlist):
    """List every word tiling of NUMBER's digits with its score."""
    try:
        limit = validate_count(limit)
        index = resolve_index(wordlist)
        number = validate_digits(normalize_number(number))
        found = generate_all_candidates(number, index)
        ranked = sort_by_score(found, index)
        for text in ranked[:limit]:
            click.echo(f"{score_candidate(text, index):5d}  {text}")
        if len(ranked) > limit:
            click.echo(f"... {len(ranked) - limit} more")
    except Exception as e:
        _fail(ctx, e)


@cli.command()
@click.argument('event_file')
@click.option('-n', '--count', type=int, default=DEFAULT_RESULT_COUNT,
              help='Number of vanity numbers to return')
@wordlist_option
@click.pass_context
def contact(ctx, event_file, count, wordlist):
    """Answer a contact event read from EVENT_FILE ('-' for stdin)."""
    event = read_event(event_file)
    try:
        count = validate_count(count)
        index = resolve_index(wordlist)
        click.echo(json.dumps(handle_contact_event(event, index=index, n=count)))
    except Exception as e:
        _fail(ctx, e)


@cli.group()
def wordlist():
    """Word list commands."""
    pass


@wordlist.command()
@wordlist_option
@click.pass_context
def stats(ctx, wordlist):
    """Show word list statistics."""
    try:
        index = resolve_index(wordlist)
        overlay_words = sum(1 for w in index.words if len(w) >= MIN_WORD_LENGTH)
        click.echo(f"Words: {len(index)}")
        click.echo(f"Overlay words (3+ letters): {overlay_words}")
        click.echo(f"Digit keys: {len(index.digits_to_words)}")
    except Exception as e:
        _fail(ctx, e)


if __name__ == '__main__':
    cli()
