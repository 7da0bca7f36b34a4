import logging
from typing import Iterable

from textfill.config import settings
from textfill.services.normalizer import InvalidTermError
from textfill.services.ternary_tree import TernaryTreeTextFiller

logger = logging.getLogger("textfill.autocomplete")


def build_filler(seed_path: str | None = None) -> TernaryTreeTextFiller:
    """Create an empty filler, optionally seeded from a term file."""
    filler = TernaryTreeTextFiller()
    if seed_path:
        added = load_terms_file(filler, seed_path)
        logger.info("Built text filler with %d terms from %s", added, seed_path)
    return filler


def load_terms(filler: TernaryTreeTextFiller, lines: Iterable[str]) -> int:
    """Insert terms from an iterable of lines.

    Line format:
      - `term`               plain insert (or `settings.default_priority` if set)
      - `term<TAB>priority`  prioritized insert (the last field must be an int;
                             otherwise the tab is part of the term)
    Blank lines and `#` comments are skipped. Returns count of new terms.
    """
    added = 0
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        term = line
        priority: int | None = settings.default_priority or None
        head, sep, tail = line.rpartition("\t")
        if sep and tail.strip():
            try:
                priority = int(tail)
                term = head
            except ValueError:
                logger.debug("Line %d: %r is not a priority, keeping tab in term", lineno, tail)

        try:
            if filler.add(term, priority):
                added += 1
        except InvalidTermError as e:
            logger.warning("Skipping line %d: %s", lineno, e)
    return added


def load_terms_file(filler: TernaryTreeTextFiller, path: str) -> int:
    with open(path, "r", encoding="utf-8") as f:
        return load_terms(filler, f)


def autocomplete_search(
    filler: TernaryTreeTextFiller,
    prefix: str,
    premium: bool = False,
) -> str | None:
    """Complete a prefix, by first match or by priority.

    Returns None when no stored term starts with the prefix.
    """
    if premium:
        completion = filler.text_fill_premium(prefix)
    else:
        completion = filler.text_fill(prefix)
    logger.debug("prefix=%r premium=%s completion=%r", prefix, premium, completion)
    return completion
