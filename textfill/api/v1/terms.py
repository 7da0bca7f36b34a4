from fastapi import APIRouter, Depends, HTTPException, Query

from textfill.api.deps import check_term_length, get_filler
from textfill.config import settings
from textfill.services.normalizer import normalize
from textfill.services.ternary_tree import TernaryTreeTextFiller

router = APIRouter()


def _parse_priority(value) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("priority must be an integer")
    return value


@router.post("/terms", status_code=201)
async def add_term(
    request: dict,
    filler: TernaryTreeTextFiller = Depends(get_filler),
):
    """Store a term, optionally with a priority.

    Body:
      - term: str (single word or multi-word phrase)
      - priority: int, optional; used by premium autocompletion

    Re-adding a stored term is a no-op and reports `added: false`.
    """
    term = request.get("term")
    if isinstance(term, str):
        check_term_length(term.strip())

    try:
        priority = _parse_priority(request.get("priority"))
        added = filler.add(term, priority)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "term": normalize(term),
        "added": added,
        "size": filler.size(),
    }


@router.post("/terms/bulk")
async def add_terms_bulk(
    request: dict,
    filler: TernaryTreeTextFiller = Depends(get_filler),
):
    """Store many terms at once.

    Body:
      - terms: list of strings or {term, priority} objects

    Invalid entries are skipped and counted rather than failing the batch.
    """
    entries = request.get("terms")
    if not isinstance(entries, list):
        raise HTTPException(status_code=400, detail="terms must be a list")

    added = skipped = 0
    for entry in entries:
        if isinstance(entry, dict):
            term, raw_priority = entry.get("term"), entry.get("priority")
        else:
            term, raw_priority = entry, None

        if isinstance(term, str) and len(term.strip()) > settings.max_term_length:
            skipped += 1
            continue
        try:
            if filler.add(term, _parse_priority(raw_priority)):
                added += 1
        except ValueError:
            skipped += 1

    return {"added": added, "skipped": skipped, "size": filler.size()}


@router.get("/terms")
async def list_terms(filler: TernaryTreeTextFiller = Depends(get_filler)):
    return {
        "size": filler.size(),
        "empty": filler.empty(),
        "terms": filler.get_sorted_list(),
    }


@router.get("/terms/contains")
async def contains_term(
    q: str = Query(..., min_length=1, description="Term to look up"),
    filler: TernaryTreeTextFiller = Depends(get_filler),
):
    check_term_length(q.strip(), field="q")
    try:
        found = filler.contains(q)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"query": q, "contains": found}
