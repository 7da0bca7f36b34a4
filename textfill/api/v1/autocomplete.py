from fastapi import APIRouter, Depends, HTTPException, Query

from textfill.api.deps import check_term_length, get_filler
from textfill.services.autocomplete import autocomplete_search
from textfill.services.ternary_tree import TernaryTreeTextFiller

router = APIRouter()


@router.get("/autocomplete")
async def autocomplete(
    prefix: str = Query(..., min_length=1),
    premium: bool = Query(False, description="Rank completions by stored priority"),
    filler: TernaryTreeTextFiller = Depends(get_filler),
):
    """Complete a prefix against the stored terms.

    Default mode returns the first term stored under the prefix; premium
    mode walks toward the highest-priority term. `completion` is null when
    no stored term starts with the prefix.
    """
    check_term_length(prefix.strip(), field="prefix")
    try:
        completion = autocomplete_search(filler, prefix, premium=premium)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "prefix": prefix,
        "premium": premium,
        "completion": completion,
    }
