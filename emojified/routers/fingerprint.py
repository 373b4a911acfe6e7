from fastapi import APIRouter, Depends, Header, HTTPException, Response, Query
from ..schemas import (
    BatchRequest,
    BatchResponse,
    FingerprintRequest,
    FingerprintResponse,
    FormatResponse,
    PaletteResponse,
    ValidateResponse,
)
from ..services.emojified_service import EmojifiedService
from ..services.address import format_address, is_valid_address
from ..services.emoji_hash import SYMBOLS_PER_FINGERPRINT
from ..data.palette import PALETTE
from ..core.config import settings
from ..core.security import require_api_key, rate_limit

router = APIRouter()

def service_dep() -> EmojifiedService:
    # Stateless; constructing per request only snapshots settings defaults.
    return EmojifiedService()

def _conditional(payload: dict, etag: str, response: Response, if_none_match: str | None):
    if if_none_match and if_none_match == etag:
        return Response(status_code=304, headers={"ETag": etag})
    payload["etag"] = etag
    response.headers["ETag"] = etag
    return payload

@router.get("/fingerprint", response_model=FingerprintResponse)
def get_fingerprint(
    response: Response,
    address: str = Query(...),
    show_full: bool | None = Query(default=None),
    spacing: str | None = Query(default=None, max_length=16),
    if_none_match: str | None = Header(default=None),
    _auth = Depends(require_api_key),     # API key guard
    _lim  = Depends(rate_limit),          # Rate limiting
    svc: EmojifiedService = Depends(service_dep),
):
    payload, etag = svc.render_with_etag(address, show_full, spacing)
    return _conditional(payload, etag, response, if_none_match)

@router.post("/fingerprint", response_model=FingerprintResponse)
def post_fingerprint(
    body: FingerprintRequest,
    response: Response,
    if_none_match: str | None = Header(default=None),
    _auth = Depends(require_api_key),
    _lim  = Depends(rate_limit),
    svc: EmojifiedService = Depends(service_dep),
):
    payload, etag = svc.render_with_etag(body.address, body.show_full, body.spacing)
    return _conditional(payload, etag, response, if_none_match)

@router.post("/fingerprint/batch", response_model=BatchResponse)
def post_batch(
    body: BatchRequest,
    _auth = Depends(require_api_key),
    _lim  = Depends(rate_limit),
    svc: EmojifiedService = Depends(service_dep),
):
    if not body.addresses:
        raise HTTPException(status_code=400, detail="addresses must not be empty")
    if len(body.addresses) > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"at most {settings.MAX_BATCH_SIZE} addresses per batch",
        )
    results = svc.render_many(body.addresses, body.show_full, body.spacing)
    return {
        "count": len(results),
        "invalid": sum(1 for r in results if not r["valid"]),
        "results": results,
    }

@router.get("/validate", response_model=ValidateResponse)
def get_validate(address: str = Query(...)):
    return {"address": address, "valid": is_valid_address(address)}

@router.get("/format", response_model=FormatResponse)
def get_format(address: str = Query(...), show_full: bool = Query(default=False)):
    return {"address": address, "formatted": format_address(address, show_full)}

@router.get("/palette", response_model=PaletteResponse)
def get_palette():
    return {
        "size": len(PALETTE),
        "symbols_per_fingerprint": SYMBOLS_PER_FINGERPRINT,
        "symbols": list(PALETTE),
    }
