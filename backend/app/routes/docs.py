from fastapi import APIRouter, Depends, HTTPException, Request
from backend.app.models.schemas import (
    CrateLookupRequest,
    LookupResponse,
    SvelteLookupRequest,
    TopicLookupRequest,
)
from backend.app.services.lookup import DocsLookup, LookupResult

router = APIRouter(prefix="/docs")

def get_lookup(request: Request) -> DocsLookup:
    return request.app.state.lookup

def _respond(result: LookupResult) -> LookupResponse:
    if result.is_error:
        status = 502 if result.error_kind == "fetch_error" else 500
        raise HTTPException(status, result.text)
    return LookupResponse(text=result.text)

@router.post("/tauri", response_model=LookupResponse)
async def tauri_docs(payload: TopicLookupRequest | None = None, lookup: DocsLookup = Depends(get_lookup)):
    return _respond(await lookup.lookup_tauri(payload or TopicLookupRequest()))

@router.post("/svelte", response_model=LookupResponse)
async def svelte_docs(payload: SvelteLookupRequest | None = None, lookup: DocsLookup = Depends(get_lookup)):
    return _respond(await lookup.lookup_svelte(payload or SvelteLookupRequest()))

@router.post("/crate", response_model=LookupResponse)
async def crate_docs(payload: CrateLookupRequest | None = None, lookup: DocsLookup = Depends(get_lookup)):
    return _respond(await lookup.lookup_crate(payload or CrateLookupRequest()))
