import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.schemas.enrich_request import EnrichRequest
from app.schemas.enrich_response import EnrichResponse, ErrorResponse
from app.services.enrichment import handle_event

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title=settings.service_name)

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.post(
    "/enrich",
    response_model=EnrichResponse,
    responses={500: {"model": ErrorResponse}},
)
async def enrich(request: EnrichRequest):
    status_code, payload = await handle_event(request.model_dump())
    return JSONResponse(status_code=status_code, content=payload)
