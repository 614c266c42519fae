from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel, ValidationError

from explainer.config import Settings, get_settings
from explainer.engine import EmptyInputError, analyze_source
from explainer.model import AnalyzeResult

logger = logging.getLogger(__name__)

router = APIRouter()


class AnalyzeRequest(BaseModel):
	code: str
	locale: Optional[str] = None


def _settings_for(req: AnalyzeRequest) -> Settings:
	if req.locale is None:
		return get_settings()
	try:
		return get_settings(locale=req.locale)
	except ValidationError as e:
		raise HTTPException(status_code=400, detail=f"Invalid locale: {req.locale}") from e


@router.get("/health")
def health() -> dict:
	return {"status": "ok"}


@router.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	settings = _settings_for(req)
	try:
		return analyze_source(req.code, settings)
	except EmptyInputError as e:
		logger.info("Rejected empty snippet")
		raise HTTPException(status_code=400, detail=e.message) from e


app = FastAPI(title="Code Explainer API")
app.include_router(router)


def create_app() -> FastAPI:
	return app
