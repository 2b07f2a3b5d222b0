import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from common.schemas import GlossRequest, GlossResponse, LanguagesResponse
from core.versions import version_info
from domain.gloss.reference_data import ReferenceData, UnsupportedLanguageError
from pipelines.gloss_pipeline import run_gloss_pipeline

router = APIRouter()


def get_reference_data(request: Request) -> ReferenceData:
    return request.app.state.reference_data


@router.post("/gloss", response_model=GlossResponse)
def gloss(
    request: GlossRequest,
    reference_data: ReferenceData = Depends(get_reference_data),
):
    try:
        return run_gloss_pipeline(request, reference_data)
    except UnsupportedLanguageError as e:
        logging.warning(f"Rejected gloss request: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/languages", response_model=LanguagesResponse)
def get_languages(reference_data: ReferenceData = Depends(get_reference_data)):
    return LanguagesResponse(**reference_data.describe())


@router.get("/")
def root():
    return version_info()
