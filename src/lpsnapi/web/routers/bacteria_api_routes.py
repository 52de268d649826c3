"""Bacteria lookup endpoint backed by the LPSN scraper."""

import logging
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query

from lpsnapi.species.errors import LPSNError, UpstreamTimeoutError
from lpsnapi.species.lpsn_client import LPSNClient
from lpsnapi.species.models import SpeciesRecord
from lpsnapi.web.core.container import Container
from lpsnapi.web.models.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/bateriae",
    response_model=list[SpeciesRecord],
    response_model_exclude_none=True,
    responses={
        502: {"model": ErrorResponse, "description": "LPSN request or page parsing failed"},
        504: {"model": ErrorResponse, "description": "LPSN did not answer in time"},
    },
)
@inject
async def list_bacteria(
    lpsn_client: Annotated[LPSNClient, Depends(Provide[Container.lpsn_client])],
    word: Annotated[str, Query(description="Search term sent to LPSN")] = "",
) -> list[SpeciesRecord]:
    """List every LPSN species matching ``word`` with its scraped details.

    Returns:
        Species records in LPSN search result order. Fields LPSN does not
        show for a species are omitted.
    """
    try:
        return await lpsn_client.list_bacteria(word)
    except UpstreamTimeoutError as e:
        logger.error("LPSN timed out while listing bacteria for %r: %s", word, e)
        raise HTTPException(status_code=504, detail=str(e)) from e
    except LPSNError as e:
        logger.error("Error listing bacteria for %r: %s", word, e)
        raise HTTPException(status_code=502, detail=str(e)) from e
