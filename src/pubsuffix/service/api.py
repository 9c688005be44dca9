from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from pubsuffix.config import get_ascii_idna_option, get_unicode_idna_option
from pubsuffix.data.batch import describe_suffix
from pubsuffix.errors import InvalidDomain, UnableToResolveDomain
from pubsuffix.models.public_suffix import from_section, section_from_name
from pubsuffix.service.schemas import SuffixRequest, SuffixResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="pubsuffix inspection service", version="0.1.0")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/suffix", response_model=SuffixResponse)
def inspect_suffix_endpoint(req: SuffixRequest) -> SuffixResponse:
    ascii_option = req.ascii_idna_option if req.ascii_idna_option is not None else get_ascii_idna_option()
    unicode_option = (
        req.unicode_idna_option if req.unicode_idna_option is not None else get_unicode_idna_option()
    )
    try:
        suffix = from_section(req.value, section_from_name(req.section), ascii_option, unicode_option)
        return SuffixResponse(
            **describe_suffix(suffix),
            labels=list(suffix.labels),
            ascii_idna_option=int(suffix.ascii_idna_option),
            unicode_idna_option=int(suffix.unicode_idna_option),
        )
    except UnableToResolveDomain as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidDomain as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to inspect public suffix")
        raise HTTPException(status_code=500, detail=f"Public suffix inspection failed: {exc}") from exc
