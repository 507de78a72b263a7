import logging
from functools import lru_cache

# FastAPI creates the app object and defines the routes
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from txtcheck import InvalidTarget, TXTRecordChecker
from txtcheck.config import ResolverSettings

logger = logging.getLogger(__name__)

app = FastAPI(title="DNS TXT Record Checker")


# Built on first use so importing the app never touches resolv.conf.
# Tests replace it through app.dependency_overrides.
@lru_cache(maxsize=1)
def get_checker() -> TXTRecordChecker:
    settings = ResolverSettings.from_env()
    return TXTRecordChecker(settings.build_resolver(), allow_bare_domain=settings.allow_bare_domain)


@app.get("/health")
def health():
    return {"ok": True}


# Check a domain for a TXT value
@app.get("/check")
async def check(
    domain: str = Query(..., min_length=1, max_length=2048),
    record: str = Query(..., min_length=1),
    checker: TXTRecordChecker = Depends(get_checker),
):
    result = await checker.check(domain, record)

    if isinstance(result.error, InvalidTarget):
        raise HTTPException(status_code=400, detail=result.error.describe())

    if result.error is not None:
        logger.warning("TXT lookup failed for %s: %s", result.domain, result.error)
        raise HTTPException(status_code=502, detail=result.to_dict())

    return JSONResponse(content=result.to_dict())
