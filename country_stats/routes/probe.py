# country_stats/routes/probe.py: diagnostics; none of these touch upstream
from fastapi import APIRouter, Path
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["probe"])


@router.get("/")
def root():
    return {
        "ok": True,
        "service": "country-stats",
        "routes": ["/countries", "/countries/deaths", "/countries/recovered"],
    }


@router.get("/healthz")
def healthz():
    # keep this super fast
    return {"status": "ok"}


@router.get(
    "/countries/{country_id}/{name}",
    response_class=PlainTextResponse,
    summary="Echo path parameters (diagnostic stub)",
)
def echo_params(country_id: int = Path(..., ge=0), name: str = Path(...)) -> str:
    return f"Param name: {country_id} {name}"
