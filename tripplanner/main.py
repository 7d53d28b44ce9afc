"""FastAPI application."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tripplanner.api.routes.health import router as health_router
from tripplanner.api.routes.metrics import router as metrics_router
from tripplanner.api.routes.quotes import router as quotes_router
from tripplanner.api.routes.trips import router as trips_router
from tripplanner.errors import InvalidInput, LookupFailed

app = FastAPI(title="Trip Planner Quote API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(quotes_router)
app.include_router(trips_router)


@app.exception_handler(LookupFailed)
async def lookup_failed_handler(request: Request, exc: LookupFailed) -> JSONResponse:
    """Quote provider failures surface as 502 Bad Gateway."""
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc), "operation": exc.operation},
    )


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    """Invalid trip parameters surface as 422."""
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Planner Quote API", "version": "0.1.0"}
