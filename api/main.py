import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import config, db
from core.logs import configure_logging
from products import router as products_router
from products import service as products_service

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Products API", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products_router.router, tags=["products"])


@app.exception_handler(products_service.ProductValidationError)
async def product_validation_error(_: Request, exc: products_service.ProductValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


@app.exception_handler(products_service.InvalidBodyError)
async def invalid_body_error(_: Request, exc: products_service.InvalidBodyError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(exc)})


@app.exception_handler(products_service.ProductNotFoundError)
async def product_not_found(_: Request, exc: products_service.ProductNotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(db.DatabaseError)
async def database_error(request: Request, exc: db.DatabaseError) -> JSONResponse:
    logger.error("database_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc)},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.api_host(), port=config.api_port())
