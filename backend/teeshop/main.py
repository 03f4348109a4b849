from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from teeshop.adapters.mock_catalog import seed_catalog
from teeshop.api.health import router as health_router
from teeshop.api.routes_cart import router as cart_router
from teeshop.api.routes_catalogue import router as catalogue_router
from teeshop.api.routes_docs import router as docs_router
from teeshop.config import settings
from teeshop.db import init_db
from teeshop.utils.log import get_logger

log = get_logger("api")

DESCRIPTION = """
Manage a T-shirt store with one shared cart.

- Product listing with filtering and pagination
- Product details
- Shopping cart management (global cart)
- Stock is reserved when items enter the cart and returned when they leave it
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    init_db()
    seed_catalog(settings.MOCK_ITEM_COUNT, seed=settings.MOCK_SEED)
    yield


app = FastAPI(
    title="T-shirt Store API",
    description=DESCRIPTION,
    version="1.0.0",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # malformed input is a client error like any other store error
    detail = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    log.debug(f"rejected {request.method} {request.url.path}: {detail}")
    return JSONResponse(status_code=400, content={"detail": detail})


app.include_router(health_router, prefix="/api", tags=["health"])

app.include_router(catalogue_router, prefix="/product", tags=["catalogue"])

app.include_router(cart_router, tags=["cart"])

app.include_router(docs_router)


def run():
    import uvicorn

    uvicorn.run("teeshop.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
