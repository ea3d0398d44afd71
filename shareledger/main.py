import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from shareledger.api.v1.routes.system import router as system_router
from shareledger.api.v1.routes.balances import router as balances_router
from shareledger.api.v1.routes.expense import router as expense_router
from shareledger.api.v1.routes.settlement import router as settlement_router
from shareledger.core.config import settings
from shareledger.core.errors import NotFoundError, ValidationError
from shareledger.core.log_config import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s started", settings.APP_NAME)
    yield

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.reason})

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.reason})

@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(balances_router, prefix="/api/v1")
app.include_router(expense_router, prefix="/api/v1/expense")
app.include_router(settlement_router, prefix="/api/v1/settlements")
