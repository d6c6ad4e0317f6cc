from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from banquet_booking.api.routes import bookings
from banquet_booking.core.config import Settings, get_settings
from banquet_booking.core.errors import BookingError
from banquet_booking.core.logging_config import get_logger, setup_logging
from banquet_booking.core.redis import BookingCache, connect_redis
from banquet_booking.db.session import Database

logger = get_logger()

DATE_FIELDS = {"startDate", "endDate", "start_date", "end_date"}


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: open the database and (optionally) redis
        database = Database(settings.database_url).connect()
        database.create_all()
        app.state.database = database
        app.state.cache = BookingCache(connect_redis(settings.redis_url), ttl=settings.cache_ttl)
        logger.info("Database connected")

        yield

        # Shutdown
        app.state.cache.close()
        database.dispose()
        logger.info("Database closed")

    app = FastAPI(
        title="Banquet Booking API",
        version="1.0.0",
        description="Bookings, catering and payment status for a banquet/lawn venue",
        lifespan=lifespan,
    )

    # Request Logging Middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"REQUEST: {request.method} {request.url}")

        try:
            response = await call_next(request)
            logger.info(f"RESPONSE: {response.status_code} {request.url}")
            return response

        except Exception as e:
            logger.error(f"ERROR: {request.url} -> {str(e)}")
            raise e

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(
            err.get("loc") and err["loc"][-1] in DATE_FIELDS and err.get("type") != "missing"
            for err in errors
        ):
            message = "Invalid start or end date format"
        else:
            message = "Invalid request body"

        details = [
            {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "error": err.get("msg")}
            for err in errors
        ]
        return JSONResponse(status_code=400, content={"message": message, "errors": details})

    app.include_router(bookings.router)

    @app.get("/", tags=["Root"])
    def root():
        return {"message": "Backend running successfully"}

    return app


if __name__ == "__main__":
    import uvicorn

    # equivalent to: uvicorn banquet_booking.main:create_app --factory
    uvicorn.run("banquet_booking.main:create_app", factory=True, host="0.0.0.0", port=get_settings().port)
