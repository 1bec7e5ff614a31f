from fastapi import FastAPI

from installment_engine.entrypoints.http.exception_handlers import register_exception_handlers
from installment_engine.entrypoints.http.routes.health import router as health_router
from installment_engine.entrypoints.http.routes.plans import router as plans_router
from installment_engine.infra.config import log_level
from installment_engine.infra.logging import configure_logging


def build_app() -> FastAPI:
    configure_logging(log_level())

    app = FastAPI(
        title="Installment Engine API",
        description="""
        Installment-plan calculation engine for contracts and proposals.

        ## Features
        - Six payment models: deferred balance, 1+4 without interest, cash
          discount, partial card installments, advisor special condition, 50/50
        - Side-effect-free validation endpoints returning user-facing messages
        - Exact decimal arithmetic; money travels as decimal strings

        ## Authentication
        None. The engine is stateless and holds no customer data.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(plans_router, prefix="/v1")

    return app


app = build_app()
