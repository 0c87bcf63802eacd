from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.cors import make_cors_middleware
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .db.seed import seed_expenses
from .db.store import ExpenseStore
from .routers import expenses


def create_app(
    settings_override: Settings | None = None, store: ExpenseStore | None = None
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    store: pre-built store to serve; a fresh one (seeded per settings) otherwise.
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    if store is None:
        store = ExpenseStore(seed=seed_expenses() if settings.seed_demo_data else None)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings
    app.state.store = store

    # Middleware; the last registered runs first, so request ids wrap CORS
    app.middleware("http")(make_cors_middleware(settings.cors_allow_origin))
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(
        errors.ExpenseValidationError, errors.expense_validation_error_handler
    )
    app.add_exception_handler(
        errors.ExpenseCreationError, errors.expense_creation_error_handler
    )
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(expenses.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    return app


app = create_app()
