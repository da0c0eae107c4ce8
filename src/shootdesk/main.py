from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import shootdesk.routers.api as api_router
from shootdesk import __version__
from shootdesk.config import Settings, configure_logging, load_settings
from shootdesk.deps import build_provider_client
from shootdesk.errors import ShootDeskError


async def shootdesk_error_handler(request: Request, exc: ShootDeskError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def create_app(settings: Optional[Settings] = None) -> FastAPI:

    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.PROJECT_NAME, version=__version__)
    app.state.settings = settings
    app.state.provider = build_provider_client(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ShootDeskError, shootdesk_error_handler)
    app.include_router(api_router.get_router(), prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"message": f"{settings.PROJECT_NAME} is running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
