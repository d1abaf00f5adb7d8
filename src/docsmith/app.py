from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

# --- Local Imports ---
from docsmith.router import route
from docsmith.services import Services, build_services, configure_logging

configure_logging()


def create_app(services: Services | None = None) -> FastAPI:
    """Local server in front of the same router the Lambda handler uses."""

    # --- Startup/Shutdown Lifespan ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.services = services or build_services()
        yield

    app = FastAPI(title="docsmith", lifespan=lifespan)

    # --- CORS Middleware ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE", "PATCH"])
    async def dispatch(path: str, request: Request):
        event = {
            "rawPath": request.url.path,
            "requestContext": {"http": {"method": request.method}},
            "body": (await request.body()).decode("utf-8", errors="replace"),
        }
        result = await route(event, request.app.state.services)
        return Response(
            content=result["body"],
            status_code=result["statusCode"],
            headers=result["headers"],
            media_type="application/json",
        )

    return app


app = create_app()
