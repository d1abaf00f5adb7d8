import logging

from docsmith import handlers

logger = logging.getLogger(__name__)


def event_path(event: dict) -> str:
    return event.get("rawPath") or event.get("path") or ""


def event_method(event: dict) -> str | None:
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method") or event.get("httpMethod")


async def route(event: dict, services) -> dict:
    """Dispatch an API Gateway style event to the matching handler."""
    path, method = event_path(event), event_method(event)

    if "get-presigned-url" in path and method == "POST":
        return await handlers.presign_upload(event, services.storage)

    if "process-prompt" in path and method == "POST":
        return await handlers.process_prompt(event, services.pipeline)

    logger.info("No route for %s %s", method, path)
    return handlers.response(404, {"message": "Route not found"})
