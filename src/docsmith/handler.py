"""AWS Lambda entry point."""
import asyncio

from docsmith.router import route
from docsmith.services import Services, build_services, configure_logging

configure_logging()

# --- Globals ---
# one loop for the process lifetime; the async API clients are bound to it
loop = asyncio.new_event_loop()
services_instance: Services | None = None


def get_services() -> Services:
    global services_instance
    if services_instance is None:
        services_instance = build_services()
    return services_instance


def handler(event, context):
    return loop.run_until_complete(route(event, get_services()))
