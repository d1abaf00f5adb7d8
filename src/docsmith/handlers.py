"""HTTP handlers for the two endpoints. Each takes a router event and returns a
`{statusCode, headers, body}` response with permissive CORS headers."""
import asyncio
import base64
import json
import logging

from pydantic import ValidationError

from docsmith import config
from docsmith.errors import BadRequestError
from docsmith.schemas import PresignBody, PromptBody
from docsmith.storage import new_upload_key

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "OPTIONS,POST,GET",
    "Access-Control-Allow-Headers": "*",
}


def response(status: int, body: dict) -> dict:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
        "body": json.dumps(body),
    }


def parse_body(event: dict) -> dict:
    raw = event.get("body") or "{}"
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        body = json.loads(raw)
    except ValueError:
        raise BadRequestError("Invalid JSON body")
    if not isinstance(body, dict):
        raise BadRequestError("Invalid JSON body")
    return body


def _validation_message(err: ValidationError) -> str:
    first = err.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"Invalid field '{field}': {first['msg']}"


async def presign_upload(event: dict, storage) -> dict:
    try:
        body = parse_body(event)
        if not body.get("fileName"):
            raise BadRequestError("Missing fileName")
        try:
            request = PresignBody.model_validate(body)
        except ValidationError as err:
            raise BadRequestError(_validation_message(err))

        key = new_upload_key(request.fileName)
        upload_url = await asyncio.to_thread(storage.presign_upload, key, request.contentType, config.UPLOAD_URL_TTL)
        return response(200, {"uploadUrl": upload_url, "key": key})
    except BadRequestError as err:
        return response(400, {"error": err.message})
    except Exception as err:
        logger.exception("Presigned URL request failed")
        return response(500, {"error": str(err)})


async def process_prompt(event: dict, pipeline) -> dict:
    try:
        body = parse_body(event)
        if not body.get("prompt"):
            raise BadRequestError("Missing prompt")
        try:
            request = PromptBody.model_validate(body).to_request()
        except ValidationError as err:
            raise BadRequestError(_validation_message(err))

        result = await pipeline.run(request)
        return response(200, result.to_body())
    except BadRequestError as err:
        return response(400, {"error": err.message})
    except Exception as err:
        logger.exception("Prompt processing failed")
        return response(500, {"error": str(err)})
