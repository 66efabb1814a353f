"""
Response helpers.

Render models and service results as JSON responses.
"""

from aiohttp import web
from pydantic import BaseModel

from gateway.models.api import Status
from gateway.services.base_service import ServiceResult


def model_response(model: BaseModel, status: int = 200) -> web.Response:
    """Serialize a pydantic model into a JSON response."""
    return web.json_response(text=model.model_dump_json(), status=status)


def status_response(code: int, desc: str) -> web.Response:
    """Build a Status envelope response; the HTTP status mirrors ``code``."""
    return model_response(Status(code=code, desc=desc), status=code)


def result_response(result: ServiceResult) -> web.Response:
    """
    Render a service result.

    Args:
        result: Service result

    Returns:
        200 with the payload on success, otherwise the status envelope
    """
    if result.success:
        return model_response(result.data)
    return model_response(result.error, status=result.error.code)
