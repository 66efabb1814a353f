"""
Withdrawal handlers.

POST /withdrawals
GET  /withdrawals/{id}
"""

from aiohttp import web
from pydantic import ValidationError

from gateway.config.constants import STATUS_BAD_REQUEST
from gateway.models.api import WithdrawalRequest
from server.handlers.responses import model_response, result_response, status_response
from server.keys import WITHDRAWAL_PROCESSOR_KEY, WITHDRAWAL_STATUS_SERVICE_KEY


async def withdrawals_post_handler(request: web.Request) -> web.Response:
    """
    Process a withdrawal request.

    Returns:
        200 with the Withdrawal; 400 with the parser message for a
        malformed body; otherwise the processor's status envelope
    """
    body = await request.read()
    try:
        withdrawal_request = WithdrawalRequest.model_validate_json(body)
    except ValidationError as e:
        return status_response(STATUS_BAD_REQUEST, str(e))

    processor = request.app[WITHDRAWAL_PROCESSOR_KEY]
    result = await processor.process(withdrawal_request)
    return result_response(result)


async def withdrawals_get_handler(request: web.Request) -> web.Response:
    """
    Get withdrawal state.

    Returns:
        200 with WithdrawalStateData
    """
    withdrawal_id = request.match_info["id"]
    service = request.app[WITHDRAWAL_STATUS_SERVICE_KEY]
    return model_response(service.get_status(withdrawal_id))
