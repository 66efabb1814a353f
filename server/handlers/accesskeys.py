"""
Access key handlers.

GET /buy?quantity=<n>
"""

from aiohttp import web
from pydantic import ValidationError

from gateway.config.constants import STATUS_BAD_REQUEST
from gateway.models.api import BuyParams
from server.handlers.responses import result_response, status_response
from server.keys import ACCESSKEY_SERVICE_KEY


async def buy_get_handler(request: web.Request) -> web.Response:
    """
    Buy an access key.

    Returns:
        200 with the Accesskey, 400 for a bad quantity, 500 if the
        authorization service failed
    """
    try:
        params = BuyParams.model_validate(dict(request.query))
    except ValidationError as e:
        return status_response(STATUS_BAD_REQUEST, str(e))

    service = request.app[ACCESSKEY_SERVICE_KEY]
    result = await service.buy(params.quantity)
    return result_response(result)
