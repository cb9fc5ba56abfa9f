from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from hellosign.config import get_hellosign_config
from hellosign.handlers.callback_handlers import CALLBACK_RESPONSE, CallbackHandlers, verify_event_hash
from hellosign.models import CallbackEvent

logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None,
               handlers: Optional[CallbackHandlers] = None) -> FastAPI:
    """Build the service receiving HelloSign callbacks."""
    config = config if config is not None else get_hellosign_config()
    handlers = handlers if handlers is not None else CallbackHandlers()

    app = FastAPI()
    app.state.config = config
    app.state.callback_handlers = handlers

    @app.post("/hellosign-callback", response_class=PlainTextResponse)
    async def handle_hellosign_callback(request: Request):
        """Handles callbacks from HelloSign."""
        # HelloSign posts the event as a "json" form field
        form_data = await request.form()
        json_data = form_data.get("json")
        raw = json_data if isinstance(json_data, str) else await request.body()

        try:
            event = CallbackEvent.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Invalid callback payload: {str(e)}")
            raise HTTPException(status_code=400, detail="Invalid callback payload")

        if config.get("callback_verify", True):
            api_key = config.get("api_key")
            if not api_key or not verify_event_hash(event, api_key):
                logger.warning(f"Rejected {event.event_type} callback with a bad event hash")
                raise HTTPException(status_code=401, detail="Invalid event hash")

        await handlers.dispatch(event)
        # HelloSign keeps retrying until it reads this exact body
        return PlainTextResponse(CALLBACK_RESPONSE)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for Docker healthcheck."""
        return {"status": "healthy", "service": "hellosign-callbacks"}

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_hellosign_config()
    logging.basicConfig(level=settings["log_level"])
    uvicorn.run(create_app(settings), host="0.0.0.0", port=8000)
