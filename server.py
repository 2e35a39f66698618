"""
Slack Draft Webhook - Main Entry Point

aiohttp web server that receives Slack Events API callbacks and marks announced
draft picks as drafted in the store.
"""
import json
import logging
import os
import time
from logging.handlers import RotatingFileHandler
from typing import Callable, Optional

from aiohttp import web
from pydantic import ValidationError

from api.client import StoreClient
from config import WebhookConfig, get_config
from constants import SLACK_SIGNATURE_HEADER, SLACK_TIMESTAMP_HEADER
from exceptions import APIException, InvalidPayloadError, SignatureVerificationError
from models.slack import SlackPayload
from services.draft_sync_service import DraftSyncService
from services.player_service import PlayerService
from utils.listeners import DRAFT_MESSAGE_FILTERS, should_process_event
from utils.logging import JSONFormatter, clear_context, get_contextual_logger, set_request_context
from utils.slack_auth import verify_slack_signature

logger = logging.getLogger(f'{__name__}.WebhookHandler')


def setup_logging(config: WebhookConfig) -> logging.Logger:
    """Configure hybrid logging: human-readable console + structured JSON files."""
    os.makedirs(config.log_dir, exist_ok=True)
    level = getattr(logging, config.log_level.upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    ))

    json_handler = RotatingFileHandler(
        os.path.join(config.log_dir, 'slack_draft_webhook.json'),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=5
    )
    json_handler.setFormatter(JSONFormatter())

    # Module loggers (services.*, api.*) and aiohttp all propagate to root
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        root_logger.addHandler(console_handler)
        root_logger.addHandler(json_handler)

    app_logger = logging.getLogger('slack_draft_webhook')
    app_logger.setLevel(level)
    return app_logger


class WebhookHandler:
    """
    Handles Slack Events API requests.

    Only malformed or unauthorized requests get an error status. Messages that
    are not draft picks, unknown teams and unknown players are acknowledged
    with 200 so Slack does not retry them.
    """

    def __init__(
        self,
        config: WebhookConfig,
        sync_service: DraftSyncService,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize webhook handler.

        Args:
            config: Signing secret and replay window settings
            sync_service: Applies parsed draft picks to the store
            clock: Epoch seconds source used for the replay window
        """
        self.config = config
        self.sync_service = sync_service
        self._clock = clock

    @staticmethod
    def _parse_payload(raw_body: str) -> SlackPayload:
        """
        Parse a request body into a Slack payload.

        Raises:
            InvalidPayloadError: If the body is not a JSON object of the expected shape
        """
        try:
            data = json.loads(raw_body)
        except ValueError as e:
            raise InvalidPayloadError(f"Invalid JSON: {e}")

        if not isinstance(data, dict):
            raise InvalidPayloadError(f"Expected JSON object, got {type(data).__name__}")

        try:
            return SlackPayload.model_validate(data)
        except ValidationError as e:
            raise InvalidPayloadError(f"Unexpected payload shape: {e}")

    async def handle(self, request: web.Request) -> web.Response:
        """Process a single webhook request."""
        if request.method != 'POST':
            return web.Response(status=405, text='Method Not Allowed')

        raw = await request.read()
        try:
            raw_body = raw.decode('utf-8')
            payload = self._parse_payload(raw_body)
        except (UnicodeDecodeError, InvalidPayloadError) as e:
            logger.warning(f"Rejected request body: {e}")
            return web.Response(status=400, text='Invalid JSON')

        # Slack sends the challenge once at setup; there is nothing to verify yet
        if payload.is_url_verification:
            logger.info("Responding to Slack challenge")
            return web.json_response({'challenge': payload.challenge})

        try:
            verify_slack_signature(
                self.config.slack_signing_secret,
                request.headers.get(SLACK_TIMESTAMP_HEADER),
                request.headers.get(SLACK_SIGNATURE_HEADER),
                raw_body,
                max_age=self.config.signature_max_age,
                now=self._clock()
            )
        except SignatureVerificationError as e:
            logger.warning(f"Signature verification failed: {e}")
            return web.Response(status=401, text='Unauthorized')

        if not payload.is_event_callback:
            logger.debug(f"Ignoring payload type {payload.type!r}")
            return web.Response(text='OK')

        event = payload.event
        if event is None or not should_process_event(event, *DRAFT_MESSAGE_FILTERS):
            return web.Response(text='Ignored')

        try:
            return await self._sync_message(payload)
        finally:
            clear_context()

    async def _sync_message(self, payload: SlackPayload) -> web.Response:
        """Run the draft sync for an authored message and map the outcome to a response."""
        request_logger = get_contextual_logger(f'{__name__}.WebhookHandler')
        set_request_context(payload)
        trace_id = request_logger.start_operation('draft_sync')

        try:
            request_logger.info(f"Received message: {payload.event.text}")
            result = await self.sync_service.process_message(payload.event.text)
        except APIException as e:
            request_logger.error("Firebase update failed", error=e)
            request_logger.end_operation(trace_id, 'failed')
            return web.Response(status=500, text='Firebase update failed')
        except Exception as e:
            request_logger.error("Unexpected error while syncing draft pick", error=e)
            request_logger.end_operation(trace_id, 'failed')
            return web.Response(status=500, text='Internal error')

        if result.drafted:
            request_logger.info(f"Successfully marked as drafted: {result.player}")

        request_logger.end_operation(trace_id, result.status.name.lower())
        return web.Response(text=result.status.value)


def create_app(
    config: Optional[WebhookConfig] = None,
    sync_service: Optional[DraftSyncService] = None
) -> web.Application:
    """
    Build the web application.

    Args:
        config: Configuration (defaults to the environment)
        sync_service: Draft sync override; when omitted one is built on a new
            StoreClient that is closed on application cleanup

    Returns:
        Configured aiohttp application
    """
    config = config or get_config()
    app = web.Application()

    if sync_service is None:
        client = StoreClient(config.firebase_url, timeout=config.store_timeout)
        sync_service = DraftSyncService(PlayerService(client, root_path=config.draft_data_path))

        async def store_client_ctx(_app: web.Application):
            async with client:
                yield

        app.cleanup_ctx.append(store_client_ctx)

    handler = WebhookHandler(config, sync_service)
    app.router.add_route('*', config.webhook_path, handler.handle)
    return app


def main():
    """Main entry point."""
    config = get_config()
    logger = setup_logging(config)
    logger.info("Starting Slack draft webhook")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Listening on {config.host}:{config.port}{config.webhook_path}")

    web.run_app(create_app(config), host=config.host, port=config.port, print=None)


if __name__ == "__main__":
    main()
