import logging

from flask import Blueprint, request, jsonify, Response, current_app
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from ..graphs import run_menu_processing
from ..errors import MenuProcessingError
from ..services.menu_images.image_resolver_factory import ImageResolverFactory
from ..services.menu_parsing.menu_parser import MenuParser
from ..services.menu_processing.menu_processor import MenuProcessor, INTERNAL_ERROR_MESSAGE
from ..services.menu_processing.menu_processing_config import MenuProcessingConfig
from ..services.menu_processing.menu_processing_events import encode_sse, hb_line
from ..services.shared.capability.capability_factory import CapabilityFactory
from ..utils.helpers import read_menu_input

logger = logging.getLogger(__name__)

menu_bp = Blueprint('menu', __name__)

SSE_HEADERS = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache, no-transform",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def _store():
    return current_app.extensions["menuviz.store"]


def _build_processor(config: MenuProcessingConfig) -> MenuProcessor:
    """Wire parser, resolver and store for one request; fails fast on a missing credential."""
    capability = current_app.extensions.get("menuviz.capability")
    if capability is None:
        capability = CapabilityFactory.create_capability(config)
    capability.ensure_configured()

    resolver = current_app.extensions.get("menuviz.image_resolver")
    if resolver is None:
        resolver = ImageResolverFactory.create_resolver(config.image_provider, config.image_lookup_timeout_s)

    return MenuProcessor(MenuParser(capability), resolver, _store())


def _read_request():
    config = MenuProcessingConfig()
    raw = read_menu_input(
        request.form,
        request.files,
        config.max_upload_bytes,
        json_body=request.get_json(silent=True) if request.is_json else None,
    )
    return raw, _build_processor(config)


@menu_bp.post("/api/process-menu")
def process_menu():
    """Blocking endpoint: parse, enrich and return every item at once"""
    try:
        raw, processor = _read_request()
        data = run_menu_processing(raw, processor)
    except MenuProcessingError as e:
        logger.warning(f"[process-menu] {e.status_code}: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except HTTPException:
        raise
    except Exception:
        logger.exception("[process-menu] unexpected failure")
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500

    logger.info(f"[process-menu] session {data['sessionId']}: {len(data['menuItems'])} items")
    return jsonify(data), 200


@menu_bp.post("/api/process-menu-stream")
def process_menu_stream():
    """SSE stream of progress events; input and credential errors are answered before the stream opens"""
    try:
        raw, processor = _read_request()
    except MenuProcessingError as e:
        logger.warning(f"[process-menu-stream] {e.status_code}: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except HTTPException:
        raise
    except Exception:
        logger.exception("[process-menu-stream] failed before streaming")
        return jsonify({"error": INTERNAL_ERROR_MESSAGE}), 500

    def event_stream():
        # Opening padding so intermediaries start streaming immediately
        yield hb_line("open")
        for event in processor.stream(raw):
            yield encode_sse(event)

    return Response(event_stream(), headers=SSE_HEADERS)


@menu_bp.get("/api/menu-items")
def list_menu_items():
    return jsonify([item.to_dict() for item in _store().list_all_items()])


def _parse_id(raw_id: str):
    try:
        return int(raw_id)
    except ValueError:
        return None


@menu_bp.get("/api/menu-items/<item_id>")
def get_menu_item(item_id: str):
    parsed_id = _parse_id(item_id)
    if parsed_id is None:
        return jsonify({"error": "Invalid menu item ID"}), 400
    item = _store().get_item(parsed_id)
    if item is None:
        return jsonify({"error": "Menu item not found"}), 404
    return jsonify(item.to_dict())


@menu_bp.get("/api/menu-sessions/<session_id>")
def get_menu_session(session_id: str):
    parsed_id = _parse_id(session_id)
    if parsed_id is None:
        return jsonify({"error": "Invalid menu session ID"}), 400
    session = _store().get_session(parsed_id)
    if session is None:
        return jsonify({"error": "Menu session not found"}), 404
    return jsonify(session.to_dict())


@menu_bp.get("/api/menu-sessions/<session_id>/items")
def get_menu_session_items(session_id: str):
    parsed_id = _parse_id(session_id)
    if parsed_id is None:
        return jsonify({"error": "Invalid menu session ID"}), 400
    store = _store()
    if store.get_session(parsed_id) is None:
        return jsonify({"error": "Menu session not found"}), 404
    return jsonify([item.to_dict() for item in store.list_items_by_session(parsed_id)])


@menu_bp.app_errorhandler(RequestEntityTooLarge)
def request_too_large(e):
    limit_mb = current_app.config['MAX_UPLOAD_BYTES'] // (1024 * 1024)
    return jsonify({"error": f"File too large. Maximum size is {limit_mb}MB"}), 413
