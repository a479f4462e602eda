import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

logger = logging.getLogger(__name__)

ws_router = APIRouter()


@ws_router.websocket("/ws")
async def ws_echo(websocket: WebSocket) -> None:
    """Sends every received frame back unchanged, keeping its text/binary type."""
    await websocket.accept()
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                logger.info("read: client disconnected (code=%s)", message.get("code"))
                break

            if message.get("text") is not None:
                logger.debug("recv: %d chars", len(message["text"]))
                await websocket.send_text(message["text"])
            elif message.get("bytes") is not None:
                logger.debug("recv: %d bytes", len(message["bytes"]))
                await websocket.send_bytes(message["bytes"])
    except WebSocketDisconnect as e:
        logger.info("write: client disconnected (code=%s)", e.code)
    except RuntimeError as e:
        # socket already closed underneath us
        logger.warning("write: %s", e)
