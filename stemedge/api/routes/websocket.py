"""
WebSocket stream of population samples for a lesson view.
"""
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from stemedge.models.schemas import PopulationSample
from stemedge.services.lesson_views import get_view_registry
from stemedge.services.population import PopulationSimulator
from stemedge.utils.error_messages import format_learner_error
import asyncio
import json
import uuid
import logging
from datetime import datetime, timezone
from starlette.websockets import WebSocketState

router = APIRouter()
logger = logging.getLogger(__name__)

COMMANDS = ("start", "pause", "reset")


def generate_id() -> str:
    return f"{datetime.now(timezone.utc).timestamp()}_{uuid.uuid4().hex[:6]}"


async def send_json(ws: WebSocket, data: dict) -> bool:
    """Send JSON safely, return False if connection closed."""
    try:
        if ws.client_state != WebSocketState.CONNECTED:
            return False

        if "message_id" not in data:
            data["message_id"] = generate_id()

        await ws.send_json(data)
        return True
    except (WebSocketDisconnect, RuntimeError):
        return False
    except Exception as e:
        logger.warning(f"Send failed: {e}")
        return False


def state_message(sim: PopulationSimulator) -> dict:
    return {
        "type": "state",
        "running": sim.running,
        "history": [s.model_dump() for s in sim.history],
    }


async def forward_samples(ws: WebSocket, queue: asyncio.Queue):
    while True:
        sample = await queue.get()
        if not await send_json(ws, {"type": "sample", "sample": sample.model_dump()}):
            return


@router.websocket("/ws/population/{view_id}")
async def population_stream(ws: WebSocket, view_id: str):
    """
    Stream each simulation tick to the client.

    Client messages: {"type": "start" | "pause" | "reset" | "ping"}.
    Disconnecting pauses the simulation.
    """
    await ws.accept()
    connection_id = generate_id()

    try:
        view = get_view_registry().get(view_id)
    except KeyError:
        await send_json(ws, {"type": "error", "message": "Lesson view not found"})
        await ws.close(code=4404)
        return

    logger.info(f"Connected: {connection_id} (view: {view_id})")
    sim = view.population
    queue: asyncio.Queue[PopulationSample] = asyncio.Queue()
    unsubscribe = sim.subscribe(queue.put_nowait)
    view.attach_stream()
    sender = asyncio.create_task(forward_samples(ws, queue))

    try:
        await send_json(ws, state_message(sim))

        while True:
            if ws.client_state != WebSocketState.CONNECTED:
                break

            try:
                raw = await ws.receive_text()
            except (WebSocketDisconnect, RuntimeError):
                break

            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                await send_json(ws, {"type": "error", "message": "Invalid JSON"})
                continue

            msg_type = data.get("type") if isinstance(data, dict) else None

            if msg_type == "ping":
                await send_json(ws, {
                    "type": "pong",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                })

            elif msg_type in COMMANDS:
                getattr(sim, msg_type)()
                await send_json(ws, state_message(sim))

            else:
                await send_json(ws, {
                    "type": "error",
                    "message": f"Unknown type: {msg_type}"
                })

    except WebSocketDisconnect:
        logger.info(f"Clean disconnect: {connection_id}")
    except Exception as e:
        logger.error(f"WebSocket error: {e}", exc_info=True)
        await send_json(ws, {"type": "error", "message": format_learner_error(e)})
    finally:
        unsubscribe()
        # the last stream to leave stops the simulation
        if view.detach_stream() == 0:
            sim.pause()
        sender.cancel()
        if ws.client_state == WebSocketState.CONNECTED:
            try:
                await ws.close()
            except RuntimeError:
                pass
        logger.info(f"Cleaned up: {connection_id}")
