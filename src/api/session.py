"""Session API endpoints for running a meeting round.

Provides the setup preview, the start/pause/resume/skip/end commands,
the pause/resume toggle, the rendered board and a snapshot stream.
"""

from collections.abc import AsyncIterator
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import StreamingResponse

from src.events.bus import EventBus
from src.models.session import MeetingState
from src.render.board import BoardRenderer
from src.render.stream import SnapshotFeed
from src.render.view import SessionView
from src.setup.schemas import SetupPreview, StartRequest, preview
from src.turns.controller import SessionController

router = APIRouter(prefix="/session", tags=["session"])


def get_controller(request: Request) -> SessionController:
    """Dependency to get SessionController from app state."""
    controller = getattr(request.app.state, "session_controller", None)
    if controller is None:
        raise HTTPException(
            status_code=503,
            detail="Session controller not initialized",
        )
    return controller


def get_event_bus(request: Request) -> EventBus:
    """Dependency to get EventBus from app state."""
    return request.app.state.event_bus


@router.get("", response_model=SessionView)
async def get_session(
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Get the current session snapshot."""
    return controller.view()


@router.post("/preview", response_model=SetupPreview)
async def preview_setup(request: StartRequest) -> SetupPreview:
    """Show how much time each speaker would get.

    Args:
        request: StartRequest with time_value, mode and names

    Returns:
        SetupPreview with participant count and per-speaker time
    """
    return preview(request)


@router.post("/start", response_model=SessionView)
async def start_meeting(
    request: StartRequest,
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Randomize the speaking order and start the first countdown.

    Raises:
        HTTPException: 409 if a round is already in progress or finished
            and has not been ended yet
    """
    if controller.session.state != MeetingState.IDLE:
        raise HTTPException(
            status_code=409,
            detail=(
                f"Meeting is {controller.session.state.value}; "
                "end it before starting a new round"
            ),
        )

    await controller.dispatch(request.to_command())
    return controller.view()


@router.post("/pause", response_model=SessionView)
async def pause_meeting(
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Suspend the countdown. No effect unless running."""
    await controller.pause()
    return controller.view()


@router.post("/resume", response_model=SessionView)
async def resume_meeting(
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Continue the countdown. No effect unless paused."""
    await controller.resume()
    return controller.view()


@router.post("/toggle", response_model=SessionView)
async def toggle_meeting(
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Pause when running, resume when paused (the pause key)."""
    await controller.toggle()
    return controller.view()


@router.post("/skip", response_model=SessionView)
async def skip_speaker(
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Hand the floor to the next speaker, or finish after the last one."""
    await controller.skip()
    return controller.view()


@router.post("/end", response_model=SessionView)
async def end_meeting(
    controller: SessionController = Depends(get_controller),
) -> SessionView:
    """Discard the round and return to idle."""
    await controller.end()
    return controller.view()


@router.get("/board")
async def get_board(
    fmt: Literal["markdown", "html"] = Query(default="markdown", alias="format"),
    controller: SessionController = Depends(get_controller),
) -> Response:
    """Render the session board as Markdown or HTML."""
    renderer = BoardRenderer()
    content = renderer.render(controller.view(), fmt=fmt)
    return Response(content=content, media_type=renderer.media_type(fmt))


@router.get("/stream")
async def stream_session(
    request: Request,
    controller: SessionController = Depends(get_controller),
    event_bus: EventBus = Depends(get_event_bus),
) -> StreamingResponse:
    """Stream session snapshots as server-sent events.

    Sends the current snapshot immediately, then one event per change.
    """

    async def event_source() -> AsyncIterator[str]:
        async with SnapshotFeed(event_bus) as feed:
            async for chunk in feed.stream(controller.view()):
                if await request.is_disconnected():
                    break
                yield chunk

    return StreamingResponse(event_source(), media_type="text/event-stream")
