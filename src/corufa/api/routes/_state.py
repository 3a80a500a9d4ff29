"""Access to the single in-process AppState and its explicit commit."""

from __future__ import annotations

from typing import Callable

from fastapi import Request

from corufa.state import AppState


def current(request: Request) -> AppState:
    return request.app.state.app_state


def apply(
    request: Request,
    change: Callable[[AppState], AppState],
    *,
    persist: bool = True,
) -> AppState:
    """Derive the next state from the current one, save it, then publish it.

    Runs under the app's state lock so concurrent requests never build on a
    stale state. Blocking: call from a sync route or through a threadpool.
    """
    with request.app.state.state_lock:
        state = change(request.app.state.app_state)
        if persist:
            request.app.state.repository.save(state)
        request.app.state.app_state = state
    return state
