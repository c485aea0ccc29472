"""
Request context helpers.

We keep a small context (request_id, user_id, generation_id) in ContextVars.
The HTTP middleware and the generation service set these values so logs
become correlatable across one generation request.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_user_id: ContextVar[Optional[str]] = ContextVar("user_id", default=None)
_generation_id: ContextVar[Optional[str]] = ContextVar("generation_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    user_id: Optional[str] = None,
    generation_id: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if user_id is not None:
        _user_id.set(user_id)
    if generation_id is not None:
        _generation_id.set(generation_id)


def clear_context() -> None:
    _request_id.set(None)
    _user_id.set(None)
    _generation_id.set(None)


def get_request_id() -> Optional[str]:
    return _request_id.get()


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    uid = _user_id.get()
    gid = _generation_id.get()

    if rid:
        ctx["request_id"] = rid
    if uid:
        ctx["user_id"] = uid
    if gid:
        ctx["generation_id"] = gid
    return ctx
