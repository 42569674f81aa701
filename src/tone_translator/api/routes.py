"""Translation session and variant endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from tone_translator.api.auth import require_caller
from tone_translator.api.models import (
    CreateSessionRequest,
    CreateVariantRequest,
    UpdateSessionRequest,
    UpdateVariantRequest,
)
from tone_translator.containers import AppContainer
from tone_translator.domain.callers import Caller
from tone_translator.domain.sessions import TranslationSession
from tone_translator.domain.variants import TranslationVariant

router = APIRouter(prefix="/sessions", tags=["translations"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("", status_code=status.HTTP_201_CREATED)
def create_session(
    payload: CreateSessionRequest,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> dict[str, object]:
    """Create a translation session for the caller."""
    session = _container(request).session_service.create_session(
        caller,
        original_text=payload.original_text,
        source_language=payload.source_language,
        target_language=payload.target_language,
        context=payload.context,
    )
    return _envelope({"session": _serialize_session(session)})


@router.patch("/{session_id}")
def update_session(
    session_id: UUID,
    payload: UpdateSessionRequest,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> dict[str, object]:
    """Apply a partial update to one of the caller's sessions."""
    session = _container(request).session_service.update_session(
        caller, session_id, payload.to_patch()
    )
    return _envelope({"session": _serialize_session(session)})


@router.get("")
def list_sessions(
    request: Request, caller: Caller = Depends(require_caller)
) -> dict[str, object]:
    """List the caller's sessions."""
    result = _container(request).session_service.list_sessions(caller)
    return _envelope(
        {
            "items": [_serialize_session(session) for session in result.items],
            "total": result.total,
        }
    )


@router.post("/{session_id}/variants", status_code=status.HTTP_201_CREATED)
def create_variant(
    session_id: UUID,
    payload: CreateVariantRequest,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> dict[str, object]:
    """Create a variant under one of the caller's sessions."""
    variant = _container(request).variant_service.create_variant(
        caller,
        session_id,
        translated_text=payload.translated_text,
        tone=payload.tone,
        politeness_level=payload.politeness_level,
        style_hint=payload.style_hint,
        is_favorite=payload.is_favorite,
    )
    return _envelope({"variant": _serialize_variant(variant)})


@router.patch("/{session_id}/variants/{variant_id}")
def update_variant(
    session_id: UUID,
    variant_id: UUID,
    payload: UpdateVariantRequest,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> dict[str, object]:
    """Apply a partial update to a variant."""
    variant = _container(request).variant_service.update_variant(
        caller, session_id, variant_id, payload.to_patch()
    )
    return _envelope({"variant": _serialize_variant(variant)})


@router.delete("/{session_id}/variants/{variant_id}")
def delete_variant(
    session_id: UUID,
    variant_id: UUID,
    request: Request,
    caller: Caller = Depends(require_caller),
) -> dict[str, object]:
    """Delete a variant."""
    _container(request).variant_service.delete_variant(caller, session_id, variant_id)
    return _envelope({"id": str(variant_id)})


@router.get("/{session_id}/variants")
def list_variants(
    session_id: UUID,
    request: Request,
    favorites_only: bool = False,
    caller: Caller = Depends(require_caller),
) -> dict[str, object]:
    """List variants of a session, optionally favorites only."""
    result = _container(request).variant_service.list_variants(
        caller, session_id, favorites_only=favorites_only
    )
    return _envelope(
        {
            "items": [_serialize_variant(variant) for variant in result.items],
            "total": result.total,
        }
    )


def _envelope(data: dict[str, object]) -> dict[str, object]:
    return {"success": True, "data": data}


def _serialize_session(session: TranslationSession) -> dict[str, object]:
    return {
        "id": str(session.id),
        "user_id": str(session.user_id),
        "source_language": session.source_language,
        "target_language": session.target_language,
        "context": session.context,
        "original_text": session.original_text,
        "created_at": session.created_at.isoformat(),
        "updated_at": session.updated_at.isoformat(),
    }


def _serialize_variant(variant: TranslationVariant) -> dict[str, object]:
    return {
        "id": str(variant.id),
        "session_id": str(variant.session_id),
        "tone": variant.tone,
        "politeness_level": variant.politeness_level,
        "style_hint": variant.style_hint,
        "translated_text": variant.translated_text,
        "is_favorite": variant.is_favorite,
        "created_at": variant.created_at.isoformat(),
    }
