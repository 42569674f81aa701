"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from tone_translator.adapters.supabase_auth_client import (
    Authenticator,
    SupabaseAuthenticator,
)
from tone_translator.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from tone_translator.adapters.supabase_variant_repository import (
    SupabaseVariantRepository,
)
from tone_translator.config import Settings
from tone_translator.services.sessions import SessionService
from tone_translator.services.variants import VariantService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    authenticator: Authenticator
    session_service: SessionService
    variant_service: VariantService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_service = SessionService(SupabaseSessionRepository(supabase_client))
    variant_service = VariantService(
        session_service=session_service,
        repository=SupabaseVariantRepository(supabase_client),
    )
    return AppContainer(
        settings=resolved_settings,
        authenticator=SupabaseAuthenticator(supabase_client),
        session_service=session_service,
        variant_service=variant_service,
    )
