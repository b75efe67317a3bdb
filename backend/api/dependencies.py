"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from one Settings
instance.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.verifiers import TokenVerifier
    from modules.diagnostics.service import AuthDiagnosticsService
    from modules.reactions.interfaces import IReactionService
    from modules.reactions.repository import ReactionRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as
    singletons within the container. Use reset() to clear them.

    Args:
        settings: Settings injected into every service
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._verifiers: "list[TokenVerifier] | None" = None
        self._auth_service: "IAuthService | None" = None
        self._diagnostics_service: "AuthDiagnosticsService | None" = None
        self._reaction_repository: "ReactionRepository | None" = None
        self._reaction_service: "IReactionService | None" = None

    @property
    def verifiers(self) -> "list[TokenVerifier]":
        """Get the ordered token verifiers."""
        if self._verifiers is None:
            from modules.auth.verifiers import build_token_verifiers
            self._verifiers = build_token_verifiers(self.settings)
        return self._verifiers

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.settings, self.verifiers)
        return self._auth_service

    @property
    def diagnostics(self) -> "AuthDiagnosticsService":
        """Get the auth diagnostics service instance."""
        if self._diagnostics_service is None:
            from modules.diagnostics.service import AuthDiagnosticsService
            self._diagnostics_service = AuthDiagnosticsService(
                self.settings,
                self.verifiers,
                self.auth,
            )
        return self._diagnostics_service

    @property
    def reaction_repository(self) -> "ReactionRepository":
        """Get the reaction repository instance."""
        if self._reaction_repository is None:
            from modules.reactions.repository import ReactionRepository
            from shared.database import get_supabase_client
            self._reaction_repository = ReactionRepository(get_supabase_client(self.settings))
        return self._reaction_repository

    @property
    def reactions(self) -> "IReactionService":
        """Get the reaction service instance."""
        if self._reaction_service is None:
            from modules.reactions.service import ReactionService
            self._reaction_service = ReactionService(self.reaction_repository)
        return self._reaction_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._verifiers = None
        self._auth_service = None
        self._diagnostics_service = None
        self._reaction_repository = None
        self._reaction_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def init_container(settings: Settings) -> ServiceContainer:
    """Replace the singleton container with one bound to the given settings."""
    global _container
    _container = ServiceContainer(settings)
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_diagnostics_service() -> "AuthDiagnosticsService":
    """FastAPI dependency for auth diagnostics service."""
    return get_container().diagnostics


def get_reaction_service() -> "IReactionService":
    """FastAPI dependency for reaction service."""
    return get_container().reactions


def get_app_settings() -> Settings:
    """FastAPI dependency for the settings the services were built with."""
    return get_container().settings
