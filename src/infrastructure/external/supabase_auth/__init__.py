"""Supabase-backed administrator authentication."""

from .service import (
    ADMIN_ROLE,
    AdminAuthError,
    SupabaseAdminAuthService,
    build_supabase_client,
)


__all__ = [
    "ADMIN_ROLE",
    "AdminAuthError",
    "SupabaseAdminAuthService",
    "build_supabase_client",
]
