"""
FastAPI dependency injection.

Dependencies provide configuration and authentication to route handlers.
The coaching core is a set of pure functions, so there are no clients or
connections to manage here; routes call the core directly.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from ..config.settings import Settings, get_settings
from ..core.coaching.models import PromptConfig

logger = logging.getLogger(__name__)

# API Key security scheme
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

async def verify_api_key(
    settings: Annotated[Settings, Depends(get_settings)],
    api_key: str = Security(api_key_header),
) -> str:
    """
    Validate API key from request header.

    Raises 403 if key is invalid or missing.
    """
    if not api_key:
        logger.warning("Request missing API key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="API key required. Provide X-API-Key header.",
        )

    if api_key not in settings.api_keys_list:
        logger.warning(
            "Invalid API key attempt",
            extra={"key_prefix": api_key[:8]}
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key",
        )

    return api_key


# ---------------------------------------------------------------------------
# Prompt Defaults
# ---------------------------------------------------------------------------

def get_default_prompt_config(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PromptConfig:
    """PromptConfig seeded from settings; requests override field by field."""
    return PromptConfig(
        empathy_level=settings.default_empathy_level,
        intensity=settings.default_intensity,
        context_awareness=settings.default_context_awareness,
    )


# ---------------------------------------------------------------------------
# Convenience Type Aliases
# ---------------------------------------------------------------------------

# These type aliases make route signatures cleaner
AuthenticatedUser = Annotated[str, Depends(verify_api_key)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
PromptConfigDep = Annotated[PromptConfig, Depends(get_default_prompt_config)]
