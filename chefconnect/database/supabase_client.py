import logging
from typing import Any, Dict, Mapping, Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from chefconnect.config import Settings
from chefconnect.core.exceptions import ChefConnectError, UnexpectedError

logger = logging.getLogger(__name__)

# Postgres invalid_text_representation, e.g. a malformed uuid in a filter or function argument
INVALID_TEXT_REPRESENTATION = "22P02"


def create_supabase_client(settings: Settings) -> Client:
    """Build the process-wide client. Prefers the service role key; the API enforces access itself."""
    key = settings.supabase_service_role_key or settings.supabase_key
    if not settings.supabase_url or not key:
        raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_KEY) must be set")
    return create_client(settings.supabase_url, key)


def first_row(data: Any) -> Optional[Dict[str, Any]]:
    """PostgREST returns a list for table queries and SETOF functions, an object for scalar-composite ones."""
    if not data:
        return None
    if isinstance(data, list):
        return data[0]
    return data


def translate_api_error(
    exc: APIError,
    known: Mapping[str, ChefConnectError],
    default_message: str,
    not_found: Optional[ChefConnectError] = None,
) -> ChefConnectError:
    """Map an error raised inside a database function (RAISE EXCEPTION '<TOKEN>') to a domain error."""
    if not_found is not None and is_malformed_id(exc):
        return not_found
    message = getattr(exc, "message", None) or str(exc)
    for token, error in known.items():
        if token in message:
            return error
    logger.error("%s: %s", default_message, message)
    return UnexpectedError(default_message, details=message)


def is_malformed_id(exc: Exception) -> bool:
    """A lookup by an id that cannot be cast to uuid matches no row."""
    return isinstance(exc, APIError) and getattr(exc, "code", None) == INVALID_TEXT_REPRESENTATION


def unexpected(exc: Exception, message: str, not_found: Optional[ChefConnectError] = None) -> ChefConnectError:
    if not_found is not None and is_malformed_id(exc):
        return not_found
    logger.error("%s: %s", message, exc)
    return UnexpectedError(message, details=str(exc))
