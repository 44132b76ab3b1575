"""Admin Access Checks: pre-registration probes used by the sign-up form.

Invariants:
    - check-email: an empty ADMIN_ALLOWED_EMAILS allows everyone
    - check-invite: no configured codes is a server misconfiguration (500)
"""

from fastapi import APIRouter, Depends

from campfinder.config import Settings, get_settings
from campfinder.core.errors import ConfigurationError
from campfinder.core.security import is_email_allowed, is_invite_code_valid
from campfinder.schemas.auth import CheckEmailRequest, CheckInviteRequest

router = APIRouter(prefix="/api/v1/admin", tags=["admin-access"])


@router.post("/check-email")
async def check_email(
    body: CheckEmailRequest, settings: Settings = Depends(get_settings),
):
    if not settings.admin_allowed_emails:
        return {"allowed": True}
    return {"allowed": is_email_allowed(body.email, settings.admin_allowed_emails)}


@router.post("/check-invite")
async def check_invite(
    body: CheckInviteRequest, settings: Settings = Depends(get_settings),
):
    if not settings.admin_invite_codes:
        raise ConfigurationError("Invite codes are not configured")
    return {"valid": is_invite_code_valid(body.invite_code, settings.admin_invite_codes)}
