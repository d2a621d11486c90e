import hmac
from typing import Optional

from fastapi import Depends, Header, Query

from labdesk.core.config import Settings, get_settings
from labdesk.core.errors import AuthError
from labdesk.core.logger import logger


def credential_matches(presented: Optional[str], secret: str) -> bool:
    if not presented:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), secret.encode("utf-8"))


async def verify_admin_pass(
    x_admin_pass: Optional[str] = Header(None),
    pass_: Optional[str] = Query(None, alias="pass"),
    settings: Settings = Depends(get_settings),
):
    """
    Gate for the admin routes. The password comes from the X-Admin-Pass header,
    or the `pass` query parameter when the header is missing.
    """
    presented = x_admin_pass or pass_
    if not credential_matches(presented, settings.ADMIN_PASS):
        logger.warning("⚠️ Rejected admin request with wrong or missing password")
        raise AuthError()
    return True
