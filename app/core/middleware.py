"""Role-based dashboard routing.

Admins live under ``/admin`` and employees under ``/employee``. A signed-in
user who wanders into the other area is sent to their own dashboard; a
request with no valid token is sent to sign in.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from app.core.security import TOKEN_COOKIE, Role, token_role

ADMIN_PREFIX = "/admin"
EMPLOYEE_PREFIX = "/employee"
ADMIN_DASHBOARD = "/admin/dashboard"
EMPLOYEE_DASHBOARD = "/employee/dashboard"
SIGN_IN = "/auth/signin"


def is_dashboard_path(path: str) -> bool:
    return path.startswith(ADMIN_PREFIX) or path.startswith(EMPLOYEE_PREFIX)


def resolve_dashboard_redirect(path: str, role: Optional[str]) -> Optional[str]:
    """Where to send a user of ``role`` asking for ``path``; None means let through."""
    if path.startswith(ADMIN_PREFIX) and role != Role.ADMIN.value:
        return EMPLOYEE_DASHBOARD
    if path.startswith(EMPLOYEE_PREFIX) and role != Role.EMPLOYEE.value:
        return ADMIN_DASHBOARD
    return None


def _request_token(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization", "")
    if auth.lower().startswith("bearer "):
        return auth[7:].strip()
    return request.cookies.get(TOKEN_COOKIE)


class RoleRoutingMiddleware(BaseHTTPMiddleware):
    """Apply ``resolve_dashboard_redirect`` to dashboard paths."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not is_dashboard_path(path):
            return await call_next(request)

        role = token_role(_request_token(request))
        if role is None:
            return RedirectResponse(url=SIGN_IN, status_code=307)

        target = resolve_dashboard_redirect(path, role)
        if target is not None:
            return RedirectResponse(url=target, status_code=307)
        return await call_next(request)
