"""
Auth diagnostics endpoint.

Always answers 200: the report itself carries any failure.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_diagnostics_service
from modules.auth.credentials import RequestContext

from .models import DiagnosticReport
from .service import AuthDiagnosticsService

router = APIRouter()


@router.api_route("", methods=["GET", "POST"], response_model=DiagnosticReport)
async def debug_auth(
    request: Request,
    service: AuthDiagnosticsService = Depends(get_diagnostics_service),
) -> DiagnosticReport:
    """
    Report how the request's credential fares against each verifier.

    Includes unverified token claims, so this route is only mounted when
    auth diagnostics are enabled.
    """
    return await service.diagnose(RequestContext.from_request(request))
