"""
Auth diagnostics service.

Runs every verification strategy against the request's token and reports
each outcome, so an operator can see which layer rejected a token.
Nothing here raises: failures are recorded in the report.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from modules.auth.claims import decode_unverified_claims
from modules.auth.credentials import RequestContext, extract_credential
from modules.auth.interfaces import IAuthService
from modules.auth.models import Credential
from modules.auth.verifiers import TokenVerifier
from shared.config import Settings

from .models import (
    CrossCheckResult,
    CrossCheckUser,
    DiagnosticReport,
    EnvironmentInfo,
    RequestInfo,
    TokenInfo,
    VerificationAttempt,
    VerificationResult,
    VerificationStatus,
)

logger = logging.getLogger(__name__)

NO_TOKEN_ERROR = "no token found"
ALL_FAILED_ERROR = "all verification methods failed"

# Characters of the Authorization header echoed back
AUTH_HEADER_PREVIEW = 30


class AuthDiagnosticsService:
    """
    Builds diagnostic reports for the auth debug endpoint.

    Args:
        settings: Application settings
        verifiers: Verification strategies, tried in order
        auth: The production auth service, used for the cross-check
        clock: Returns the current time (for tests)
    """

    def __init__(
        self,
        settings: Settings,
        verifiers: Sequence[TokenVerifier],
        auth: IAuthService,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._settings = settings
        self._verifiers = list(verifiers)
        self._auth = auth
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def diagnose(self, context: RequestContext) -> DiagnosticReport:
        """Produce the diagnostic report for one request."""
        now = self._clock()
        credential = extract_credential(context)

        report = DiagnosticReport(
            timestamp=now,
            environment=self._environment_info(),
            request=self._request_info(context),
            token=self._token_info(credential),
        )
        verification = report.verification

        if credential is None:
            verification.status = VerificationStatus.FAILED
            verification.error = NO_TOKEN_ERROR
            return report

        await self._run_verifiers(credential.token, verification)

        report.token.claims = decode_unverified_claims(credential.token, now=now)

        if verification.status == VerificationStatus.PENDING:
            verification.status = VerificationStatus.FAILED
            verification.error = ALL_FAILED_ERROR

        report.verify_user_function = await self._cross_check(context)
        return report

    async def _run_verifiers(self, token: str, verification: VerificationResult) -> None:
        for verifier in self._verifiers:
            if not verifier.is_configured():
                logger.debug(f"Skipping {verifier.name}: not configured")
                continue

            try:
                user = await verifier.verify(token)
            except Exception as e:
                logger.debug(f"{verifier.name} verification failed: {e}")
                verification.attempts.append(
                    VerificationAttempt(method=verifier.name, success=False, error=str(e))
                )
                continue

            verification.attempts.append(
                VerificationAttempt(method=verifier.name, success=True, user_id=user.id)
            )
            verification.status = VerificationStatus.SUCCESS
            verification.user = user
            return

    async def _cross_check(self, context: RequestContext) -> CrossCheckResult:
        try:
            user = await self._auth.authenticate(context, require_auth=True)
        except Exception as e:
            return CrossCheckResult(success=False, error=str(e))

        if user is None:
            return CrossCheckResult(success=False, error="No user returned")
        return CrossCheckResult(
            success=True,
            user=CrossCheckUser(id=user.id, email=user.email),
        )

    def _environment_info(self) -> EnvironmentInfo:
        settings = self._settings
        return EnvironmentInfo(
            environment=settings.environment,
            has_supabase_url=bool(settings.supabase_url),
            has_anon_key=bool(settings.supabase_anon_key),
            has_service_key=bool(settings.supabase_service_role_key),
            supabase_url=settings.supabase_url or "NOT SET",
        )

    @staticmethod
    def _request_info(context: RequestContext) -> RequestInfo:
        header = context.authorization
        return RequestInfo(
            method=context.method,
            has_auth_header=bool(header),
            auth_header=header[:AUTH_HEADER_PREVIEW] + "..." if header else "none",
            has_cookie=context.has_cookie,
            cookies=list(context.cookies),
        )

    @staticmethod
    def _token_info(credential: Optional[Credential]) -> TokenInfo:
        if credential is None:
            return TokenInfo(found=False)
        return TokenInfo(
            found=True,
            length=len(credential.token),
            prefix=credential.prefix,
            source=credential.source,
        )
