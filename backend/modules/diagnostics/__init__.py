"""
Auth diagnostics module.

Explains why a request did or did not authenticate.

Public API:
- AuthDiagnosticsService: Builds diagnostic reports
- DiagnosticReport: The report returned by the debug endpoint
"""

from .models import (
    DiagnosticReport,
    VerificationAttempt,
    VerificationResult,
    VerificationStatus,
)
from .service import AuthDiagnosticsService

__all__ = [
    "AuthDiagnosticsService",
    "DiagnosticReport",
    "VerificationAttempt",
    "VerificationResult",
    "VerificationStatus",
]
