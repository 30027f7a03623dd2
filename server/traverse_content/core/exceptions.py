"""Content API exceptions following RFC 9457 Problem Details for HTTP APIs."""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

PROBLEM_BASE_URI = "https://traverse.example/problems"


class ProblemDetailsException(HTTPException):
    """
    Base exception class following RFC 9457 Problem Details for HTTP APIs.

    https://tools.ietf.org/rfc/rfc9457.txt
    """

    def __init__(
        self,
        status_code: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: Optional[str] = None,
        instance: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize Problem Details exception.

        Args:
            status_code: HTTP status code
            title: Short, human-readable summary of the problem type
            detail: Human-readable explanation specific to this occurrence
            type_uri: URI reference that identifies the problem type
            instance: URI reference that identifies the specific occurrence
            extensions: Additional problem-specific information
            headers: HTTP headers to include in response
        """
        self.title = title
        self.type_uri = type_uri or f"about:blank#{status_code}"
        self.instance = instance
        self.extensions = extensions or {}

        self.problem_details = {
            "type": self.type_uri,
            "title": title,
            "status": status_code,
        }
        if detail:
            self.problem_details["detail"] = detail
        if instance:
            self.problem_details["instance"] = instance
        self.problem_details.update(self.extensions)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


class ValidationError(ProblemDetailsException):
    """Payload or query parameters failed validation."""

    def __init__(
        self,
        detail: str = "The request data failed validation",
        errors: Optional[list[dict[str, Any]]] = None,
        instance: Optional[str] = None,
    ):
        extensions = {}
        if errors:
            extensions["errors"] = errors

        super().__init__(
            status_code=400,
            title="Validation Error",
            detail=detail,
            type_uri=f"{PROBLEM_BASE_URI}/validation-error",
            instance=instance,
            extensions=extensions,
        )


class AuthenticationError(ProblemDetailsException):
    """Bearer token present but invalid."""

    def __init__(
        self,
        detail: str = "Invalid API token",
        instance: Optional[str] = None,
    ):
        super().__init__(
            status_code=401,
            title="Authentication Required",
            detail=detail,
            type_uri=f"{PROBLEM_BASE_URI}/authentication-required",
            instance=instance,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(ProblemDetailsException):
    """The caller's role does not hold the action."""

    def __init__(
        self,
        action: str,
        role: str,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        super().__init__(
            status_code=403,
            title="Forbidden",
            detail=detail or f"Role '{role}' is not allowed to perform '{action}'",
            type_uri=f"{PROBLEM_BASE_URI}/forbidden",
            instance=instance,
            extensions={"action": action, "role": role},
        )


class NotFoundError(ProblemDetailsException):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
    ):
        if not detail:
            detail = f"The requested {resource_type}"
            if resource_id:
                detail += f" with ID '{resource_id}'"
            detail += " could not be found"

        extensions = {"resource_type": resource_type}
        if resource_id:
            extensions["resource_id"] = resource_id

        super().__init__(
            status_code=404,
            title="Resource Not Found",
            detail=detail,
            type_uri=f"{PROBLEM_BASE_URI}/resource-not-found",
            instance=instance,
            extensions=extensions,
        )


class ConflictError(ProblemDetailsException):
    """Exception for unique constraint conflicts."""

    def __init__(
        self,
        detail: str = "The request conflicts with the current state of the resource",
        conflicting_resource: Optional[Dict[str, Any]] = None,
        instance: Optional[str] = None,
    ):
        extensions = {}
        if conflicting_resource:
            extensions["conflicting_resource"] = conflicting_resource

        super().__init__(
            status_code=409,
            title="Resource Conflict",
            detail=detail,
            type_uri=f"{PROBLEM_BASE_URI}/resource-conflict",
            instance=instance,
            extensions=extensions,
        )


async def problem_details_handler(request: Request, exc: ProblemDetailsException) -> JSONResponse:
    """Render a Problem Details exception."""
    content = dict(exc.problem_details)
    content.setdefault("instance", str(request.url.path))
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
        media_type="application/problem+json",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Generic exception handler that converts unhandled exceptions to Problem Details format.

    Args:
        request: FastAPI request object
        exc: Unhandled exception

    Returns:
        JSONResponse: Problem Details formatted response
    """
    problem_details = {
        "type": f"{PROBLEM_BASE_URI}/internal-server-error",
        "title": "Internal Server Error",
        "status": 500,
        "detail": "An unexpected error occurred while processing the request",
        "instance": str(request.url.path),
        "error_id": str(uuid.uuid4()),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    return JSONResponse(
        status_code=500,
        content=problem_details,
        media_type="application/problem+json",
    )
