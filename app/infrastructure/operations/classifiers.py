"""Error classifiers for backend exceptions.

Converts native client exceptions (AWS SDK, Google Cloud, PyMongo) into
standardized ErrorClassification objects. The retry policy retries every
failure uniformly; classification only enriches the terminal error event so
transient faults can be told apart from fatal ones.

Key Functions:
- classify_aws_error(): botocore errors -> ErrorClassification
- classify_google_error(): google.api_core / google.auth errors -> ErrorClassification
- classify_mongo_error(): pymongo errors -> ErrorClassification
- classify_backend_error(): dispatch on exception type

Usage:
    from infrastructure.operations.classifiers import classify_backend_error

    try:
        client.put_item(TableName="GameState", Item=item)
    except Exception as exc:
        classification = classify_backend_error(exc)
"""

from botocore.exceptions import BotoCoreError, ClientError
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions
from pymongo import errors as mongo_errors

from infrastructure.operations.result import ErrorClassification
from infrastructure.operations.status import OperationStatus

_AWS_TRANSIENT_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "ProvisionedThroughputExceededException",
        "TransactionConflictException",
        "InternalServerError",
        "ServiceUnavailable",
    }
)

_AWS_UNAUTHORIZED_CODES = frozenset(
    {
        "AccessDeniedException",
        "UnrecognizedClientException",
        "InvalidSignatureException",
        "ExpiredTokenException",
        "MissingAuthenticationTokenException",
    }
)

# Mongo server error codes: 13 Unauthorized, 18 AuthenticationFailed.
# Cosmos DB reports request-rate throttling as 16500.
_MONGO_UNAUTHORIZED_CODES = frozenset({13, 18})
_MONGO_THROTTLED_CODES = frozenset({16500})


def classify_aws_error(exc: Exception) -> ErrorClassification:
    """Classify AWS SDK errors.

    Error Code Mapping:
    - Throttling / ProvisionedThroughputExceeded / 5xx: TRANSIENT_ERROR
    - AccessDenied / bad credentials: UNAUTHORIZED
    - ResourceNotFoundException (missing table): NOT_FOUND
    - ValidationException: VALIDATION_ERROR
    - Other: TRANSIENT_ERROR (AWS convention)

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        ErrorClassification for the exception
    """
    if not isinstance(exc, ClientError):
        # BotoCoreError covers endpoint/connection/read timeouts
        return ErrorClassification.transient(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_info = exc.response.get("Error", {}) if exc.response else {}
    error_code = error_info.get("Code", "Unknown")
    message = error_info.get("Message", str(exc))

    if error_code in _AWS_TRANSIENT_CODES:
        return ErrorClassification.transient(
            f"AWS API throttled or unavailable: {message}", error_code=error_code
        )

    if error_code in _AWS_UNAUTHORIZED_CODES:
        return ErrorClassification(
            OperationStatus.UNAUTHORIZED, "AWS API access denied", error_code
        )

    if error_code == "ResourceNotFoundException":
        return ErrorClassification(
            OperationStatus.NOT_FOUND, f"AWS resource not found: {message}", error_code
        )

    if error_code == "ValidationException":
        return ErrorClassification(
            OperationStatus.VALIDATION_ERROR,
            f"AWS validation error: {message}",
            error_code,
        )

    # AWS SDK convention: unknown errors are transient
    return ErrorClassification.transient(
        f"AWS client error: {error_code}", error_code=error_code
    )


def classify_google_error(exc: Exception) -> ErrorClassification:
    """Classify Google Cloud client errors.

    Status Mapping:
    - 429 / 500 / 503 / 504 / Aborted (transaction contention): TRANSIENT_ERROR
    - 401 / 403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 400 InvalidArgument: VALIDATION_ERROR
    - Other API errors: PERMANENT_ERROR

    Args:
        exc: Exception raised by google-cloud-datastore or google-auth

    Returns:
        ErrorClassification for the exception
    """
    if isinstance(exc, google_auth_exceptions.TransportError):
        return ErrorClassification.transient(
            f"Google transport error: {str(exc)}", error_code="CONNECTION_ERROR"
        )

    if isinstance(exc, google_auth_exceptions.GoogleAuthError):
        return ErrorClassification(
            OperationStatus.UNAUTHORIZED,
            f"Google authentication failed: {str(exc)}",
            "UNAUTHENTICATED",
        )

    if not isinstance(exc, google_exceptions.GoogleAPICallError):
        return ErrorClassification.transient(
            f"Google connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_code = type(exc).__name__

    if isinstance(
        exc,
        (
            google_exceptions.TooManyRequests,
            google_exceptions.ServiceUnavailable,
            google_exceptions.InternalServerError,
            google_exceptions.DeadlineExceeded,
            google_exceptions.Aborted,
        ),
    ):
        return ErrorClassification.transient(
            f"Google API unavailable ({exc.code}): {exc.message}",
            error_code=error_code,
        )

    if isinstance(
        exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)
    ):
        return ErrorClassification(
            OperationStatus.UNAUTHORIZED, "Google API access denied", error_code
        )

    if isinstance(exc, google_exceptions.NotFound):
        return ErrorClassification(
            OperationStatus.NOT_FOUND, f"Google resource not found: {exc.message}", error_code
        )

    if isinstance(exc, google_exceptions.InvalidArgument):
        return ErrorClassification(
            OperationStatus.VALIDATION_ERROR,
            f"Google API rejected request: {exc.message}",
            error_code,
        )

    return ErrorClassification.permanent(
        f"Google API error ({exc.code}): {exc.message}", error_code=error_code
    )


def classify_mongo_error(exc: Exception) -> ErrorClassification:
    """Classify PyMongo errors raised against the Cosmos DB Mongo API.

    Mapping:
    - AutoReconnect / NetworkTimeout / ConnectionFailure: TRANSIENT_ERROR
    - OperationFailure 16500 (Cosmos request rate too large): TRANSIENT_ERROR
    - OperationFailure 13 / 18: UNAUTHORIZED
    - ConfigurationError / InvalidURI: PERMANENT_ERROR
    - Other PyMongo errors: PERMANENT_ERROR

    Args:
        exc: Exception raised by pymongo

    Returns:
        ErrorClassification for the exception
    """
    if isinstance(exc, mongo_errors.ConnectionFailure):
        # AutoReconnect, NetworkTimeout and ServerSelectionTimeoutError included
        return ErrorClassification.transient(
            f"Mongo connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    if isinstance(exc, mongo_errors.OperationFailure):
        code = exc.code
        if code in _MONGO_THROTTLED_CODES:
            return ErrorClassification.transient(
                "Cosmos DB request rate too large", error_code=str(code)
            )
        if code in _MONGO_UNAUTHORIZED_CODES:
            return ErrorClassification(
                OperationStatus.UNAUTHORIZED,
                "Mongo authentication failed",
                str(code),
            )
        return ErrorClassification.permanent(
            f"Mongo operation failed: {str(exc)}",
            error_code=str(code) if code is not None else None,
        )

    if isinstance(exc, (mongo_errors.ConfigurationError, mongo_errors.InvalidURI)):
        return ErrorClassification.permanent(
            f"Mongo configuration error: {str(exc)}", error_code="CONFIGURATION_ERROR"
        )

    return ErrorClassification.permanent(
        f"Mongo error: {type(exc).__name__}: {str(exc)}", error_code="MONGO_ERROR"
    )


def classify_backend_error(exc: BaseException) -> ErrorClassification:
    """Classify any exception raised while executing a backend call.

    Dispatches on the exception family. Input validation failures
    (``ValueError`` subclasses) are classified as VALIDATION_ERROR; anything
    unrecognized is treated as transient since the uniform retry policy
    cannot tell otherwise.

    Args:
        exc: Exception raised by a store operation

    Returns:
        ErrorClassification for the exception
    """
    if isinstance(exc, (ClientError, BotoCoreError)):
        return classify_aws_error(exc)

    if isinstance(
        exc,
        (google_exceptions.GoogleAPICallError, google_auth_exceptions.GoogleAuthError),
    ):
        return classify_google_error(exc)

    if isinstance(exc, mongo_errors.PyMongoError):
        return classify_mongo_error(exc)

    if isinstance(exc, ValueError):
        return ErrorClassification(
            OperationStatus.VALIDATION_ERROR, str(exc), "VALIDATION_ERROR"
        )

    return ErrorClassification.transient(
        f"Unexpected error: {type(exc).__name__}: {str(exc)}",
        error_code="UNKNOWN_ERROR",
    )
