"""API errors and the mapping from CloudFront service error codes onto them."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Categories of API error, each corresponding to a class of HTTP response."""

    BAD_REQUEST = "BadRequest"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    LIMIT_EXCEEDED = "LimitExceeded"
    INTERNAL_ERROR = "InternalError"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"


class ApiError(Exception):
    """An error carrying an API error code, a message and an optional cause."""

    def __init__(self, code: ErrorCode, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ApiError({self.code.value!r}, {self.message!r})"


class AwsError(Exception):
    """An error reported by the cloud service, identified by its service error code."""

    def __init__(self, code: str, message: str = ""):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


_FORBIDDEN = frozenset({"AccessDenied"})

_LIMIT_EXCEEDED = frozenset(
    {
        "BatchTooLarge",
        "FieldLevelEncryptionProfileSizeExceeded",
        "TooManyCacheBehaviors",
        "TooManyCertificates",
        "TooManyCloudFrontOriginAccessIdentities",
        "TooManyCookieNamesInWhiteList",
        "TooManyDistributionCNAMEs",
        "TooManyDistributions",
        "TooManyDistributionsAssociatedToFieldLevelEncryptionConfig",
        "TooManyDistributionsWithLambdaAssociations",
        "TooManyFieldLevelEncryptionConfigs",
        "TooManyFieldLevelEncryptionContentTypeProfiles",
        "TooManyFieldLevelEncryptionEncryptionEntities",
        "TooManyFieldLevelEncryptionFieldPatterns",
        "TooManyFieldLevelEncryptionProfiles",
        "TooManyFieldLevelEncryptionQueryArgProfiles",
        "TooManyHeadersInForwardedValues",
        "TooManyInvalidationsInProgress",
        "TooManyLambdaFunctionAssociations",
        "TooManyOriginCustomHeaders",
        "TooManyOriginGroupsPerDistribution",
        "TooManyOrigins",
        "TooManyPublicKeys",
        "TooManyQueryStringParameters",
        "TooManyStreamingDistributionCNAMEs",
        "TooManyStreamingDistributions",
        "TooManyTrustedSigners",
    }
)

_CONFLICT = frozenset(
    {
        "CNAMEAlreadyExists",
        "DistributionAlreadyExists",
        "FieldLevelEncryptionConfigAlreadyExists",
        "FieldLevelEncryptionConfigInUse",
        "FieldLevelEncryptionProfileAlreadyExists",
        "FieldLevelEncryptionProfileInUse",
        "CloudFrontOriginAccessIdentityAlreadyExists",
        "CloudFrontOriginAccessIdentityInUse",
        "PublicKeyAlreadyExists",
        "PublicKeyInUse",
        "StreamingDistributionAlreadyExists",
    }
)

_BAD_REQUEST = frozenset(
    {
        "CannotChangeImmutablePublicKeyFields",
        "DistributionNotDisabled",
        "IllegalFieldLevelEncryptionConfigAssociationWithCacheBehavior",
        "IllegalUpdate",
        "InconsistentQuantities",
        "InvalidArgument",
        "InvalidDefaultRootObject",
        "InvalidErrorCode",
        "InvalidForwardCookies",
        "InvalidGeoRestrictionParameter",
        "InvalidHeadersForS3Origin",
        "InvalidIfMatchVersion",
        "InvalidLambdaFunctionAssociation",
        "InvalidLocationCode",
        "InvalidMinimumProtocolVersion",
        "InvalidOrigin",
        "InvalidOriginAccessIdentity",
        "InvalidOriginKeepaliveTimeout",
        "InvalidOriginReadTimeout",
        "InvalidProtocolSettings",
        "InvalidQueryStringParameters",
        "InvalidRelativePath",
        "InvalidRequiredProtocol",
        "InvalidResponseCode",
        "InvalidTTLOrder",
        "InvalidTagging",
        "InvalidViewerCertificate",
        "InvalidWebACLId",
        "MissingBody",
        "PreconditionFailed",
        "QueryArgProfileEmpty",
        "StreamingDistributionNotDisabled",
    }
)

_NOT_FOUND = frozenset(
    {
        "NoSuchCloudFrontOriginAccessIdentity",
        "NoSuchDistribution",
        "NoSuchFieldLevelEncryptionConfig",
        "NoSuchFieldLevelEncryptionProfile",
        "NoSuchInvalidation",
        "NoSuchOrigin",
        "NoSuchPublicKey",
        "NoSuchResource",
        "NoSuchStreamingDistribution",
        "TrustedSignerDoesNotExist",
    }
)

_CATEGORIES = (
    (_FORBIDDEN, ErrorCode.FORBIDDEN),
    (_LIMIT_EXCEEDED, ErrorCode.LIMIT_EXCEEDED),
    (_CONFLICT, ErrorCode.CONFLICT),
    (_BAD_REQUEST, ErrorCode.BAD_REQUEST),
    (_NOT_FOUND, ErrorCode.NOT_FOUND),
)


def _root_cause(err: BaseException) -> BaseException:
    seen = set()
    while err.__cause__ is not None and id(err) not in seen:
        seen.add(id(err))
        err = err.__cause__
    return err


def err_code(msg: str, err: BaseException) -> ApiError:
    """Translate an error from the cloud service into an ApiError with a fitting code."""
    root = _root_cause(err)
    if isinstance(root, AwsError):
        for codes, api_code in _CATEGORIES:
            if root.code in codes:
                return ApiError(api_code, msg, root)
        return ApiError(ErrorCode.BAD_REQUEST, f"{msg}: {root.message}", root)
    return ApiError(ErrorCode.INTERNAL_ERROR, msg, err)