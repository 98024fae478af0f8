"""Protocolos e contratos do core da aplicação."""

from .models import (
    SalaryBand,
    SubmissionRecord,
    SubscriptionPayload,
    SubscriptionResult,
    UpstreamResponse,
)
from .normalizer import SubmissionNormalizerProtocol
from .payload_builder import PayloadBuilderProtocol
from .subscriber_client import SubscriberClientProtocol
from .validator import SubmissionValidatorProtocol

__all__ = [
    "PayloadBuilderProtocol",
    "SalaryBand",
    "SubmissionNormalizerProtocol",
    "SubmissionRecord",
    "SubmissionValidatorProtocol",
    "SubscriberClientProtocol",
    "SubscriptionPayload",
    "SubscriptionResult",
    "UpstreamResponse",
]
