"""k1s0 featureflag library."""

from .adapter import FeatureFlagAdapter
from .config import BasicAuthConfig, HttpAdapterConfig, load_config
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .gates import (
    default_feature_value,
    delete_request_body,
    gate_request_body,
    result_for_feature,
)
from .http_adapter import HttpAdapter
from .memory import InMemoryAdapter
from .models import (
    Actor,
    Feature,
    FeatureLike,
    FeatureSnapshot,
    Gate,
    GateKey,
    GateLike,
    GateValue,
    ThingLike,
)
from .request import HttpRequest

__all__ = [
    "Actor",
    "BasicAuthConfig",
    "Feature",
    "FeatureFlagAdapter",
    "FeatureFlagError",
    "FeatureFlagErrorCodes",
    "FeatureLike",
    "FeatureSnapshot",
    "Gate",
    "GateKey",
    "GateLike",
    "GateValue",
    "HttpAdapter",
    "HttpAdapterConfig",
    "HttpRequest",
    "InMemoryAdapter",
    "ThingLike",
    "default_feature_value",
    "delete_request_body",
    "gate_request_body",
    "load_config",
    "result_for_feature",
]
