from clinic_client.api import ApiClient
from clinic_client.config import Settings, configure_logging
from clinic_client.connectivity import ConnectivityMonitor
from clinic_client.errors import ApiConnectionError, ApiError, ClinicClientError, QueuedForLaterError
from clinic_client.models import HttpMethod, QueuedRequest, SyncResult
from clinic_client.offline_sync import OfflineSyncQueue
from clinic_client.session import ClinicSession
from clinic_client.storage import TokenStore

__all__ = [
    "ApiClient",
    "ApiConnectionError",
    "ApiError",
    "ClinicClientError",
    "ClinicSession",
    "ConnectivityMonitor",
    "HttpMethod",
    "OfflineSyncQueue",
    "QueuedForLaterError",
    "QueuedRequest",
    "Settings",
    "SyncResult",
    "TokenStore",
    "configure_logging",
]
