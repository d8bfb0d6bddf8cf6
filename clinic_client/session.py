import asyncio
import httpx
import logging

from clinic_client.api import ApiClient
from clinic_client.config import Settings
from clinic_client.connectivity import ConnectivityMonitor
from clinic_client.offline_sync import OfflineSyncQueue
from clinic_client.services import (
    ActivityLogService,
    AppointmentService,
    AuthService,
    DashboardService,
    FinancialService,
    PatientService,
    ReportService,
)
from clinic_client.storage import TokenStore

logger = logging.getLogger(__name__)


class ClinicSession:
    """Contexto de la aplicación: cliente HTTP, cola offline, monitor y servicios.

    Se crea una vez al arrancar y se cierra al salir::

        async with ClinicSession(Settings.from_env()) as session:
            await session.auth.login(email, password)
            await session.sync.queue_request("POST", "/movimientos", movimiento)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        monitor: ConnectivityMonitor | None = None,
    ):
        self.settings = settings or Settings()
        self.token_store = token_store or TokenStore(self.settings.token)
        self.api = ApiClient(self.settings, self.token_store, transport=transport)
        self.sync = OfflineSyncQueue(self.api)

        if monitor is None and self.settings.probe_interval > 0:
            monitor = ConnectivityMonitor(self.settings.probe_url, interval=self.settings.probe_interval, transport=transport)
        self.monitor = monitor
        if self.monitor is not None:
            self.monitor.add_listener(self.sync.on_connectivity_change, every_check=True)

        self.auth = AuthService(self.api, tz=self.settings.timezone)
        self.patients = PatientService(self.api, tz=self.settings.timezone)
        self.appointments = AppointmentService(self.api, tz=self.settings.timezone)
        self.financial = FinancialService(self.api, tz=self.settings.timezone)
        self.reports = ReportService(self.api, tz=self.settings.timezone)
        self.dashboard = DashboardService(self.api, tz=self.settings.timezone)
        self.activity_log = ActivityLogService(self.api, tz=self.settings.timezone)
        self._started = False

    async def start(self):
        if self._started:
            return
        if self.monitor is not None:
            self.monitor.start()
        self._started = True
        logger.info(f"Clinic session started against {self.settings.api_url}")

    async def close(self):
        if self.monitor is not None:
            self.monitor.remove_listener(self.sync.on_connectivity_change)
            await self.monitor.stop()

        task = self.sync.sync_task
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        pending = self.sync.get_pending_requests_count()
        if pending:
            logger.warning(f"Closing session with {pending} pending requests; they will be lost")
        await self.api.close()
        self._started = False
        logger.info("Clinic session closed")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
