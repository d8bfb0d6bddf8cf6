"""Cola de sincronización offline.

Envuelve las llamadas salientes a la API: si no hay conexión la petición se
guarda en memoria y se reenvía cuando la conectividad vuelve. Al llamador se le
avisa con ``QueuedForLaterError``; el resultado del reenvío posterior no se le
comunica (el reintento es "fire-and-forget").

La cola vive sólo en memoria: no sobrevive a un reinicio del proceso.
"""

import asyncio
import logging
import time
from typing import Any

from clinic_client.errors import ApiConnectionError, QueuedForLaterError
from clinic_client.models import HttpMethod, QueuedRequest, SyncResult

logger = logging.getLogger(__name__)


# Verbos que no llevan cuerpo
_NO_BODY = (HttpMethod.GET, HttpMethod.DELETE)


class OfflineSyncQueue:
    """Cola FIFO de peticiones diferidas.

    ``api`` debe exponer ``get/post/put/patch/delete`` con la firma de
    ``ApiClient``. ``on_connectivity_change`` lo invoca el notificador de
    conectividad (ver ``ConnectivityMonitor``).
    """

    def __init__(self, api, is_online: bool = True):
        self.api = api
        self.is_online = is_online
        self._pending: list[QueuedRequest] = []
        # Se incrementa en cada clear_pending_requests() para invalidar pasadas en curso
        self._generation = 0
        self._syncing = False
        self._sync_task: asyncio.Task | None = None

    # --- API pública ---

    async def queue_request(self, method, path: str, body: Any = None, options: dict | None = None):
        request = QueuedRequest(method=method, path=path, body=body, options=options)

        if not self.is_online:
            self._enqueue(request)
            raise QueuedForLaterError(request, QueuedForLaterError.OFFLINE)

        try:
            return await self.execute_request(request)
        except ApiConnectionError as e:
            # Sin respuesta del servidor: se guarda para sincronizar después
            self._enqueue(request)
            raise QueuedForLaterError(request, QueuedForLaterError.CONNECTION_ERROR) from e

    def get_pending_requests_count(self) -> int:
        return len(self._pending)

    @property
    def pending_requests(self) -> tuple[QueuedRequest, ...]:
        return tuple(self._pending)

    def clear_pending_requests(self):
        dropped = len(self._pending)
        self._pending = []
        self._generation += 1
        logger.info(f"Cleared {dropped} pending requests")

    def on_connectivity_change(self, is_online: bool) -> asyncio.Task | None:
        """Registra el nuevo estado; si hay conexión y cola pendiente, lanza una pasada."""
        was_online = self.is_online
        self.is_online = bool(is_online)
        if was_online != self.is_online:
            logger.info(f"Connectivity changed: {'online' if self.is_online else 'offline'}")
        if self.is_online and self._pending:
            return self._schedule_sync()
        return None

    @property
    def sync_task(self) -> asyncio.Task | None:
        return self._sync_task

    async def execute_request(self, request: QueuedRequest):
        handler = getattr(self.api, request.method.value.lower())
        if request.method in _NO_BODY:
            return await handler(request.path, request.options)
        return await handler(request.path, request.body, request.options)

    async def sync_pending_requests(self) -> SyncResult:
        """Una pasada de sincronización sobre la foto actual de la cola."""
        result = SyncResult()
        if self._syncing:
            logger.debug("Sync pass already in progress, skipping")
            return result

        # Foto + vaciado sin puntos de suspensión entre medio
        requests, self._pending = self._pending, []
        generation = self._generation
        if not requests:
            return result

        self._syncing = True
        logger.info(f"Syncing {len(requests)} pending requests...")
        index = 0
        try:
            for index, request in enumerate(requests):
                if generation != self._generation:
                    result.discarded += len(requests) - index
                    break
                try:
                    await self.execute_request(request)
                    result.synced += 1
                    logger.info(f"Request synced: {request.describe()}")
                except Exception as e:
                    if generation != self._generation:
                        result.discarded += 1
                        continue
                    retry = request.model_copy(update={"attempts": request.attempts + 1, "enqueued_at": time.time()})
                    self._pending.append(retry)
                    result.requeued += 1
                    logger.warning(f"Error syncing {request.describe()} (attempt {retry.attempts}): {e}. Re-queued at tail")
        except asyncio.CancelledError:
            if generation == self._generation:
                # Lo que no llegó a ejecutarse vuelve al frente de la cola
                self._pending[:0] = requests[index:]
            raise
        finally:
            self._syncing = False

        logger.info(f"Sync pass finished: {result.synced} synced, {result.requeued} re-queued, {result.discarded} discarded")
        return result

    # --- internos ---

    def _enqueue(self, request: QueuedRequest):
        self._pending.append(request)
        logger.info(f"Queued {request.describe()} for later sync ({len(self._pending)} pending)")

    def _schedule_sync(self) -> asyncio.Task | None:
        if self._syncing or (self._sync_task and not self._sync_task.done()):
            logger.debug("Sync pass already scheduled")
            return self._sync_task
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop; pending requests will sync on the next online notification")
            return None
        self._sync_task = loop.create_task(self.sync_pending_requests())
        return self._sync_task
