import asyncio
import httpx
import logging
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT = 5.0


class ConnectivityMonitor:
    """Sondea periódicamente la raíz del servidor y notifica cambios de conectividad.

    Cualquier respuesta HTTP (incluso 4xx/5xx) cuenta como "online": el
    criterio es el mismo que usa la cola para clasificar errores de conexión.
    Los listeners se llaman sólo en transiciones (y en el primer sondeo); los
    registrados con ``every_check=True`` reciben el resultado de cada sondeo.
    """

    def __init__(
        self,
        probe_url: str,
        interval: float = 15.0,
        timeout: float = DEFAULT_PROBE_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.probe_url = probe_url
        self.interval = max(0.1, float(interval))
        self.timeout = timeout
        self.is_online: bool | None = None
        self._listeners: list[Callable[[bool], object]] = []
        self._check_listeners: list[Callable[[bool], object]] = []
        self._transport = transport
        self._task: asyncio.Task | None = None

    def add_listener(self, listener: Callable[[bool], object], every_check: bool = False):
        (self._check_listeners if every_check else self._listeners).append(listener)

    def remove_listener(self, listener: Callable[[bool], object]):
        for listeners in (self._listeners, self._check_listeners):
            if listener in listeners:
                listeners.remove(listener)

    async def probe(self) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                await client.get(self.probe_url)
            return True
        except httpx.RequestError as e:
            logger.debug(f"Connectivity probe to {self.probe_url} failed: {type(e).__name__}: {e}")
            return False

    async def check_now(self) -> bool:
        online = await self.probe()
        self._update(online)
        return online

    def _update(self, online: bool):
        previous = self.is_online
        self.is_online = online
        listeners = list(self._check_listeners)
        if online != previous:
            if previous is not None:
                logger.info(f"Connectivity {'restored' if online else 'lost'} ({self.probe_url})")
            listeners += self._listeners
        for listener in listeners:
            try:
                listener(online)
            except Exception:
                logger.exception("Connectivity listener failed")

    async def _run(self):
        while True:
            await self.check_now()
            await asyncio.sleep(self.interval)

    def start(self):
        if self._task and not self._task.done():
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(f"Connectivity monitor started (every {self.interval}s against {self.probe_url})")

    async def stop(self):
        if not self._task:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Connectivity monitor stopped")
