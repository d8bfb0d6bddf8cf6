import asyncio
import logging

from clinic_client.config import Settings, configure_logging
from clinic_client.diagnostics import check_backend
from clinic_client.session import ClinicSession

logger = logging.getLogger("clinic_client")


async def main() -> int:
    settings = Settings.from_env()
    async with ClinicSession(settings) as session:
        online = await session.monitor.check_now() if session.monitor else None
        logger.info(f"Server reachable: {online}")
        ok, message = await check_backend(session)
        logger.info(message)
        return 0 if ok else 1


if __name__ == '__main__':
    configure_logging()
    raise SystemExit(asyncio.run(main()))
