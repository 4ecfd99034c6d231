# scripts/check_status.py
import asyncio

from jobsuche.service import JobsucheService


async def main():
    service = JobsucheService.create()
    try:
        status = await service.get_server_status()
    finally:
        await service.aclose()
    print(f"{status.server_name} {status.version} → {status.api_url}: {status.api_connection_status}")


if __name__ == "__main__":
    asyncio.run(main())
