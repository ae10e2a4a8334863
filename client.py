# client.py
from __future__ import annotations
import asyncio
import json
import sys
from typing import List, Optional

import httpx

import settings


class SchedulerClient:
    """Async HTTP client for the scheduler API.

    Every call raises httpx.HTTPStatusError on a non-2xx response.
    """

    def __init__(self, base_url: str = settings.SCHEDULER_HTTP, http: Optional[httpx.AsyncClient] = None,
                 timeout: float = 15):
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "SchedulerClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def create_person(self, name: str, email: str) -> dict:
        r = await self._http.post("/persons", json={"name": name, "email": email})
        r.raise_for_status()
        return r.json()

    async def schedule(self, person_id: str) -> List[dict]:
        r = await self._http.get(f"/persons/{person_id}/schedule")
        r.raise_for_status()
        return r.json()

    async def create_meeting(self, time: str, participants: List[str]) -> dict:
        r = await self._http.post("/meetings", json={"time": time, "participants": participants})
        r.raise_for_status()
        return r.json()

    async def suggest(self, participants: List[str], from_: str, to: Optional[str] = None) -> List[str]:
        payload = {"participants": participants, "from": from_}
        if to is not None:
            payload["to"] = to
        r = await self._http.post("/meetings/suggest", json=payload)
        r.raise_for_status()
        return r.json()["slots"]


async def main(argv: List[str]) -> None:
    # usage: python client.py <person-id> [<person-id> ...] <from-iso>
    *participants, from_ = argv
    async with SchedulerClient() as client:
        print(json.dumps(await client.suggest(participants, from_), indent=2))


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
