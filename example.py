"""Demonstrate the usage of the library."""

import asyncio
import logging

from aiohttp import ClientSession

from pygaggiuino import GaggiuinoClient, GaggiuinoError

BASE_URL = "http://gaggiuino.local"


async def main():
    """Async main."""
    logging.basicConfig(level=logging.DEBUG)

    async with ClientSession() as session:
        client = GaggiuinoClient(BASE_URL, client=session)

        if not await client.is_healthy():
            print(f"No machine reachable at {BASE_URL}")
            return

        status = await client.get_machine_status()
        print(status.to_json())

        try:
            shot = await client.get_latest_shot()
        except GaggiuinoError as ex:
            print(f"Could not get the latest shot: {ex}")
        else:
            print(f"Shot {shot.id} at {shot.date}: {shot.duration_seconds}s")
            print(f"Pressure: {shot.datapoints.pressure_bar}")

        profiles = await client.get_profiles()
        for profile in profiles:
            print(profile.id, profile.name, profile.selected)


asyncio.run(main())
