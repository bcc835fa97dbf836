import asyncio
import logging
import random
import sys

from future_tuple import Absent, translate, tupled

logger = logging.getLogger(__name__)


class NotFound(Exception):
    pass


async def fetch(key: str) -> str:
    await asyncio.sleep(random.uniform(0.1, 0.5))
    if key == "missing":
        raise NotFound(key)
    return f"<{key}>"


async def main_async():
    error, data = await translate(
        fetch("index"),
        on_success=lambda: logger.info("Fetched index"),
    )
    if error is Absent:
        print(data)

    # Failures come back as data, one tuple per operation.
    handle = tupled(on_failure=lambda: logger.info("Fetch failed"))
    keys = ["users", "missing", "posts"]
    results = await asyncio.gather(*(handle(fetch(key)) for key in keys))
    for key, (error, data) in zip(keys, results):
        if error is not Absent:
            print(f"{key}: {error!r}")
        else:
            print(f"{key}: {data}")


def main():
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=logging.DEBUG)
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
