"""Entry: start the API server."""
import logging

import uvicorn

from wavecodes.config import API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    uvicorn.run(
        "wavecodes.api.app:app",
        host=API_HOST,
        port=API_PORT,
    )


if __name__ == "__main__":
    main()
