"""Run the presencekit API: python -m presencekit"""

import uvicorn

from presencekit.config import Config


def main() -> None:
    uvicorn.run(
        "presencekit.api.app:app",
        host=Config.API_HOST,
        port=Config.API_PORT,
    )


if __name__ == "__main__":
    main()
