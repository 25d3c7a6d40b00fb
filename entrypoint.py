"""Backend entrypoint. Starts uvicorn with host and port from settings."""
import uvicorn

from customer_accounts.config.settings import get_settings
from customer_accounts.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    main()
