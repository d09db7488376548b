import logging
import os
import socket

from shop_admin.logging_config import configure_logging
from shop_admin.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("shop_admin.app")

app = create_dash_app(os.getenv("SHOP_ADMIN_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int) -> int:
    """Scan upward from start_port for a port nobody is listening on."""
    for port in range(start_port, start_port + 100):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8050"))
    final_port = find_free_port(preferred_port)

    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning("Port taken, using next free port", extra={"requested": preferred_port, "port": final_port})

    app.run(host="0.0.0.0", port=final_port, debug=debug)
