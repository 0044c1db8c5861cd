import logging
import os
import sys

from console import Menu, register_commands
from tracker import RecordStore

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def main():
    try:
        with RecordStore() as store:
            menu = Menu(sys.stdin, sys.stdout)
            register_commands(menu, store)
            logger.debug("Registered commands: %s", sorted(menu.commands))
            menu.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, record store released")


if __name__ == "__main__":
    main()
