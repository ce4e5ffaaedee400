"""
ContactBook - Entry Point.

`python main.py` starts an interactive prompt over an in-memory book
seeded with sample contacts. Type `exit` to quit.
"""

import logging

from contactbook.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from contactbook.core.errors import ContactBookError
from contactbook.core.logic import LogicManager
from contactbook.data.model_manager import ModelManager
from contactbook.data.sample_data import get_sample_persons

logger = logging.getLogger(__name__)


def main() -> None:
    logic = LogicManager(ModelManager(get_sample_persons()))
    logger.info("ContactBook started")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip() == "exit":
            break
        try:
            print(logic.execute(line).feedback)
        except ContactBookError as exc:
            print(exc)
    logger.info("ContactBook stopped")


if __name__ == "__main__":
    main()
