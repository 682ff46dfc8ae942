"""Filesystem implementation of the ReceiptStore."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from musicals.domain import Order
from musicals.domain.errors import ReceiptWriteFailedError
from musicals.receipts import render_receipt
from musicals.stores.interfaces import ReceiptStore

logger = logging.getLogger(__name__)


class FileReceiptStore(ReceiptStore):
    """Writes one text file per order into a receipts directory."""

    def __init__(
        self,
        directory: Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._directory = Path(directory)
        self._clock = clock

    def filename_for(self, order: Order) -> str:
        timestamp = self._clock().strftime("%Y%m%d_%H%M%S")
        return f"receipt_{timestamp}_{order.id.short}.txt"

    def save(self, order: Order) -> str:
        path = self._directory / self.filename_for(order)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(render_receipt(order), encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write receipt for order %s: %s", order.id, exc)
            raise ReceiptWriteFailedError(order, str(exc)) from exc
        logger.info("Receipt for order %s written to %s", order.id, path)
        return str(path.resolve())
