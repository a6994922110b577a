"""Stock optimisation — First-Fit-Decreasing over standard stock lengths.

Pieces are placed longest first into the first open length with room for
the piece plus one saw kerf. When nothing open fits, the shortest catalog
length that takes the piece and its kerf is opened. Pieces longer than
every catalog length get a custom length, rounded up to the next
increment.
"""

from __future__ import annotations
import logging
import math

from wallframe.models import StockBin, StockOptions, StockOrderLine

logger = logging.getLogger(__name__)


class StockOptimizer:

    def __init__(self, options: StockOptions | None = None) -> None:
        self.options = options or StockOptions()

    def pack(self, pieces: list[float]) -> list[StockBin]:
        """Assign every positive piece to a stock length, in opening order."""
        kerf = self.options.kerf
        bins: list[StockBin] = []

        for piece in sorted((p for p in pieces if p > 0), reverse=True):
            target = next((b for b in bins if b.fits(piece)), None)
            if target is None:
                target = self._open_bin(piece)
                bins.append(target)
            target.pieces.append(piece)

        return bins

    def _open_bin(self, piece: float) -> StockBin:
        needed = piece + self.options.kerf
        for length in self.options.stock_lengths:
            if length >= needed:
                return StockBin(stock_length=length, kerf=self.options.kerf)

        increment = self.options.custom_length_increment
        length = math.ceil(needed / increment) * increment
        logger.info("Piece of %.1f mm exceeds stock, ordering custom %.0f mm", piece, length)
        return StockBin(stock_length=length, kerf=self.options.kerf, custom=True)

    @staticmethod
    def summarize(bins: list[StockBin]) -> list[StockOrderLine]:
        """Consolidate bins into purchase lines, shortest length first."""
        counts: dict[tuple[float, bool], int] = {}
        for b in bins:
            key = (b.stock_length, b.custom)
            counts[key] = counts.get(key, 0) + 1
        return [
            StockOrderLine(stock_length=length, count=count, custom=custom)
            for (length, custom), count in sorted(counts.items())
        ]
