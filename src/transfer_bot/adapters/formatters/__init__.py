"""Text formatters."""

from transfer_bot.adapters.formatters.trip_text_formatter import (
    MONETIZATION_MESSAGE,
    TripTextFormatter,
)

__all__ = ["MONETIZATION_MESSAGE", "TripTextFormatter"]
