"""Contracts (protocols) implemented by adapters."""

from transfer_bot.domain.contracts.trip_text_formatter import TripTextFormatterProtocol

__all__ = ["TripTextFormatterProtocol"]
