"""MeterValues payload decoding."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from .models import MeterValuesRequest

logger = logging.getLogger(__name__)


def decode_meter_values(raw: str) -> Optional[MeterValuesRequest]:
    """Decode a record's JSON payload as a MeterValues request.

    Traces interleave MeterValues with every other OCPP message on the
    same line format, so a payload that is not valid JSON or does not
    have the MeterValues shape is expected and yields None.
    """
    try:
        return MeterValuesRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.debug(f"Payload is not a MeterValues request ({e.error_count()} errors)")
        return None
