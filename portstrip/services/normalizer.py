"""Software-only simulation / demo - no real systems will be contacted or modified."""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, List

from ..logging_config import logger
from ..models.schemas import StrippedAddress
from ..utils.address_tools import classify_address, split_port


class AddressTypeError(TypeError):
    """Raised when a batch item is not a string."""


def strip_address(address: Any) -> StrippedAddress:
    if not isinstance(address, str):
        raise AddressTypeError(f"Address must be a string, got {type(address).__name__}")
    host, port = split_port(address)
    return StrippedAddress(original=address, host=host, port=port, shape=classify_address(address))


def strip_ports(addresses: Iterable[Any]) -> List[StrippedAddress]:
    results: List[StrippedAddress] = []
    shapes: Counter[str] = Counter()
    for address in addresses:
        try:
            item = strip_address(address)
        except AddressTypeError:
            logger.warning("address.rejected", position=len(results), value_type=type(address).__name__)
            raise
        if item.port is not None:
            logger.debug("address.stripped", original=item.original, host=item.host, port=item.port)
        shapes.update([item.shape.value])
        results.append(item)
    logger.info(
        "batch.complete",
        total=len(results),
        with_port=sum(1 for item in results if item.port is not None),
        shapes=dict(shapes),
    )
    return results
