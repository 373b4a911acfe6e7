import json
import logging

from ..core.config import settings
from ..core.metrics import record_rendering
from ..core.utils import weak_etag
from .address import format_address, is_valid_address
from .emoji_hash import fingerprint_symbols

logger = logging.getLogger(__name__)

# Shown after the raw address instead of a fingerprint
ERROR_MARKER = "❌⚠️❓"

class EmojifiedService:
    """
    Renders an address next to its fingerprint:
      valid   → format_address(address) + spacing + fingerprint
      invalid → raw address + " " + ERROR_MARKER
    Validation happens once here; the hashing path never sees the decision.
    """
    def __init__(self, show_full: bool | None = None, spacing: str | None = None):
        self.show_full = settings.SHOW_FULL_ADDRESS if show_full is None else show_full
        self.spacing = settings.DEFAULT_SPACING if spacing is None else spacing

    def render(self, address: str, show_full: bool | None = None, spacing: str | None = None) -> dict:
        show_full = self.show_full if show_full is None else show_full
        spacing = self.spacing if spacing is None else spacing

        if not is_valid_address(address):
            logger.info("invalid address %r", format_address(address))
            record_rendering(valid=False)
            return {
                "address": address,
                "valid": False,
                "formatted": None,
                "fingerprint": None,
                "symbols": [],
                "label": f"{address} {ERROR_MARKER}",
            }

        formatted = format_address(address, show_full)
        symbols = fingerprint_symbols(address)
        pattern = "".join(symbols)
        logger.debug("rendered %s as %s", formatted, pattern)
        record_rendering(valid=True)
        return {
            "address": address,
            "valid": True,
            "formatted": formatted,
            "fingerprint": pattern,
            "symbols": symbols,
            "label": f"{formatted}{spacing}{pattern}",
        }

    def render_with_etag(self, address: str, show_full: bool | None = None, spacing: str | None = None) -> tuple[dict, str]:
        """Render and compute a weak ETag; output depends only on the inputs."""
        payload = self.render(address, show_full, spacing)
        etag = weak_etag(json.dumps(payload, separators=(',',':'), ensure_ascii=False).encode("utf-8"))
        return payload, etag

    def render_many(self, addresses: list[str], show_full: bool | None = None, spacing: str | None = None) -> list[dict]:
        return [self.render(a, show_full, spacing) for a in addresses]
