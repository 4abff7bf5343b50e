# -*- coding: utf-8 -*-
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..constants import LOCATION_COLLECTION, LOCATION_DOCUMENT_ID
from ..errors import ConfigError
from ..utils.config import Config
from ..utils.firestore_client import get_firestore_client, set_document
from ..utils.geolocation import fetch_location


def handle_location(logger: logging.Logger, config: Config) -> Dict[str, Any]:
    """处理 'location' 命令。

    The lookup runs before Firestore is touched and the previous record is
    overwritten in one write, so a failure leaves the stored location as it was.
    """
    if not config.ipinfo_token:
        raise ConfigError("IPINFO_TOKEN is required for the location command")

    logger.info("Fetching location data from ipinfo.io...")
    location = fetch_location(logger, config.ipinfo_token)
    location["updated_at"] = datetime.now(timezone.utc)

    client = get_firestore_client(logger, config)
    set_document(logger, client, LOCATION_COLLECTION, LOCATION_DOCUMENT_ID, location)

    print(f"Updated location: {location['city']}, {location['region']}")
    return location
