#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ipinfo.io Client
----------------
Looks up the caller's approximate location from its public IP.
"""

import json
import logging
from typing import Any, Dict

import requests

from ..errors import NetworkError, ParseError

# --- API Constants ---
IPINFO_URL = "https://ipinfo.io/json"
REQUEST_TIMEOUT_SECONDS = 10

REQUIRED_FIELDS = ("city", "region")
OPTIONAL_FIELDS = ("country", "timezone")


def _describe_http_error(response: requests.Response) -> str:
    """统一格式化 API 错误响应"""
    message = f"ipinfo request failed - {response.status_code} {response.reason}"
    try:
        details = response.json()
    except ValueError:
        details = (response.text or "").strip()
    if details:
        message += f" - {json.dumps(details) if isinstance(details, dict) else details}"
    return message


def parse_location(data: Any) -> Dict[str, Any]:
    """Extracts the location fields from an ipinfo JSON body.

    ``city`` and ``region`` must be non-empty strings; ``country`` and
    ``timezone`` are copied when present and otherwise left as None.
    """
    if not isinstance(data, dict):
        raise ParseError("ipinfo response is not a JSON object")

    location = {}
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ParseError(f"ipinfo response is missing the '{field}' field")
        location[field] = value.strip()
    for field in OPTIONAL_FIELDS:
        value = data.get(field)
        location[field] = value if isinstance(value, str) and value else None
    return location


def fetch_location(logger: logging.Logger, token: str, timeout: int = REQUEST_TIMEOUT_SECONDS) -> Dict[str, Any]:
    """调用 ipinfo.io 获取当前公网 IP 的位置

    Args:
        logger: The logging object.
        token: ipinfo.io API token, sent as a bearer token.
        timeout: Request timeout in seconds.

    Returns:
        dict with city, region, country and timezone.

    Raises:
        NetworkError: connection failure, timeout or non-2xx status.
        ParseError: body is not JSON or lacks city/region.
    """
    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
    }
    logger.info(f"向 {IPINFO_URL} 发送请求")

    try:
        response = requests.get(IPINFO_URL, headers=headers, timeout=timeout)
    except requests.exceptions.Timeout:
        raise NetworkError(f"ipinfo request timed out after {timeout} seconds")
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"ipinfo request failed - {e}")

    if not response.ok:
        raise NetworkError(_describe_http_error(response))

    try:
        data = response.json()
    except ValueError:
        raise ParseError("ipinfo response is not valid JSON")
    logger.debug(f"API 响应: {data}")

    return parse_location(data)
