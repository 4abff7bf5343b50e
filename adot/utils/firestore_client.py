#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Firestore Client
----------------
Builds an authenticated Firestore client and performs single-attempt writes.

Every google-cloud exception is translated into NetworkError (remote failures)
or ConfigError (unusable credentials) here, so callers only see adot errors.
"""

import logging
from typing import Any, Dict

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore
from google.oauth2 import service_account

from ..errors import ConfigError, NetworkError
from .config import Config

WRITE_TIMEOUT_SECONDS = 30

REMOTE_ERRORS = (
    api_exceptions.GoogleAPICallError,
    api_exceptions.RetryError,
    auth_exceptions.GoogleAuthError,
)


def get_firestore_client(logger: logging.Logger, config: Config) -> firestore.Client:
    """使用服务账号凭据创建 Firestore 客户端"""
    if not config.credentials_path or not config.project_id:
        raise ConfigError("Firestore needs both a credential file and a project id")

    try:
        credentials = service_account.Credentials.from_service_account_file(config.credentials_path)
    except (OSError, ValueError) as e:
        raise ConfigError(f"cannot load service-account credentials from {config.credentials_path}: {e}")

    logger.debug(f"Creating Firestore client for project {config.project_id}")
    try:
        return firestore.Client(project=config.project_id, credentials=credentials)
    except auth_exceptions.GoogleAuthError as e:
        raise ConfigError(f"cannot create Firestore client: {e}")


def _write_failed(collection: str, document_id: str, error: Exception) -> NetworkError:
    return NetworkError(f"Firestore write to {collection}/{document_id} failed - {error}")


def insert_document(
    logger: logging.Logger,
    client: firestore.Client,
    collection: str,
    document_id: str,
    data: Dict[str, Any],
    timeout: int = WRITE_TIMEOUT_SECONDS,
) -> None:
    """Creates a new document; fails if one with the same id already exists."""
    logger.info(f"Creating document {collection}/{document_id}")
    try:
        client.collection(collection).document(document_id).create(data, retry=None, timeout=timeout)
    except REMOTE_ERRORS as e:
        raise _write_failed(collection, document_id, e)
    logger.debug(f"Document {collection}/{document_id} created")


def set_document(
    logger: logging.Logger,
    client: firestore.Client,
    collection: str,
    document_id: str,
    data: Dict[str, Any],
    timeout: int = WRITE_TIMEOUT_SECONDS,
) -> None:
    """Creates or fully overwrites a document."""
    logger.info(f"Writing document {collection}/{document_id}")
    try:
        client.collection(collection).document(document_id).set(data, retry=None, timeout=timeout)
    except REMOTE_ERRORS as e:
        raise _write_failed(collection, document_id, e)
    logger.debug(f"Document {collection}/{document_id} written")
